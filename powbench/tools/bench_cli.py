# powbench/tools/bench_cli.py
#
# Implements the command-line interface for `powbench`. With no arguments it
# runs the fixed benchmark: ten million random doubles, three strategies,
# one timing line each. The optional flags only change the defaults.

import argparse
import sys

from ..dataset import generate_dataset, NUM_ELEMENTS, LOW, HIGH
from ..runner import run_suite
from ..strategies import STRATEGIES, results_match


def build_parser():
    parser = argparse.ArgumentParser(
        prog="powbench",
        description="Time a loop, a sequential pipeline and a parallel "
                    "pipeline raising random doubles to the 10th power."
    )
    parser.add_argument("--size", type=int, default=NUM_ELEMENTS,
                        help="number of elements in the dataset")
    parser.add_argument("--low", type=float, default=LOW,
                        help="inclusive lower bound of the values")
    parser.add_argument("--high", type=float, default=HIGH,
                        help="exclusive upper bound of the values")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for a reproducible dataset")
    parser.add_argument("--workers", type=int, default=None,
                        help="threads for the parallel pipeline "
                             "(default: CPU count)")
    parser.add_argument("--warmup", type=int, default=0,
                        help="untimed runs per strategy")
    parser.add_argument("--repeat", type=int, default=1,
                        help="timed runs per strategy; the median is reported")
    parser.add_argument("--verify", action="store_true",
                        help="check that all strategies agree")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.warmup < 0:
        parser.error("--warmup must be non-negative")
    if args.repeat < 1:
        parser.error("--repeat must be at least 1")

    try:
        data = generate_dataset(args.size, args.low, args.high, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    report, results = run_suite(
        data, STRATEGIES,
        workers=args.workers,
        num_warmup=args.warmup,
        num_iter=args.repeat,
    )
    report.print_report()

    if args.verify:
        if not results_match(results):
            print("Verification failed: strategy results differ", file=sys.stderr)
            return 1
        print("Verified: results match")
    return 0


if __name__ == "__main__":
    sys.exit(main())
