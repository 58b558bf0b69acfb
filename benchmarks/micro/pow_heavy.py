# benchmarks/micro/pow_heavy.py
#
# Compares a traditional loop, a sequential pipeline and a parallel pipeline
# applying a heavy element-wise operation, x ** 10, to ten million random
# doubles. The dataset is built once up front and is excluded from every
# timing. Each strategy is timed once, in the fixed order below.

from powbench import generate_dataset, run_suite, STRATEGIES

def main():
    data = generate_dataset()

    report, _ = run_suite(data, STRATEGIES)
    report.print_report()

if __name__ == "__main__":
    main()
