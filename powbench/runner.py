# powbench/runner.py
#
# Timing utilities shared by every strategy. A single measurement samples
# the monotonic clock immediately around one call. For steadier numbers,
# `run_benchmark` adds warm-up iterations and reports the median of the
# timed runs, which is resistant to system noise.

import time
import numpy as np

from .report import Report


def elapsed_ms(start, end):
    """Converts two perf_counter samples to whole milliseconds (truncated)."""
    return max(0, int((end - start) * 1000))


def measure(func, *args, **kwargs):
    """
    Calls `func` once and times it.

    Returns:
        A (result, elapsed_ms) tuple, with elapsed_ms a non-negative int.
    """
    start_time = time.perf_counter()
    result = func(*args, **kwargs)
    end_time = time.perf_counter()
    return result, elapsed_ms(start_time, end_time)


def run_benchmark(func, args, num_warmup=0, num_iter=1):
    """
    Times `func(*args)` after optional warm-up calls and returns the output
    of the last timed call together with the median duration. Every timed
    call goes through `measure`, so the truncation rule is the same as for
    a single measurement.

    Args:
        func: The function to benchmark.
        args: A tuple of arguments to pass to the function.
        num_warmup (int): Number of untimed runs before timing.
        num_iter (int): Number of timed iterations.

    Returns:
        A (result, median_ms) tuple. `result` is the output of the last
        timed run and `median_ms` the median execution time in whole
        milliseconds.
    """
    if num_warmup < 0:
        raise ValueError(f"num_warmup must be non-negative, got {num_warmup}.")
    if num_iter < 1:
        raise ValueError(f"num_iter must be at least 1, got {num_iter}.")

    # Warm-up runs
    for _ in range(num_warmup):
        func(*args)

    # Timed runs
    result = None
    times = []
    for _ in range(num_iter):
        result, ms = measure(func, *args)
        times.append(ms)

    return result, int(np.median(times))


def run_suite(data, strategies, workers=None, num_warmup=0, num_iter=1):
    """
    Times every strategy against the same dataset, in the given order.

    Dataset generation is not part of any timing: `data` must already be
    materialized.

    Args:
        data: The shared, read-only dataset.
        strategies: Iterable of `Strategy` entries.
        workers (int): Pool size handed to parallel strategies.
        num_warmup (int): Untimed runs per strategy.
        num_iter (int): Timed runs per strategy; the median is reported.

    Returns:
        A (report, results) tuple: a `Report` with one line per strategy
        and the list of result collections in the same order.
    """
    report = Report()
    results = []
    for strategy in strategies:
        args = (data, workers) if strategy.parallel else (data,)
        result, ms = run_benchmark(strategy.func, args, num_warmup, num_iter)
        report.add(strategy.label, ms)
        results.append(result)
    return report, results
