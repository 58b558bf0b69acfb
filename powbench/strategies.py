# powbench/strategies.py
#
# The three interchangeable ways of raising every element of the dataset to
# the 10th power. The two sequential strategies share one element function
# and therefore produce bit-identical lists; the parallel strategy hands the
# work to numpy across a thread pool and is equal to them element-wise.
# Its timing includes the speedup of vectorized numpy over per-element
# Python calls, so even with one worker it beats the sequential pair.

import math
from collections import namedtuple

import numpy as np

from .runtime.pool import WorkerPool

EXPONENT = 10

# `parallel` strategies take the worker count as a second argument.
Strategy = namedtuple("Strategy", ["label", "func", "parallel"])


def heavy_op(x):
    """The per-element transformation: x raised to EXPONENT."""
    return math.pow(x, EXPONENT)


def loop_strategy(data):
    """
    Baseline: a plain for loop filling a preallocated list in index order.
    """
    result = [0.0] * len(data)
    for i, x in enumerate(data):
        result[i] = heavy_op(x)
    return result


def pipeline_strategy(data):
    """Declarative, single-threaded equivalent of `loop_strategy`."""
    return list(map(heavy_op, data))


def _power_kernel(src, out):
    np.power(src, EXPONENT, out=out)


def parallel_strategy(data, workers=None):
    """
    Data-parallel fan-out/fan-in over a pool of `workers` threads.

    Args:
        data: The dataset. Anything `numpy.asarray` accepts.
        workers (int): Pool size. Defaults to the hardware parallelism.

    Returns:
        A float64 numpy array in the same order as `data`.
    """
    data = np.asarray(data, dtype=np.float64)
    return WorkerPool(workers).map_into(data, _power_kernel)


# Fixed reporting order: baseline first.
STRATEGIES = (
    Strategy("Traditional loop", loop_strategy, False),
    Strategy("Sequential pipeline", pipeline_strategy, False),
    Strategy("Parallel pipeline", parallel_strategy, True),
)


def results_match(results, rtol=1e-12):
    """
    Checks that every result collection equals the first one element-wise.

    Args:
        results: Sequence of result collections (lists or arrays).
        rtol (float): Relative tolerance for the float comparison.

    Returns:
        True if all collections have the same length and values.
    """
    if not results:
        return True
    reference = np.asarray(results[0], dtype=np.float64)
    for other in results[1:]:
        other = np.asarray(other, dtype=np.float64)
        if other.shape != reference.shape:
            return False
        if not np.allclose(other, reference, rtol=rtol, atol=0.0):
            return False
    return True
