# powbench/runtime/pool.py
#
# A fixed-size worker pool for data-parallel array kernels. The index range
# of the input is cut into contiguous chunks, one per worker, and each task
# writes into its own slice of a preallocated output buffer. Because every
# slice lands at its original offset, no merge step is needed to restore
# the input order.

import os
from concurrent.futures import ThreadPoolExecutor

import numpy as np


def default_workers():
    """Returns the available hardware parallelism, at least 1."""
    return os.cpu_count() or 1


def partition(length, parts):
    """
    Splits the index range [0, length) into contiguous, non-empty chunks.

    Chunk sizes differ by at most one element and the earlier chunks take
    the remainder. Asking for more parts than elements yields one chunk
    per element; a zero length yields no chunks.

    Args:
        length (int): Size of the range to split.
        parts (int): Requested number of chunks.

    Returns:
        A list of (start, stop) tuples in ascending order.
    """
    if parts < 1:
        raise ValueError(f"Number of parts must be at least 1, got {parts}.")
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}.")

    parts = min(parts, length)
    if parts == 0:
        return []

    base, extra = divmod(length, parts)
    bounds = []
    start = 0
    for i in range(parts):
        stop = start + base + (1 if i < extra else 0)
        bounds.append((start, stop))
        start = stop
    return bounds


class WorkerPool:
    """
    Runs an element-wise kernel over an array using a thread pool.

    The kernel is called as `kernel(src, out)` where `src` is a read-only
    view of one chunk of the input and `out` is the matching view of the
    output buffer. Kernels should be numpy ufuncs (or built on them) so the
    GIL is released while they run.

    Example:
        pool = WorkerPool(workers=4)
        result = pool.map_into(data, lambda src, out: np.square(src, out=out))
    """
    def __init__(self, workers=None):
        if workers is None:
            workers = default_workers()
        if workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {workers}.")
        self.workers = workers

    def __repr__(self):
        return f"WorkerPool(workers={self.workers})"

    def map_into(self, data, kernel, dtype=np.float64):
        """
        Applies `kernel` to every chunk of `data` in parallel.

        Args:
            data (numpy.ndarray): One-dimensional input. It is never written to.
            kernel: Callable taking (src, out) views of equal length.
            dtype: Element type of the output buffer.

        Returns:
            A new array of the same length as `data`, in input order.
        """
        out = np.empty(len(data), dtype=dtype)
        chunks = partition(len(data), self.workers)
        if not chunks:
            return out

        with ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            futures = [
                executor.submit(kernel, data[start:stop], out[start:stop])
                for start, stop in chunks
            ]
            # Re-raise the first worker failure in the caller's thread.
            for future in futures:
                future.result()
        return out
