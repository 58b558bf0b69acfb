# powbench/dataset.py
#
# Builds the synthetic input shared by every strategy: a flat array of
# uniformly distributed doubles. The array is frozen after creation so the
# parallel workers can read it without any locking.

import math

import numpy as np

NUM_ELEMENTS = 10_000_000
LOW = 1.0
HIGH = 100.0


def generate_dataset(size=NUM_ELEMENTS, low=LOW, high=HIGH, rng=None, seed=None):
    """
    Generates `size` independent random doubles drawn from [low, high).

    Args:
        size (int): Number of elements. Zero yields an empty array.
        low (float): Inclusive lower bound.
        high (float): Exclusive upper bound.
        rng (numpy.random.Generator): Source of randomness. When omitted, a
            new generator is created from `seed`.
        seed (int): Seed for the generator created when `rng` is None.
            Leave unset for a non-reproducible dataset.

    Returns:
        A read-only, float64 numpy array of length `size`.
    """
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise TypeError(f"Dataset size must be an integer, got {type(size).__name__}.")
    if size < 0:
        raise ValueError(f"Dataset size must be non-negative, got {size}.")
    if not low < high:
        raise ValueError(f"Lower bound {low} must be below upper bound {high}.")
    if not (math.isfinite(low) and math.isfinite(high) and math.isfinite(high - low)):
        raise ValueError(f"Bounds must be finite with a finite range, got [{low}, {high}).")

    if rng is None:
        rng = np.random.default_rng(seed)

    data = rng.uniform(low, high, int(size)).astype(np.float64, copy=False)
    data.flags.writeable = False
    return data
