# conftest.py
#
# Shared fixtures. The project root is put on sys.path so the tests run
# against the working tree even when the package is not installed.

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from powbench import generate_dataset


@pytest.fixture
def small_data():
    """A reproducible 1,000-element dataset."""
    return generate_dataset(1_000, seed=1234)


@pytest.fixture
def fixed_data():
    return np.array([2.0, 3.0])
