# powbench/__init__.py

# Expose the user-facing pieces of the benchmark at the top-level
# package namespace.

from .dataset import generate_dataset, NUM_ELEMENTS
from .strategies import (
    STRATEGIES,
    Strategy,
    loop_strategy,
    pipeline_strategy,
    parallel_strategy,
    results_match,
)
from .runner import measure, run_benchmark, run_suite
from .report import Report
