import numpy as np
import pytest

from powbench.runtime import WorkerPool, default_workers, partition


def test_default_workers_positive():
    assert default_workers() >= 1


@pytest.mark.parametrize("length,parts", [(10, 3), (10, 1), (7, 7), (100, 8), (3, 16)])
def test_partition_covers_range(length, parts):
    chunks = partition(length, parts)
    assert chunks[0][0] == 0
    assert chunks[-1][1] == length
    for (_, stop), (start, _) in zip(chunks, chunks[1:]):
        assert stop == start
    sizes = [stop - start for start, stop in chunks]
    assert min(sizes) >= 1
    assert max(sizes) - min(sizes) <= 1
    assert len(chunks) == min(length, parts)


def test_partition_remainder_goes_first():
    assert partition(10, 3) == [(0, 4), (4, 7), (7, 10)]


def test_partition_empty():
    assert partition(0, 4) == []


def test_partition_rejects_bad_arguments():
    with pytest.raises(ValueError):
        partition(10, 0)
    with pytest.raises(ValueError):
        partition(-1, 2)


def test_pool_rejects_zero_workers():
    with pytest.raises(ValueError):
        WorkerPool(0)


def test_map_into_preserves_order():
    data = np.arange(1_001, dtype=np.float64)
    out = WorkerPool(4).map_into(data, lambda src, dst: np.negative(src, out=dst))
    np.testing.assert_array_equal(out, -data)


def test_map_into_empty():
    out = WorkerPool(4).map_into(np.empty(0), lambda src, dst: None)
    assert out.shape == (0,)


def test_worker_failure_propagates():
    def kernel(src, dst):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        WorkerPool(2).map_into(np.ones(10), kernel)
