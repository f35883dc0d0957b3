import pytest

from panelconf.util import copy_shm_rows, smootherstep


def test_smootherstep_ends():
    assert smootherstep(0.0) == 0.0
    assert smootherstep(1.0) == 1.0


def test_smootherstep_midpoint():
    assert smootherstep(0.5) == pytest.approx(0.5)


def test_smootherstep_clamps():
    assert smootherstep(2.0) == 1.0
    assert smootherstep(-1.0) == 0.0


def test_smootherstep_monotonic_and_symmetric():
    points = [i / 20 for i in range(21)]
    values = [smootherstep(p) for p in points]
    assert values == sorted(values)
    for p in points:
        assert smootherstep(p) + smootherstep(1 - p) == pytest.approx(1.0)


def test_copy_rows():
    data = bytes(range(20))
    assert copy_shm_rows(data, 2, 3, 4) == data[2:14]


def test_copy_rows_whole_buffer():
    data = bytes(range(16))
    assert copy_shm_rows(data, 0, 4, 4) == data


def test_copy_rows_too_short():
    with pytest.raises(ValueError):
        copy_shm_rows(bytes(10), 4, 2, 4)


def test_copy_rows_negative():
    with pytest.raises(ValueError):
        copy_shm_rows(bytes(10), -1, 1, 4)