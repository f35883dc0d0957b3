"""Small numeric and buffer helpers."""

from __future__ import annotations


def smootherstep(t: float) -> float:
    """Map [0, 1] onto [0, 1] with the smootherstep curve, clamped."""
    value = 6.0 * t**5 - 15.0 * t**4 + 10.0 * t**3
    return min(max(value, 0.0), 1.0)


def copy_shm_rows(data: bytes, offset: int, height: int, stride: int) -> bytes:
    """Bytes of ``height`` rows of ``stride`` bytes starting at ``offset``."""
    if offset < 0 or height < 0 or stride < 0:
        raise ValueError("offset, height and stride must not be negative")
    end = offset + height * stride
    if end > len(data):
        raise ValueError("buffer is too small for the requested rows")
    return bytes(data[offset:end])