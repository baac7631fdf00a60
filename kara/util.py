"""Small helpers: string hashing, grid distance and file reading."""

import math

_MASK64 = (1 << 64) - 1


def hashcode(text):
    """Return the 64-bit djb2-style hash used to bucket atlas names."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    values = [b - 256 if b >= 128 else b for b in data]
    result = 5381
    if values:
        # The first character is folded in twice.
        for c in (values[0], *values):
            result = (result * 33 + c) & _MASK64
    return (result * 33) & _MASK64


def get_distance(x1, y1, x2, y2):
    """Return the straight-line distance between two cells, truncated."""
    dx = x2 - x1
    dy = y2 - y1
    return int(math.sqrt(dx * dx + dy * dy))


def read_file(filename):
    """Return the whole text content of ``filename``."""
    with open(filename, "rb") as handle:
        return handle.read().decode("utf-8")