import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pytest  # noqa: E402


class FixedSource:
    """Uniform source replaying a fixed list of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.pos = 0

    def draw(self, size=None):
        if size is None:
            value = self.values[self.pos]
            self.pos += 1
            return value
        out = self.values[self.pos:self.pos + size]
        self.pos += size
        return np.array(out, dtype=float)


@pytest.fixture
def fixed_source():
    return FixedSource
