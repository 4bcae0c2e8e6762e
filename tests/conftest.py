import numpy as np
import pytest
import warp as wp

from utils.fields import DoubleBufferedField

wp.init()


@pytest.fixture
def device():
    return "cpu"


@pytest.fixture
def make_pair(device):
    """Build a DoubleBufferedField whose committed state is the given (H, W, C) array."""
    def _make_pair(values):
        values = np.asarray(values, dtype=np.float32)
        height, width, channels = values.shape
        pair = DoubleBufferedField(width, height, channels, device=device)
        pair.read.assign(values)
        return pair
    return _make_pair


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
