import numpy as np
import pytest

from operators.boundary import apply_boundary, VELOCITY_BOUNDARY, PRESSURE_BOUNDARY, DYE_BOUNDARY


def expected_boundary(values, alpha):
    height, width, _ = values.shape
    out = values.copy()
    for y in range(height):
        for x in range(width):
            dx = int(x == 0) - int(x == width - 1)
            dy = int(y == 0) - int(y == height - 1)
            if x in (0, width - 1) or y in (0, height - 1):
                out[y, x] = alpha * values[y + dy, x + dx]
    return out


@pytest.mark.parametrize("width,height", [(3, 3), (5, 4), (8, 8), (13, 6)])
def test_reflective_boundary_negates_inward_neighbor(make_pair, rng, width, height):
    values = rng.uniform(-1.0, 1.0, size=(height, width, 2)).astype(np.float32)
    values[1:-1, 1:-1] = 0.75
    pair = make_pair(values)

    apply_boundary(pair, VELOCITY_BOUNDARY)
    out = pair.read.numpy()

    np.testing.assert_array_equal(out[1:-1, 1:-1], 0.75)
    np.testing.assert_allclose(out, expected_boundary(values, -1.0))
    # corners read the diagonal interior neighbor
    np.testing.assert_allclose(out[0, 0], -values[1, 1])
    np.testing.assert_allclose(out[-1, -1], -values[-2, -2])


def test_neumann_and_absorbing_boundaries(make_pair, rng):
    values = rng.uniform(0.0, 1.0, size=(6, 7, 3)).astype(np.float32)

    pressure = make_pair(values[:, :, :1])
    apply_boundary(pressure, PRESSURE_BOUNDARY)
    np.testing.assert_allclose(pressure.read.numpy(), expected_boundary(values[:, :, :1], 1.0))

    dye = make_pair(values)
    apply_boundary(dye, DYE_BOUNDARY)
    out = dye.read.numpy()
    assert np.all(out[0] == 0.0) and np.all(out[-1] == 0.0)
    assert np.all(out[:, 0] == 0.0) and np.all(out[:, -1] == 0.0)
    np.testing.assert_array_equal(out[1:-1, 1:-1], values[1:-1, 1:-1])


def test_boundary_on_all_border_grid(make_pair):
    values = np.arange(4, dtype=np.float32).reshape(2, 2, 1)
    pair = make_pair(values)
    apply_boundary(pair, -1.0)
    # every cell of a 2x2 grid is a corner and reads the opposite corner
    np.testing.assert_allclose(pair.read.numpy()[:, :, 0], -values[::-1, ::-1, 0])


def test_boundary_writes_into_write_buffer_then_swaps(make_pair):
    pair = make_pair(np.ones((4, 4, 1)))
    read, write = pair.read, pair.write
    apply_boundary(pair, 0.0)
    assert pair.read is write
    assert pair.write is read
    # the previously committed buffer is untouched
    assert np.all(read.numpy() == 1.0)
