import numpy as np
import pytest

from operators.diffuse import diffuse, DIFFUSION_ITERATIONS


@pytest.mark.parametrize("iterations", [1, 5, DIFFUSION_ITERATIONS])
def test_zero_viscosity_is_identity(make_pair, rng, iterations):
    values = rng.normal(size=(10, 12, 2)).astype(np.float32)
    pair = make_pair(values)

    diffuse(pair, 0.0, 1.0 / 60.0, iterations)

    np.testing.assert_array_equal(pair.read.numpy(), values)


def test_zero_dt_is_identity(make_pair, rng):
    values = rng.normal(size=(8, 8, 2)).astype(np.float32)
    pair = make_pair(values)
    diffuse(pair, 0.5, 0.0)
    np.testing.assert_array_equal(pair.read.numpy(), values)


def test_single_iteration_matches_jacobi_formula(make_pair, rng):
    values = rng.normal(size=(7, 9, 2)).astype(np.float32)
    pair = make_pair(values)
    nu, dt = 0.3, 0.5
    k = nu * dt

    diffuse(pair, nu, dt, iterations=1)

    expected = values.copy()
    neighbors = values[1:-1, :-2] + values[1:-1, 2:] + values[:-2, 1:-1] + values[2:, 1:-1]
    expected[1:-1, 1:-1] = (k * neighbors + values[1:-1, 1:-1]) / (1.0 + 4.0 * k)
    np.testing.assert_allclose(pair.read.numpy(), expected, rtol=1e-5, atol=1e-6)


def test_diffusion_spreads_a_spike_and_leaves_border_alone(make_pair):
    values = np.zeros((11, 11, 2), dtype=np.float32)
    values[5, 5] = [1.0, -1.0]
    values[0, :, 0] = 3.0
    pair = make_pair(values)

    diffuse(pair, 1.0, 0.1, 20)
    out = pair.read.numpy()

    assert 0.0 < out[5, 5, 0] < 1.0
    assert out[5, 6, 0] > 0.0 and out[4, 5, 0] > 0.0
    assert out[5, 6, 1] < 0.0
    np.testing.assert_array_equal(out[0], values[0])
