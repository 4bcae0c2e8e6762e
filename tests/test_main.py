import time

import numpy as np
import pytest

import main


class StepRecorder:
    def __init__(self):
        self.dts = []

    def step(self, dt=None):
        self.dts.append(dt)


@pytest.fixture
def realtime_app(monkeypatch):
    recorder = StepRecorder()
    monkeypatch.setattr(main, "sim", recorder)
    monkeypatch.setattr(main, "realtime", True)
    monkeypatch.setattr(main, "simulating", False)
    # clock left over from before a long pause
    monkeypatch.setattr(main, "last_time", time.perf_counter() - 100.0)
    return recorder


def test_resuming_restarts_the_realtime_clock(realtime_app):
    main.set_simulating(True)
    main.simulation_step()

    assert main.simulating
    assert realtime_app.dts == [0.0]


def test_running_simulation_keeps_its_clock(realtime_app):
    main.set_simulating(True)
    main.simulation_step()
    main.set_simulating(True)
    main.simulation_step()

    assert realtime_app.dts[0] == 0.0
    assert 0.0 <= realtime_app.dts[1] < 100.0


def test_reset_clock_drops_the_pause(realtime_app):
    main.set_simulating(False)
    main.reset_clock()
    main.simulation_step()
    assert realtime_app.dts == [0.0]


def test_fixed_dt_without_realtime(realtime_app, monkeypatch):
    monkeypatch.setattr(main, "realtime", False)
    main.simulation_step()
    assert realtime_app.dts == [None]


def test_display_image_maps_modes_to_rgb():
    velocity = np.zeros((4, 5, 2), dtype=np.float32)
    velocity[..., 0] = 2.0
    image = main.display_image(velocity, "velocity")
    assert image.shape == (4, 5, 3)
    np.testing.assert_allclose(image[..., 0], 1.0)
    np.testing.assert_allclose(image[..., 2], 0.5)

    with pytest.raises(ValueError):
        main.display_image(velocity, "vorticity")
