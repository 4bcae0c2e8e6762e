import os

import pytest

from utils.params import SimulationParameters
from utils.scene import Scene

SCENE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scenes")


def test_defaults():
    scene = Scene()
    assert scene.dt == pytest.approx(1.0 / 60.0)
    assert scene.params.diffusion_iterations == 20
    assert scene.params.pressure_iterations == 40
    assert scene.display == "dye"
    assert scene.splat_events == []


def test_json_round_trip(tmp_path):
    params = SimulationParameters(viscosity=0.002, pressure_retention=0.3, pressure_iterations=50)
    scene = Scene(dt=0.01, sim_width=64, sim_height=48, dye_width=128, dye_height=96,
                  dye_channels=4, params=params, display="pressure", frames_per_output=3)
    scene.add_splat_event(10, [0.5, 0.5], [0.0, 0.1], [1.0, 1.0, 1.0], duration=5)
    scene.add_splat_event(2, [0.1, 0.2], [0.3, 0.0], [0.0, 1.0, 0.0])

    path = tmp_path / "scene.json"
    scene.to_json(str(path))
    loaded = Scene.from_json(str(path))

    assert loaded.to_dict() == scene.to_dict()
    assert [e.frame for e in loaded.splat_events] == [2, 10]
    assert loaded.params.pressure_iterations == 50
    assert loaded.params.viscosity == pytest.approx(0.002)


def test_splat_events_are_active_for_their_duration():
    scene = Scene()
    scene.add_splat_event(5, [0.5, 0.5], [0.1, 0.0], [1.0, 0.0, 0.0], duration=3)
    assert scene.get_splat_events_at_frame(4) == []
    assert len(scene.get_splat_events_at_frame(5)) == 1
    assert len(scene.get_splat_events_at_frame(7)) == 1
    assert scene.get_splat_events_at_frame(8) == []


def test_unknown_display_mode_is_rejected():
    with pytest.raises(ValueError):
        Scene(display="vorticity")
    with pytest.raises(ValueError):
        Scene.from_dict({"display": "curl"})


def test_bundled_scene_loads():
    scene = Scene.from_json(os.path.join(SCENE_DIR, "two_jets.json"))
    assert scene.sim_width == 128
    assert len(scene.splat_events) == 3
    assert scene.params.splat_force == pytest.approx(10.0)
