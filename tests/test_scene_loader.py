"""Tests for loading scenes from YAML and JSON files."""

import json
import math
import os
import sys

import numpy as np
import pytest
import yaml

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT_DIR)

from actorscript.context import ScriptContext
from actorscript.rotation import RotationFacade
from actorscript.scene_loader import SceneLoader
from actorscript.utils.errors import InvalidArgument
from actorscript.utils.quaternion import Quaternion


SCENE = {
    "name": "Courtyard",
    "dt": 0.05,
    "config": {"look_padding": 0.01},
    "actors": [
        {"id": "guard", "position": [0, 0, 0], "rotation": {"yaw": 1.5}},
        {"id": "lamp", "position": [5, 0, 5], "rotation": [0.0, 0.0, 0.0, 1.0],
         "spawn_rotation": {"pitch": 0.3}},
        {"position": [0, 3, 0]},
    ],
}


@pytest.fixture
def yaml_scene(tmp_path):
    path = tmp_path / "courtyard.yaml"
    path.write_text(yaml.safe_dump(SCENE))
    return str(path)


@pytest.fixture
def json_scene(tmp_path):
    path = tmp_path / "courtyard.json"
    path.write_text(json.dumps(SCENE))
    return str(path)


class TestLoad:

    def test_yaml(self, yaml_scene):
        scene = SceneLoader.load(yaml_scene)
        assert scene["name"] == "Courtyard"
        assert scene["dt"] == 0.05
        assert [a["id"] for a in scene["actors"]] == ["guard", "lamp", "actor_2"]

    def test_json_matches_yaml(self, yaml_scene, json_scene):
        from_yaml = SceneLoader.load(yaml_scene)
        from_json = SceneLoader.load(json_scene)
        assert [a["id"] for a in from_yaml["actors"]] == [a["id"] for a in from_json["actors"]]
        assert from_yaml["actors"][0]["rotation"] == from_json["actors"][0]["rotation"]

    def test_euler_rotation(self, yaml_scene):
        guard = SceneLoader.load(yaml_scene)["actors"][0]
        assert guard["rotation"].same_rotation(Quaternion.from_euler(0, 1.5, 0))

    def test_spawn_defaults_to_rotation(self, yaml_scene):
        actors = SceneLoader.load(yaml_scene)["actors"]
        assert actors[0]["spawn_rotation"] == actors[0]["rotation"]
        assert actors[1]["spawn_rotation"].same_rotation(Quaternion.from_euler(0.3, 0, 0))
        assert actors[2]["rotation"] is None

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "scene.txt"
        path.write_text("name: x")
        with pytest.raises(ValueError):
            SceneLoader.load(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        scene = SceneLoader.load(str(path))
        assert scene["name"] == "Untitled Scene"
        assert scene["actors"] == []

    def test_bad_rotation(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"actors": [{"id": "a", "rotation": [0, 0, 0, 3]}]}))
        with pytest.raises(InvalidArgument):
            SceneLoader.load(str(path))


class TestBuild:

    def test_build_runtime(self, yaml_scene):
        registry, clock, config = SceneLoader.build(SceneLoader.load(yaml_scene))

        assert len(registry) == 3
        assert clock.frame_delta_time == 0.05
        assert config.look_padding == 0.01
        assert np.allclose(registry.get_actor("lamp").position, [5, 0, 5])

    def test_scripts_run_on_built_scene(self, yaml_scene):
        registry, clock, config = SceneLoader.build(SceneLoader.load(yaml_scene))
        guard = RotationFacade(ScriptContext.for_actor(registry, "guard", clock, config))

        assert guard.get_yaw() == pytest.approx(1.5)
        guard.look_at("lamp")
        assert guard.get_yaw() == pytest.approx(math.pi / 4)
        guard.reset_rot()
        assert guard.get_spawn_rot().same_rotation(Quaternion.from_euler(0, 1.5, 0))


def test_list_scenes(tmp_path, yaml_scene, json_scene):
    (tmp_path / "notes.txt").write_text("")
    assert SceneLoader.list_scenes(str(tmp_path)) == ["courtyard.json", "courtyard.yaml"]
    assert SceneLoader.list_scenes(str(tmp_path / "missing")) == []


def test_config_dt_used_when_scene_has_none(tmp_path):
    path = tmp_path / "slow.yaml"
    path.write_text(yaml.safe_dump({"config": {"default_dt": 0.05}, "actors": [{"id": "a"}]}))

    scene = SceneLoader.load(str(path))
    assert scene["dt"] is None

    _, clock, config = SceneLoader.build(scene)
    assert config.default_dt == 0.05
    assert clock.frame_delta_time == 0.05
