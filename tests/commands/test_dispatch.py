"""Tests for the named-command dispatcher."""

import math
import os
import sys

import pytest

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, ROOT_DIR)

from actorscript.clock import FrameClock
from actorscript.commands import ArgSpec, CommandDispatcher, CommandSpec, create_rotation_dispatcher
from actorscript.context import ScriptContext
from actorscript.registry import ActorRegistry
from actorscript.rotation import RotationFacade
from actorscript.utils.errors import UserError


EXPECTED_COMMANDS = {
    "getYaw", "getPitch", "getRoll", "getRot", "getSpawnRot", "getLocalRot",
    "setYaw", "setPitch", "setRoll", "setYawPitchRoll",
    "turn", "spin", "rotate", "applyQuaternion", "applyQuaternionSelf",
    "setRot", "resetRot", "setSpawnRot", "resetSpawnRot", "setLocalRot", "resetLocalRot",
    "lookAt", "lookDir", "lookToward", "lookTowardDir",
}


@pytest.fixture
def registry():
    registry = ActorRegistry()
    registry.add_actor("hero")
    registry.add_actor("enemy", position=(10.0, 0.0, 0.0))
    return registry


@pytest.fixture
def facade(registry):
    return RotationFacade(ScriptContext.for_actor(registry, "hero", FrameClock(0.1)))


@pytest.fixture
def dispatcher():
    return create_rotation_dispatcher()


class TestRegistration:

    def test_all_commands_registered(self, dispatcher):
        assert set(dispatcher.commands) == EXPECTED_COMMANDS

    def test_help_lists_commands(self, dispatcher):
        text = dispatcher.get_help()
        assert text.startswith("Available commands:")
        assert "lookToward" in text

    def test_help_for_command(self, dispatcher):
        text = dispatcher.get_help("turn")
        assert "radians (angle, required)" in text
        assert "axis (axis, optional)" in text

    def test_help_unknown(self, dispatcher):
        assert dispatcher.get_help("fly") == "Unknown command: fly"


class TestDispatch:

    def test_get_yaw(self, dispatcher, facade):
        result = dispatcher.dispatch("getYaw", facade)
        assert result == {"ok": True, "yaw": 0.0}

    def test_set_yaw_reports_orientation(self, dispatcher, facade):
        result = dispatcher.dispatch("setYaw", facade, {"yaw": 7.0})
        assert result["ok"]
        assert abs(result["yaw"] - (7.0 - 2 * math.pi)) < 1e-9
        assert len(result["rotation"]) == 4

    def test_set_yaw_pitch_roll_optional_args(self, dispatcher, facade):
        result = dispatcher.dispatch("setYawPitchRoll", facade, {"yaw": 1.0})
        assert result["ok"]
        assert abs(result["pitch"]) < 1e-9
        assert abs(result["roll"]) < 1e-9

    def test_turn_with_axis_dict(self, dispatcher, facade):
        result = dispatcher.dispatch("turn", facade, {"radians": 0.5, "axis": {"x": 0, "y": 1, "z": 0}})
        assert result["ok"]
        assert abs(facade.get_yaw() - 0.5) < 1e-9

    def test_look_at_actor_by_id(self, dispatcher, facade):
        result = dispatcher.dispatch("lookAt", facade, {"target": "enemy"})
        assert result["ok"]
        assert abs(result["turned"] - math.pi / 2) < 1e-9
        assert abs(result["yaw"] - math.pi / 2) < 1e-9

    def test_look_toward_string_flag(self, dispatcher, facade):
        result = dispatcher.dispatch(
            "lookToward", facade,
            {"target": [0, 10, 10], "radians_per_second": 100.0, "yaw_only": "true"},
        )
        assert result["ok"]
        assert abs(result["pitch"]) < 1e-9

    def test_set_rot_roundtrip(self, dispatcher, facade):
        half = math.sqrt(0.5)
        dispatcher.dispatch("setRot", facade, {"rot": [0.0, half, 0.0, half]})
        result = dispatcher.dispatch("getRot", facade)
        assert result["rotation"] == pytest.approx([0.0, half, 0.0, half])

    def test_reset_spawn_rot(self, dispatcher, facade):
        dispatcher.dispatch("setSpawnRot", facade, {"rot": [0.0, 1.0, 0.0, 0.0]})
        result = dispatcher.dispatch("resetSpawnRot", facade)
        assert result["rotation"] == [0.0, 0.0, 0.0, 1.0]


class TestDispatchErrors:

    def test_unknown_command(self, dispatcher, facade):
        result = dispatcher.dispatch("lookat", facade)
        assert result["ok"] is False
        assert result["error"] == "UNKNOWN_COMMAND"
        assert "lookAt" in result["message"]
        assert "lookAt" in result["available_commands"]

    def test_missing_required(self, dispatcher, facade):
        result = dispatcher.dispatch("setYaw", facade, {})
        assert result["error"] == "INVALID_ARGUMENT"
        assert "yaw" in result["message"]
        assert result["parameter"] == "yaw"

    def test_multiple_errors_joined(self, dispatcher, facade):
        result = dispatcher.dispatch("rotate", facade, {"axis": [0, 0, 0], "angle": "x"})
        assert result["error"] == "INVALID_ARGUMENT"
        assert "axis:" in result["message"]
        assert "angle:" in result["message"]

    def test_negative_rate(self, dispatcher, facade):
        result = dispatcher.dispatch("lookTowardDir", facade, {"direction": [1, 0, 0], "radians_per_second": -2})
        assert result["error"] == "INVALID_ARGUMENT"
        assert facade.get_yaw() == 0.0

    def test_unknown_actor_names_parameter(self, dispatcher, facade):
        result = dispatcher.dispatch("lookAt", facade, {"target": "ghost"})
        assert result["ok"] is False
        assert result["error"] == "INVALID_ARGUMENT"
        assert result["parameter"] == "target"

    def test_spin_overflow_is_invalid_argument(self, dispatcher, registry):
        facade = RotationFacade(ScriptContext.for_actor(registry, "hero", FrameClock(10.0)))
        result = dispatcher.dispatch("spin", facade, {"radians_per_second": 1e308})
        assert result["error"] == "INVALID_ARGUMENT"
        assert result["parameter"] == "radians_per_second"

    def test_non_unit_quaternion(self, dispatcher, facade):
        result = dispatcher.dispatch("applyQuaternion", facade, {"quat": [1, 1, 1, 1]})
        assert result["error"] == "INVALID_ARGUMENT"

    def test_rejected_call_leaves_rotation(self, dispatcher, facade):
        dispatcher.dispatch("setYaw", facade, {"yaw": 1.0})
        before = facade.get_rot()
        dispatcher.dispatch("setRoll", facade, {"roll": float("nan")})
        assert facade.get_rot() == before


class TestCustomCommands:

    def test_user_error(self, facade):
        def handler(facade, params):
            raise UserError("not allowed here")

        dispatcher = CommandDispatcher()
        dispatcher.register("forbidden", CommandSpec(handler=handler, args=[], help_text=""))

        result = dispatcher.dispatch("forbidden", facade)
        assert result == {"ok": False, "error": "USER_ERROR", "message": "not allowed here"}

    def test_unexpected_failure(self, facade):
        def handler(facade, params):
            raise RuntimeError("boom")

        dispatcher = CommandDispatcher()
        dispatcher.register("broken", CommandSpec(handler=handler, args=[], help_text=""))

        result = dispatcher.dispatch("broken", facade)
        assert result["error"] == "COMMAND_FAILED"
        assert "boom" in result["message"]

    def test_non_dict_result_wrapped(self, facade):
        dispatcher = CommandDispatcher()
        dispatcher.register("double", CommandSpec(
            handler=lambda facade, params: params["value"] * 2,
            args=[ArgSpec("value", "float")],
            help_text="",
        ))

        assert dispatcher.dispatch("double", facade, {"value": 2}) == {"result": 4.0, "ok": True}
