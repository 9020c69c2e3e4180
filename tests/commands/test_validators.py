"""Tests for script argument validation."""

import math
import os
import sys

import numpy as np
import pytest

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, ROOT_DIR)

from actorscript.commands.validators import (
    ArgSpec,
    require_axis,
    require_bool,
    require_number,
    require_optional_number,
    require_quaternion,
    require_rate,
    require_vector3,
)
from actorscript.targets import ActorRef, Point
from actorscript.utils.errors import InvalidArgument, ValidationError, UserError
from actorscript.utils.quaternion import Quaternion


class TestRequireNumber:

    def test_accepts_int_and_float(self):
        assert require_number("a", 3) == 3.0
        assert require_number("a", -1.25) == -1.25
        assert require_number("a", np.float64(0.5)) == 0.5

    @pytest.mark.parametrize("value", ["1.0", None, [1.0], True])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidArgument) as exc:
            require_number("radians", value)
        assert exc.value.param == "radians"
        assert "radians" in str(exc.value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -math.inf])
    def test_rejects_non_finite(self, value):
        with pytest.raises(InvalidArgument):
            require_number("yaw_radians", value)

    def test_optional_number(self):
        assert require_optional_number("pitch", None) == 0.0
        assert require_optional_number("pitch", 0) == 0.0
        assert require_optional_number("pitch", 0.4) == 0.4
        with pytest.raises(InvalidArgument):
            require_optional_number("pitch", float("nan"))

    def test_rate_must_not_be_negative(self):
        assert require_rate("rate", 0.0) == 0.0
        with pytest.raises(InvalidArgument):
            require_rate("rate", -0.1)


class TestRequireVector:

    def test_list_tuple_array_dict(self):
        for value in ([1, 2, 3], (1, 2, 3), np.array([1, 2, 3]), {"x": 1, "y": 2, "z": 3}):
            assert np.allclose(require_vector3("v", value), [1, 2, 3])

    def test_wrong_length(self):
        with pytest.raises(InvalidArgument):
            require_vector3("direction", [1, 2])

    def test_missing_dict_key(self):
        with pytest.raises(InvalidArgument):
            require_vector3("direction", {"x": 1, "y": 2})

    def test_non_finite_component(self):
        with pytest.raises(InvalidArgument) as exc:
            require_vector3("direction", [1, float("nan"), 0])
        assert exc.value.param == "direction"

    def test_axis_default_and_normalisation(self):
        assert np.allclose(require_axis("axis", None), [0, 1, 0])
        assert np.allclose(require_axis("axis", [0, 0, 4]), [0, 0, 1])

    def test_zero_axis_rejected(self):
        with pytest.raises(InvalidArgument):
            require_axis("axis", [0, 0, 0])


class TestRequireQuaternion:

    def test_sequence_is_xyzw(self):
        q = require_quaternion("rot", [0, 0, 0, 1], tolerance=1e-3)
        assert q == Quaternion.identity()

    def test_quaternion_instance_is_copied(self):
        original = Quaternion.from_euler(0.1, 0.2, 0.3)
        q = require_quaternion("rot", original, tolerance=1e-3)
        assert q == original
        assert q is not original

    def test_near_unit_kept_verbatim(self):
        q = require_quaternion("rot", [0, 0, 0, 1.0005], tolerance=1e-3)
        assert q.w == 1.0005

    def test_non_unit_rejected(self):
        with pytest.raises(InvalidArgument) as exc:
            require_quaternion("rot", [0, 0, 0, 2], tolerance=1e-3)
        assert exc.value.param == "rot"

    def test_tolerance_none_skips_unit_check(self):
        assert require_quaternion("rot", [0, 0, 0, 2]).w == 2.0

    @pytest.mark.parametrize("value", [[0, 0, 1], [0, 0, 0, float("nan")], "identity", [0, 0, "a", 1]])
    def test_malformed(self, value):
        with pytest.raises(InvalidArgument):
            require_quaternion("quat", value, tolerance=1e-3)


class TestRequireBool:

    def test_bool_and_strings(self):
        assert require_bool("yaw_only", True) is True
        assert require_bool("yaw_only", "off") is False
        assert require_bool("yaw_only", "YES") is True

    def test_invalid(self):
        with pytest.raises(InvalidArgument):
            require_bool("yaw_only", 2)


class TestErrorHierarchy:

    def test_invalid_argument_is_user_error(self):
        err = InvalidArgument("axis", "bad")
        assert isinstance(err, ValidationError)
        assert isinstance(err, UserError)
        assert str(err) == "axis: bad"


class TestArgSpec:

    def test_required_missing(self):
        ok, value, error = ArgSpec("yaw", "angle").validate(None)
        assert not ok
        assert "yaw" in error

    def test_optional_default(self):
        ok, value, error = ArgSpec("yaw_only", "bool", required=False, default=False).validate(None)
        assert ok and value is False and error is None

    def test_conversion_error_reported(self):
        ok, value, error = ArgSpec("axis", "axis").validate([0, 0, 0])
        assert not ok
        assert error.startswith("axis:")

    def test_target_conversion(self):
        ok, value, _ = ArgSpec("target", "target").validate("enemy")
        assert ok and value == ActorRef("enemy")
        ok, value, _ = ArgSpec("target", "target").validate([1, 2, 3])
        assert ok and value == Point((1.0, 2.0, 3.0))

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            ArgSpec("x", "matrix")
