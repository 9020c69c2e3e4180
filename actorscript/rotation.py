# actorscript/rotation.py
"""Rotation API exposed to card scripts.

Scripts think in yaw, pitch and roll; actors store a unit quaternion. The
façade keeps no rotation state of its own: every call reads the live
quaternion from the actor's transform store, converts, composes, and commits
the result back.

Angles are radians. Yaw turns about the vertical (Y) axis, pitch about the
lateral (X) axis and roll about the forward (Z) axis. Positive directions
follow the right-hand rule about each axis; if a turn goes the wrong way for
your scene, negate the angle.

A rotation does not have a unique yaw/pitch/roll description. Setting one
channel of a non-trivial rotation and reading another back can return a
different, equivalent value.
"""

import logging

import numpy as np

from actorscript.commands.validators import (
    require_axis,
    require_bool,
    require_number,
    require_optional_number,
    require_quaternion,
    require_rate,
    require_vector3,
)
from actorscript.utils.errors import InvalidArgument
from actorscript.utils.math_utils import clamp_pitch, is_valid_number, wrap_two_pi
from actorscript.utils.quaternion import Quaternion, quaternion_identity

logger = logging.getLogger(__name__)


class RotationFacade:
    """Yaw/pitch/roll, turning and facing operations for the context's actor."""

    def __init__(self, context):
        """
        Args:
            context (ScriptContext): Actor, clock, registry and config for the call
        """
        self.context = context

    @property
    def actor(self):
        return self.context.actor

    # ----- Euler channels -----
    def _euler(self):
        return self.actor.get_rotation().to_euler()

    def get_yaw(self) -> float:
        """Current yaw in [0, 2*pi)."""
        _, yaw, _ = self._euler()
        return wrap_two_pi(yaw)

    def get_pitch(self) -> float:
        """Current pitch in [-pi/2, pi/2]."""
        pitch, _, _ = self._euler()
        return pitch

    def get_roll(self) -> float:
        """Current roll in (-pi, pi]."""
        _, _, roll = self._euler()
        return roll

    def get_yaw_pitch_roll(self):
        """Current (yaw, pitch, roll), yaw wrapped as in ``get_yaw``."""
        pitch, yaw, roll = self._euler()
        return wrap_two_pi(yaw), pitch, roll

    def set_yaw(self, yaw_radians):
        """Set yaw, keeping the decoded pitch and roll. Input wraps into [0, 2*pi)."""
        yaw = wrap_two_pi(require_number("yaw_radians", yaw_radians))
        pitch, _, roll = self._euler()
        self.actor.set_rotation(Quaternion.from_euler(pitch, yaw, roll))

    def set_pitch(self, pitch_radians):
        """Set pitch, keeping the decoded yaw and roll. Input is clamped to [-pi/2, pi/2]."""
        pitch = clamp_pitch(require_number("pitch_radians", pitch_radians))
        _, yaw, roll = self._euler()
        self.actor.set_rotation(Quaternion.from_euler(pitch, yaw, roll))

    def set_roll(self, roll_radians):
        """Set roll, keeping the decoded yaw and pitch."""
        roll = require_number("roll_radians", roll_radians)
        pitch, yaw, _ = self._euler()
        self.actor.set_rotation(Quaternion.from_euler(pitch, yaw, roll))

    def set_yaw_pitch_roll(self, yaw_radians, pitch_radians=None, roll_radians=None):
        """
        Replace the rotation with one built from the three angles.

        Omitted (None) pitch or roll means 0. The previous rotation is not read.
        """
        yaw = require_number("yaw_radians", yaw_radians)
        pitch = require_optional_number("pitch_radians", pitch_radians)
        roll = require_optional_number("roll_radians", roll_radians)
        self.actor.set_rotation(Quaternion.from_euler(pitch, yaw, roll))

    # ----- Incremental rotation -----
    def apply_quaternion(self, quat):
        """Apply a rotation in world space (premultiply)."""
        quat = require_quaternion("quat", quat, self.context.config.unit_tolerance)
        self.actor.set_rotation(self.actor.get_rotation().premultiply(quat))

    def apply_quaternion_self(self, quat):
        """Apply a rotation in the actor's own frame (postmultiply)."""
        quat = require_quaternion("quat", quat, self.context.config.unit_tolerance)
        self.actor.set_rotation(self.actor.get_rotation().postmultiply(quat))

    def turn(self, radians, axis=None):
        """
        Turn by ``radians`` about ``axis`` in the actor's own frame.

        Args:
            radians (float): Angle to turn
            axis: Rotation axis, defaults to up (0, 1, 0)
        """
        radians = require_number("radians", radians)
        axis = require_axis("axis", axis)
        self.actor.set_rotation(
            self.actor.get_rotation().postmultiply(Quaternion.from_axis_angle(axis, radians))
        )

    def spin(self, radians_per_second, axis=None):
        """
        Turn at a steady rate; call every tick to keep spinning.

        The angle applied is ``radians_per_second * frame_delta_time``.
        """
        rate = require_number("radians_per_second", radians_per_second)
        axis = require_axis("axis", axis)
        angle = self.context.clock.scaled(rate)
        if not is_valid_number(angle):
            raise InvalidArgument(
                "radians_per_second",
                f"rate {rate} over dt {self.context.frame_delta_time} overflows"
            )
        self.actor.set_rotation(
            self.actor.get_rotation().postmultiply(Quaternion.from_axis_angle(axis, angle))
        )

    def rotate(self, axis, angle_radians):
        """Rotate by ``angle_radians`` about a world-space ``axis``."""
        axis = require_axis("axis", axis)
        angle = require_number("angle_radians", angle_radians)
        self.actor.set_rotation(
            self.actor.get_rotation().premultiply(Quaternion.from_axis_angle(axis, angle))
        )

    # ----- Rotation slots -----
    def _checked(self, name, quat):
        return require_quaternion(name, quat, self.context.config.unit_tolerance)

    def get_rot(self) -> Quaternion:
        return self.actor.get_rotation()

    def set_rot(self, rot):
        """Replace the world rotation. ``rot`` must be (near) unit length."""
        self.actor.set_rotation(self._checked("rot", rot))

    def reset_rot(self):
        self.actor.set_rotation(quaternion_identity())

    def get_spawn_rot(self) -> Quaternion:
        return self.actor.get_spawn_rotation()

    def set_spawn_rot(self, rot):
        self.actor.set_spawn_rotation(self._checked("rot", rot))

    def reset_spawn_rot(self):
        self.actor.set_spawn_rotation(quaternion_identity())

    def get_local_rot(self) -> Quaternion:
        return self.actor.get_local_rotation()

    def set_local_rot(self, rot):
        """Replace the rotation relative to the actor's parent."""
        self.actor.set_local_rotation(self._checked("rot", rot))

    def reset_local_rot(self):
        self.actor.set_local_rotation(quaternion_identity())

    # ----- Facing -----
    def look_at(self, target, yaw_only=False):
        """
        Face a point or another actor immediately.

        Args:
            target: World point (3-vector) or actor reference
            yaw_only (bool): Only change heading; stay level

        Returns:
            float: Angle turned in radians
        """
        yaw_only = require_bool("yaw_only", yaw_only)
        point = self.context.registry.position_of(target, "target")
        return self._face(point, yaw_only, None)

    def look_dir(self, direction, yaw_only=False):
        """Face along a world-space direction immediately."""
        direction = require_vector3("direction", direction)
        yaw_only = require_bool("yaw_only", yaw_only)
        point = self.actor.position + direction * self.context.config.look_dir_distance
        return self._face(point, yaw_only, None)

    def look_toward(self, target, radians_per_second, yaw_only=False):
        """
        Turn toward a point or actor by at most ``radians_per_second * dt``.

        Call every tick to keep turning; the actor stops once it faces the
        target and never swings past it.
        """
        rate = require_rate("radians_per_second", radians_per_second)
        yaw_only = require_bool("yaw_only", yaw_only)
        point = self.context.registry.position_of(target, "target")
        return self._face(point, yaw_only, self.context.clock.scaled(rate))

    def look_toward_dir(self, direction, radians_per_second, yaw_only=False):
        """Turn toward a world-space direction by at most ``radians_per_second * dt``."""
        direction = require_vector3("direction", direction)
        rate = require_rate("radians_per_second", radians_per_second)
        yaw_only = require_bool("yaw_only", yaw_only)
        point = self.actor.position + direction * self.context.config.look_toward_dir_distance
        return self._face(point, yaw_only, self.context.clock.scaled(rate))

    def _face(self, point, yaw_only, max_radians):
        turned = self.actor.look_at(
            np.asarray(point, dtype=float),
            yaw_only=yaw_only,
            max_radians=max_radians,
            padding=self.context.config.look_padding,
        )
        logger.debug(f"Actor {self.actor.actor_id}: turned {turned:.4f} rad toward {point}")
        return turned
