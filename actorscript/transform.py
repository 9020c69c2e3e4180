# actorscript/transform.py
"""
Actor transform store.

Holds the authoritative rotation slots of one actor and solves facing
requests. Host engines may provide their own object with the same methods;
this implementation is what the API ships with and tests against.
"""

import logging

import numpy as np

from actorscript.utils.math_utils import WORLD_FORWARD, facing_angles, horizontal_magnitude
from actorscript.utils.quaternion import Quaternion, quaternion_identity

logger = logging.getLogger(__name__)

ROTATION_SLOT = "rotation"
SPAWN_ROTATION_SLOT = "spawn_rotation"
LOCAL_ROTATION_SLOT = "local_rotation"


class ActorTransform:
    """Position and the three rotation slots of a single actor."""

    def __init__(self, actor_id, position=None, rotation=None, spawn_rotation=None,
                 local_rotation=None, event_bus=None):
        """
        Initialize an actor transform

        Args:
            actor_id (str): Unique identifier for the actor
            position: World position (x, y, z), defaults to the origin
            rotation (Quaternion): World rotation, defaults to identity
            spawn_rotation (Quaternion): Rotation restored on respawn, defaults to identity
            local_rotation (Quaternion): Parent-relative rotation, defaults to identity
            event_bus (EventBus): Bus notified after every rotation commit
        """
        self.actor_id = actor_id
        self.position = np.array(position if position is not None else (0.0, 0.0, 0.0), dtype=float)
        self.event_bus = event_bus
        self._slots = {
            ROTATION_SLOT: self._copy(rotation) if rotation is not None else quaternion_identity(),
            SPAWN_ROTATION_SLOT: self._copy(spawn_rotation) if spawn_rotation is not None else quaternion_identity(),
            LOCAL_ROTATION_SLOT: self._copy(local_rotation) if local_rotation is not None else quaternion_identity(),
        }

    @staticmethod
    def _copy(quat):
        return Quaternion(quat.w, quat.x, quat.y, quat.z)

    def _get(self, slot):
        return self._copy(self._slots[slot])

    def _commit(self, slot, quat):
        self._slots[slot] = self._copy(quat)
        logger.debug(f"Actor {self.actor_id}: {slot} set to {quat}")
        if self.event_bus is not None:
            self.event_bus.publish_rotation_changed(self.actor_id, slot, self._copy(quat))

    # ----- Rotation slots -----
    def get_rotation(self):
        return self._get(ROTATION_SLOT)

    def set_rotation(self, quat):
        self._commit(ROTATION_SLOT, quat)

    def get_spawn_rotation(self):
        return self._get(SPAWN_ROTATION_SLOT)

    def set_spawn_rotation(self, quat):
        self._commit(SPAWN_ROTATION_SLOT, quat)

    def get_local_rotation(self):
        return self._get(LOCAL_ROTATION_SLOT)

    def set_local_rotation(self, quat):
        self._commit(LOCAL_ROTATION_SLOT, quat)

    def forward(self):
        """World-space unit vector the actor is facing (local +Z)."""
        return self._slots[ROTATION_SLOT].rotate_vector(WORLD_FORWARD)

    # ----- Facing -----
    def look_at(self, point, yaw_only=False, max_radians=None, padding=0.0):
        """
        Turn the actor to face a world-space point.

        Args:
            point: World position to face
            yaw_only (bool): Keep the actor level and only change its heading
            max_radians (float, optional): Largest rotation allowed this call;
                None snaps straight to the facing rotation
            padding (float): Angular dead zone; no change when already within it

        Returns:
            float: Angle actually turned, in radians

        Note:
            The facing rotation has zero roll. When the point is straight above
            or below the actor the current yaw is kept and the pitch becomes
            -pi/2 (up) or pi/2 (down).
        """
        direction = np.asarray(point, dtype=float) - self.position
        if yaw_only:
            direction[1] = 0.0

        if np.linalg.norm(direction) < 1e-10:
            logger.debug(f"Actor {self.actor_id}: look target coincides with position, ignoring")
            return 0.0

        current = self._slots[ROTATION_SLOT]
        yaw, pitch = facing_angles(direction)
        if horizontal_magnitude(direction) < 1e-10:
            _, yaw, _ = current.to_euler()

        target = Quaternion.from_euler(pitch, yaw, 0.0)
        angle = current.angle_to(target)

        if angle <= padding:
            return 0.0

        if max_radians is not None and angle > max_radians:
            if max_radians <= 0.0:
                return 0.0
            target = Quaternion.slerp(current, target, max_radians / angle)
            angle = max_radians

        self._commit(ROTATION_SLOT, target)
        return angle

    def get_state(self):
        """Snapshot of the transform for diagnostics."""
        pitch, yaw, roll = self._slots[ROTATION_SLOT].to_euler()
        return {
            "actor_id": self.actor_id,
            "position": self.position.tolist(),
            "rotation": self._slots[ROTATION_SLOT].to_xyzw(),
            "spawn_rotation": self._slots[SPAWN_ROTATION_SLOT].to_xyzw(),
            "local_rotation": self._slots[LOCAL_ROTATION_SLOT].to_xyzw(),
            "euler": {"pitch": pitch, "yaw": yaw, "roll": roll},
        }

    def __repr__(self):
        x, y, z = self.position
        return f"ActorTransform({self.actor_id!r}, position=({x:.2f}, {y:.2f}, {z:.2f}))"
