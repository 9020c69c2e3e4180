"""
Quaternion mathematics for actor rotations.

Actors store their orientation as a unit quaternion. Scripts think in yaw, pitch
and roll, so this module also owns the Euler conversion used in both directions.

Axis convention (Y up, Z forward):
- yaw rotates about the Y axis
- pitch rotates about the X axis
- roll rotates about the Z axis

Euler triples are applied intrinsically as yaw, then pitch, then roll:
q = q_yaw * q_pitch * q_roll. Encode and decode share this order so that a
round trip returns the original angles away from the pitch singularity.

All angles are in radians.

References:
- https://en.wikipedia.org/wiki/Quaternion
- https://en.wikipedia.org/wiki/Conversion_between_quaternions_and_Euler_angles
"""

import math
import numpy as np
from typing import Sequence, Tuple, Union

# Below this |cos(pitch)| the yaw and roll axes coincide
GIMBAL_EPSILON = 1e-9


class Quaternion:
    """
    Rotation stored as (w, x, y, z), scalar first.

    Actor slots hold unit quaternions. Host engines exchange them as
    (x, y, z, w); ``from_xyzw``/``to_xyzw`` convert at that boundary.
    Instances are mutable and compare component-wise; use ``same_rotation``
    to compare orientations.
    """

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        """Components are stored as floats; the default is identity."""
        self.w = float(w)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def identity(cls) -> 'Quaternion':
        """Return the identity rotation."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_xyzw(cls, components: Sequence[float]) -> 'Quaternion':
        """
        Create a quaternion from engine-ordered components.

        Args:
            components: Sequence of four numbers (x, y, z, w)

        Returns:
            Quaternion with the same rotation
        """
        x, y, z, w = components
        return cls(w, x, y, z)

    def to_xyzw(self) -> Tuple[float, float, float, float]:
        """Return the components in engine order (x, y, z, w)."""
        return (self.x, self.y, self.z, self.w)

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> 'Quaternion':
        """
        Create quaternion from Euler angles (intrinsic Y-X-Z rotations).

        Args:
            pitch: Rotation around X axis (radians)
            yaw: Rotation around Y axis (radians)
            roll: Rotation around Z axis (radians)

        Returns:
            Quaternion representing the rotation

        Note:
            1. First rotate yaw around Y axis
            2. Then rotate pitch around the (rotated) X axis
            3. Finally rotate roll around the (rotated) Z axis
        """
        # Half angles
        cy = math.cos(yaw * 0.5)
        sy = math.sin(yaw * 0.5)
        cp = math.cos(pitch * 0.5)
        sp = math.sin(pitch * 0.5)
        cr = math.cos(roll * 0.5)
        sr = math.sin(roll * 0.5)

        # Quaternion multiplication: yaw * pitch * roll
        w = cy * cp * cr + sy * sp * sr
        x = cy * sp * cr + sy * cp * sr
        y = sy * cp * cr - cy * sp * sr
        z = cy * cp * sr - sy * sp * cr

        return cls(w, x, y, z)

    @classmethod
    def from_axis_angle(cls, axis: Union[np.ndarray, Tuple[float, float, float]],
                        angle: float) -> 'Quaternion':
        """
        Create quaternion from axis-angle representation.

        Args:
            axis: Rotation axis as (x, y, z) - will be normalized
            angle: Rotation angle in radians

        Returns:
            Quaternion representing the rotation
        """
        # Normalize axis
        axis = np.array(axis, dtype=float)
        magnitude = np.linalg.norm(axis)

        if magnitude < 1e-10:
            # No rotation (zero axis)
            return cls.identity()

        axis = axis / magnitude

        half_angle = angle * 0.5
        s = math.sin(half_angle)

        w = math.cos(half_angle)
        x = axis[0] * s
        y = axis[1] * s
        z = axis[2] * s

        return cls(w, x, y, z)

    def to_euler(self) -> Tuple[float, float, float]:
        """
        Convert quaternion to Euler angles (intrinsic Y-X-Z rotations).

        Returns:
            Tuple of (pitch, yaw, roll) in radians. Pitch is in [-pi/2, pi/2],
            yaw and roll are in (-pi, pi].

        Note:
            At pitch = +/-pi/2 yaw and roll describe the same axis. The combined
            angle is reported as yaw and roll is reported as 0.
        """
        m = self.to_rotation_matrix()

        cos_pitch = math.hypot(m[0][2], m[2][2])
        pitch = math.atan2(-m[1][2], cos_pitch)

        if cos_pitch > GIMBAL_EPSILON:
            yaw = math.atan2(m[0][2], m[2][2])
            roll = math.atan2(m[1][0], m[1][1])
        else:
            # Gimbal lock case
            yaw = math.atan2(-m[2][0], m[0][0])
            roll = 0.0

        return (pitch, yaw, roll)

    def normalized(self) -> 'Quaternion':
        """Unit-length copy; a (near) zero quaternion becomes identity."""
        magnitude = self.magnitude()
        if magnitude < 1e-10:
            return Quaternion.identity()
        return Quaternion(self.w / magnitude, self.x / magnitude, self.y / magnitude, self.z / magnitude)

    def conjugate(self) -> 'Quaternion':
        """Inverse rotation for unit quaternions."""
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def negated(self) -> 'Quaternion':
        """-q, the same rotation on the other hemisphere."""
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """
        Multiply this quaternion by another (quaternion composition).

        This represents composing rotations: q1 * q2 means "first apply q2, then q1"
        in world space, or equivalently "apply q2 in q1's own frame".

        Args:
            other: Quaternion to multiply with

        Returns:
            Product quaternion
        """
        w = self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z
        x = self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y
        y = self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x
        z = self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w

        return Quaternion(w, x, y, z)

    def premultiply(self, other: 'Quaternion') -> 'Quaternion':
        """Apply ``other`` in world space: ``other * self``."""
        return other * self

    def postmultiply(self, other: 'Quaternion') -> 'Quaternion':
        """Apply ``other`` in this rotation's own frame: ``self * other``."""
        return self * other

    def rotate_vector(self, vector: Union[np.ndarray, Tuple[float, float, float]]) -> np.ndarray:
        """Rotate a 3-vector: v' = q * (0, v) * conj(q)."""
        v = np.array(vector, dtype=float)
        result = self * Quaternion(0.0, v[0], v[1], v[2]) * self.conjugate()
        return np.array([result.x, result.y, result.z])

    def dot(self, other: 'Quaternion') -> float:
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def angle_to(self, other: 'Quaternion') -> float:
        """
        Smallest rotation angle (radians) taking this orientation to ``other``.

        q and -q are the same rotation, so the result is in [0, pi].
        """
        delta = self.normalized().conjugate() * other.normalized()
        vector_part = math.sqrt(delta.x ** 2 + delta.y ** 2 + delta.z ** 2)
        return 2.0 * math.atan2(vector_part, abs(delta.w))

    def same_rotation(self, other: 'Quaternion', epsilon: float = 1e-6) -> bool:
        """Check whether two quaternions describe the same rotation (q ~ -q)."""
        return self.angle_to(other) < epsilon

    @staticmethod
    def _blend(a: 'Quaternion', b: 'Quaternion', wa: float, wb: float) -> 'Quaternion':
        return Quaternion(
            wa * a.w + wb * b.w,
            wa * a.x + wb * b.x,
            wa * a.y + wb * b.y,
            wa * a.z + wb * b.z,
        )

    @staticmethod
    def slerp(q1: 'Quaternion', q2: 'Quaternion', t: float) -> 'Quaternion':
        """
        Spherical linear interpolation along the shorter arc.

        ``t`` is clamped to [0, 1]. The result lies exactly
        ``t * q1.angle_to(q2)`` away from ``q1``, which is what bounded
        turning relies on.
        """
        t = max(0.0, min(1.0, t))
        start = q1.normalized()
        end = q2.normalized()

        cos_theta = start.dot(end)
        if cos_theta < 0.0:
            end = end.negated()
            cos_theta = -cos_theta

        # Nearly identical: sin(theta) is too small to divide by
        if cos_theta > 0.9999995:
            return Quaternion._blend(start, end, 1.0 - t, t).normalized()

        theta = math.acos(cos_theta)
        sin_theta = math.sin(theta)
        return Quaternion._blend(
            start, end,
            math.sin((1.0 - t) * theta) / sin_theta,
            math.sin(t * theta) / sin_theta,
        )

    def to_rotation_matrix(self) -> np.ndarray:
        """
        Convert quaternion to 3x3 rotation matrix.

        Returns:
            3x3 numpy array representing the rotation matrix
        """
        # Normalize first
        q = self.normalized()

        w, x, y, z = q.w, q.x, q.y, q.z

        return np.array([
            [1 - 2*(y*y + z*z),     2*(x*y - w*z),     2*(x*z + w*y)],
            [    2*(x*y + w*z), 1 - 2*(x*x + z*z),     2*(y*z - w*x)],
            [    2*(x*z - w*y),     2*(y*z + w*x), 1 - 2*(x*x + y*y)]
        ])

    def magnitude(self) -> float:
        return math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)

    def is_finite(self) -> bool:
        """True when no component is NaN or infinite."""
        return all(math.isfinite(c) for c in (self.w, self.x, self.y, self.z))

    def __repr__(self) -> str:
        """String representation of quaternion."""
        return f"Quaternion(w={self.w:.4f}, x={self.x:.4f}, y={self.y:.4f}, z={self.z:.4f})"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"Quat({self.w:.4f}, {self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: 'Quaternion') -> bool:
        """
        Check equality with another quaternion.

        Note: q and -q represent the same rotation, but this checks component equality.
        Use ``same_rotation`` to compare orientations.
        """
        if not isinstance(other, Quaternion):
            return False

        epsilon = 1e-6
        return (abs(self.w - other.w) < epsilon and
                abs(self.x - other.x) < epsilon and
                abs(self.y - other.y) < epsilon and
                abs(self.z - other.z) < epsilon)

    def is_unit(self, epsilon: float = 1e-6) -> bool:
        """True when | ||q|| - 1 | < epsilon."""
        return abs(self.magnitude() - 1.0) < epsilon


def quaternion_identity() -> Quaternion:
    """Identity rotation, (0, 0, 0, 1) in engine order."""
    return Quaternion.identity()
