# actorscript/utils/math_utils.py
"""Mathematical utilities with NaN/Inf guards, angle policies and vector operations."""

import math

import numpy as np


TWO_PI = 2.0 * math.pi
HALF_PI = 0.5 * math.pi

WORLD_UP = (0.0, 1.0, 0.0)
WORLD_FORWARD = (0.0, 0.0, 1.0)


def is_valid_number(value):
    """Check if a number is finite and not NaN.

    Args:
        value: Number to check

    Returns:
        bool: True if value is a valid finite number
    """
    return not (math.isnan(value) or math.isinf(value))


def clamp(value, min_value, max_value):
    """Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_value, min(max_value, value))


def wrap_two_pi(angle):
    """Wrap an angle in radians into [0, 2*pi).

    Values outside the range wrap around rather than clamp.

    Args:
        angle: Angle in radians

    Returns:
        float: Equivalent angle in [0, 2*pi)
    """
    wrapped = math.fmod(angle, TWO_PI)
    if wrapped < 0.0:
        wrapped += TWO_PI
    # -1e-17 + 2*pi rounds up to 2*pi
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def clamp_pitch(angle):
    """Clamp a pitch angle in radians to [-pi/2, pi/2]."""
    return clamp(angle, -HALF_PI, HALF_PI)


def magnitude(vector):
    """Calculate magnitude of a 3-vector."""
    return float(np.linalg.norm(vector))


def normalize_vector(vector):
    """Normalize a vector to unit length.

    Args:
        vector: Vector to normalize

    Returns:
        np.ndarray: Normalized vector, or zero vector if magnitude is too small
    """
    v = np.asarray(vector, dtype=float)
    mag = np.linalg.norm(v)

    if mag < 1e-10:
        return np.zeros_like(v)

    return v / mag


def horizontal_magnitude(vector):
    """Length of the vector projected onto the XZ (ground) plane."""
    return math.hypot(vector[0], vector[2])


def facing_angles(direction):
    """Calculate the yaw and pitch that point local +Z along ``direction``.

    Args:
        direction: World-space direction (x, y, z), need not be unit length

    Returns:
        tuple: (yaw, pitch) in radians

    Note:
        Positive pitch tilts the nose toward -Y. When the horizontal part of
        ``direction`` vanishes, yaw is undefined and 0.0 is returned for it;
        callers that want to keep a current heading must handle that case.
    """
    horizontal = horizontal_magnitude(direction)
    pitch = math.atan2(-direction[1], horizontal)
    if horizontal < 1e-10:
        return 0.0, pitch
    yaw = math.atan2(direction[0], direction[2])
    return yaw, pitch
