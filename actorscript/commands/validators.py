# actorscript/commands/validators.py
"""Input validation utilities for script-facing calls.

The ``require_*`` helpers convert a raw script value or raise
``InvalidArgument`` naming the parameter. ``ArgSpec`` wraps them for the
command dispatcher, which reports failures instead of raising.
"""

import numbers

import numpy as np

from actorscript.utils.errors import InvalidArgument
from actorscript.utils.math_utils import WORLD_UP, is_valid_number
from actorscript.utils.quaternion import Quaternion


def require_number(name, value):
    """Validate a finite real number (angles, rates, distances).

    Args:
        name (str): Parameter name used in the error message
        value: Raw value

    Returns:
        float: The value as a float

    Raises:
        InvalidArgument: Not a real number, a bool, NaN or Inf
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(name, f"expected a number, got {type(value).__name__}")

    converted = float(value)
    if not is_valid_number(converted):
        raise InvalidArgument(name, f"expected a finite number, got {converted}")

    return converted


def require_optional_number(name, value, default=0.0):
    """Like ``require_number`` but ``None`` means omitted and yields ``default``.

    An explicit 0 is kept as 0; it is never confused with an omitted value.
    """
    if value is None:
        return default
    return require_number(name, value)


def require_rate(name, value):
    """Validate a non-negative angular rate in radians per second."""
    rate = require_number(name, value)
    if rate < 0.0:
        raise InvalidArgument(name, f"rate must not be negative, got {rate}")
    return rate


def require_vector3(name, value):
    """Validate a 3-vector.

    Accepts a dict with x, y, z keys, a list/tuple of three numbers or a numpy
    array of shape (3,).

    Returns:
        np.ndarray: float vector of shape (3,)
    """
    if isinstance(value, dict):
        if not all(key in value for key in ['x', 'y', 'z']):
            raise InvalidArgument(name, "vector must have x, y, z components")
        components = [value['x'], value['y'], value['z']]
    elif isinstance(value, (list, tuple, np.ndarray)):
        components = list(np.asarray(value).reshape(-1)) if isinstance(value, np.ndarray) else list(value)
        if len(components) != 3:
            raise InvalidArgument(name, f"vector must have 3 components, got {len(components)}")
    else:
        raise InvalidArgument(name, f"expected a 3-vector, got {type(value).__name__}")

    try:
        converted = [require_number(name, c) for c in components]
    except InvalidArgument:
        raise InvalidArgument(name, "vector components must be finite numbers") from None

    return np.array(converted, dtype=float)


def require_axis(name, value):
    """Validate a rotation axis, defaulting to world up when omitted.

    Returns:
        np.ndarray: unit vector of shape (3,)
    """
    if value is None:
        return np.array(WORLD_UP, dtype=float)

    axis = require_vector3(name, value)
    magnitude = np.linalg.norm(axis)
    if magnitude < 1e-10:
        raise InvalidArgument(name, "axis must not be the zero vector")

    return axis / magnitude


def require_quaternion(name, value, tolerance=None):
    """Validate a rotation quaternion.

    Accepts a ``Quaternion`` or a sequence of four numbers in engine order
    (x, y, z, w). The quaternion is never normalised here: a value whose
    magnitude is further than ``tolerance`` from 1 is rejected.

    Args:
        name (str): Parameter name
        value: Raw value
        tolerance (float, optional): Allowed |magnitude - 1|; None skips the check

    Returns:
        Quaternion: the validated value, components unchanged
    """
    if isinstance(value, Quaternion):
        quat = Quaternion(value.w, value.x, value.y, value.z)
    elif isinstance(value, (list, tuple, np.ndarray)):
        components = list(np.asarray(value).reshape(-1)) if isinstance(value, np.ndarray) else list(value)
        if len(components) != 4:
            raise InvalidArgument(name, f"quaternion must have 4 components (x, y, z, w), got {len(components)}")
        for component in components:
            if isinstance(component, bool) or not isinstance(component, numbers.Real):
                raise InvalidArgument(name, "quaternion components must be numbers")
        quat = Quaternion.from_xyzw(components)
    else:
        raise InvalidArgument(name, f"expected a quaternion, got {type(value).__name__}")

    if not quat.is_finite():
        raise InvalidArgument(name, "quaternion components must be finite")

    if tolerance is not None and not quat.is_unit(epsilon=tolerance):
        raise InvalidArgument(
            name,
            f"quaternion must be unit length (|q| = {quat.magnitude():.6f})"
        )

    return quat


def require_bool(name, value):
    """Validate a boolean flag; strings like "true"/"off" are accepted."""
    if isinstance(value, bool):
        return value

    # Parse string boolean
    if isinstance(value, str):
        lower_val = value.lower()
        if lower_val in ["true", "1", "yes", "on"]:
            return True
        elif lower_val in ["false", "0", "no", "off"]:
            return False

    raise InvalidArgument(name, f"invalid boolean value '{value}'")


def _convert_target(name, value):
    from actorscript.targets import coerce_target
    return coerce_target(name, value)


_CONVERTERS = {
    "float": require_number,
    "angle": require_number,
    "rate": require_rate,
    "vector3": require_vector3,
    "axis": require_axis,
    "quaternion": require_quaternion,
    "bool": require_bool,
    "target": _convert_target,
}


class ArgSpec:
    """Specification for a command argument."""

    def __init__(self, name, arg_type, required=True, default=None, description=""):
        """Initialize argument specification.

        Args:
            name (str): Argument name
            arg_type (str): Type specification (float, angle, rate, vector3,
                axis, quaternion, bool, target)
            required (bool): Whether argument is required
            default: Default value if not provided
            description (str): Help text
        """
        if arg_type not in _CONVERTERS:
            raise ValueError(f"Unknown argument type: {arg_type}")
        self.name = name
        self.arg_type = arg_type
        self.required = required
        self.default = default
        self.description = description

    def validate(self, value):
        """Validate a value against this argument specification.

        Args:
            value: Value to validate

        Returns:
            Tuple[bool, Any, Optional[str]]: (is_valid, converted_value, error_message)
        """
        # Handle missing value
        if value is None:
            if self.required:
                return False, None, f"Missing required argument: {self.name}"
            return True, self.default, None

        try:
            return True, _CONVERTERS[self.arg_type](self.name, value), None
        except InvalidArgument as e:
            return False, None, str(e)
