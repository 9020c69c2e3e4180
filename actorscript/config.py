"""
Configuration for the actor scripting API.

Defines the tolerances, distances and frame defaults used by the rotation
façade. Import from here to keep script hosts and tests consistent.
"""

from dataclasses import dataclass, fields
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

# Allowed |magnitude - 1| for quaternions passed in by scripts
DEFAULT_UNIT_TOLERANCE = 1e-3

# Synthetic target distances for direction-based look calls
DEFAULT_LOOK_DIR_DISTANCE = 10.0
DEFAULT_LOOK_TOWARD_DIR_DISTANCE = 100.0

# Angular dead zone (radians) inside which look calls leave the rotation alone
DEFAULT_LOOK_PADDING = 0.0

DEFAULT_DT = 1.0 / 60.0             # 60 Hz script tick

ENV_PREFIX = "ACTORSCRIPT_"


@dataclass
class RotationConfig:
    """
    Rotation API configuration container.

    Can be constructed from environment variables or from the ``config``
    section of a scene file.
    """

    unit_tolerance: float = DEFAULT_UNIT_TOLERANCE
    look_dir_distance: float = DEFAULT_LOOK_DIR_DISTANCE
    look_toward_dir_distance: float = DEFAULT_LOOK_TOWARD_DIR_DISTANCE
    look_padding: float = DEFAULT_LOOK_PADDING
    default_dt: float = DEFAULT_DT

    log_file: Optional[str] = None

    def __post_init__(self):
        """Reject settings that would make every call fail or misbehave."""
        if self.unit_tolerance <= 0:
            raise ValueError(f"unit_tolerance must be positive, got {self.unit_tolerance}")
        if self.look_dir_distance <= 0 or self.look_toward_dir_distance <= 0:
            raise ValueError("look distances must be positive")
        if self.look_padding < 0:
            raise ValueError(f"look_padding must not be negative, got {self.look_padding}")
        if self.default_dt < 0:
            raise ValueError(f"default_dt must not be negative, got {self.default_dt}")

    @classmethod
    def from_env(cls) -> "RotationConfig":
        """Create config from environment variables."""
        return cls(
            unit_tolerance=float(os.environ.get(f"{ENV_PREFIX}UNIT_TOLERANCE", DEFAULT_UNIT_TOLERANCE)),
            look_dir_distance=float(os.environ.get(f"{ENV_PREFIX}LOOK_DIR_DISTANCE", DEFAULT_LOOK_DIR_DISTANCE)),
            look_toward_dir_distance=float(
                os.environ.get(f"{ENV_PREFIX}LOOK_TOWARD_DIR_DISTANCE", DEFAULT_LOOK_TOWARD_DIR_DISTANCE)
            ),
            look_padding=float(os.environ.get(f"{ENV_PREFIX}LOOK_PADDING", DEFAULT_LOOK_PADDING)),
            default_dt=float(os.environ.get(f"{ENV_PREFIX}DT", DEFAULT_DT)),
            log_file=os.environ.get(f"{ENV_PREFIX}LOG_FILE"),
        )

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RotationConfig":
        """
        Create config from a mapping, such as a scene file's ``config`` section.

        Unknown keys are ignored with a warning.
        """
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict:
        """Plain dictionary view, e.g. for diagnostics."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
