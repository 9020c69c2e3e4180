# actorscript/clock.py
"""Per-tick clock that turns per-second rates into per-tick amounts."""

from actorscript.config import DEFAULT_DT
from actorscript.commands.validators import require_number
from actorscript.utils.errors import InvalidArgument


class FrameClock:
    """
    Frame timing supplied to scripts.

    The host advances the clock once per tick before running scripts; every
    script call within that tick sees the same ``frame_delta_time``.
    """

    def __init__(self, dt=DEFAULT_DT):
        """
        Initialize the clock

        Args:
            dt (float): Delta time reported before the first ``advance``
        """
        self.frame_delta_time = self._validate_dt(dt)
        self.elapsed = 0.0
        self.frame = 0

    @staticmethod
    def _validate_dt(dt):
        dt = require_number("dt", dt)
        if dt < 0.0:
            raise InvalidArgument("dt", f"frame time must not be negative, got {dt}")
        return dt

    def advance(self, dt):
        """
        Start a new tick.

        Args:
            dt (float): Seconds elapsed since the previous tick

        Returns:
            int: The new frame number
        """
        self.frame_delta_time = self._validate_dt(dt)
        self.elapsed += self.frame_delta_time
        self.frame += 1
        return self.frame

    def scaled(self, per_second):
        """Amount of a per-second rate that applies to the current tick."""
        return per_second * self.frame_delta_time

    def __repr__(self):
        return f"FrameClock(frame={self.frame}, dt={self.frame_delta_time:.4f}, elapsed={self.elapsed:.3f})"
