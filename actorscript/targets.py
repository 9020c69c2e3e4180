# actorscript/targets.py
"""Look targets: either a world-space point or a reference to another actor."""

from dataclasses import dataclass
from typing import Union

import numpy as np

from actorscript.commands.validators import require_vector3
from actorscript.utils.errors import InvalidArgument


@dataclass(frozen=True)
class Point:
    """A fixed world-space position."""
    position: tuple

    @classmethod
    def of(cls, value, name="point"):
        vec = require_vector3(name, value)
        return cls(tuple(float(c) for c in vec))

    def as_array(self) -> np.ndarray:
        return np.array(self.position, dtype=float)


@dataclass(frozen=True)
class ActorRef:
    """A reference to an actor, resolved to its current position on use."""
    actor_id: str


Target = Union[Point, ActorRef]


def coerce_target(name, value) -> Target:
    """Turn a script argument into a ``Point`` or ``ActorRef``.

    Accepts an existing ``Point``/``ActorRef``, any 3-vector (a point), an
    actor id string, or an object exposing an ``actor_id`` attribute.

    Raises:
        InvalidArgument: The value is none of the above
    """
    if isinstance(value, (Point, ActorRef)):
        return value
    if isinstance(value, str):
        if not value:
            raise InvalidArgument(name, "actor id must not be empty")
        return ActorRef(value)
    actor_id = getattr(value, "actor_id", None)
    if isinstance(actor_id, str):
        return ActorRef(actor_id)
    try:
        return Point.of(value, name)
    except InvalidArgument:
        raise InvalidArgument(
            name, f"expected a point or an actor reference, got {type(value).__name__}"
        ) from None
