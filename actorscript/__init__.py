"""
actorscript: rotation API for actor card scripts.

Typical host usage::

    registry = ActorRegistry()
    registry.add_actor("crate", position=(0, 0, 5))
    clock = FrameClock()
    facade = RotationFacade(ScriptContext.for_actor(registry, "crate", clock))

    clock.advance(1 / 60)
    facade.spin(math.pi)
"""

from actorscript.clock import FrameClock
from actorscript.config import RotationConfig
from actorscript.context import ScriptContext
from actorscript.registry import ActorRegistry
from actorscript.rotation import RotationFacade
from actorscript.targets import ActorRef, Point
from actorscript.transform import ActorTransform
from actorscript.utils.errors import InvalidArgument, UnknownActor
from actorscript.utils.quaternion import Quaternion

__version__ = "0.1.0"

__all__ = [
    "ActorRef",
    "ActorRegistry",
    "ActorTransform",
    "FrameClock",
    "InvalidArgument",
    "Point",
    "Quaternion",
    "RotationConfig",
    "RotationFacade",
    "ScriptContext",
    "UnknownActor",
]
