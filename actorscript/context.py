# actorscript/context.py
"""Per-call script context: which actor a script runs on and what tick it is."""

from dataclasses import dataclass, field

from actorscript.clock import FrameClock
from actorscript.config import RotationConfig
from actorscript.registry import ActorRegistry
from actorscript.transform import ActorTransform


@dataclass
class ScriptContext:
    """
    Everything a script call needs, passed explicitly.

    Attributes:
        actor: Transform store of the actor running the script
        clock: Frame clock for the current tick
        registry: Registry used to resolve actor references
        config: Tolerances and distances
    """
    actor: ActorTransform
    clock: FrameClock
    registry: ActorRegistry
    config: RotationConfig = field(default_factory=RotationConfig)

    @classmethod
    def for_actor(cls, registry, actor_id, clock=None, config=None) -> "ScriptContext":
        """
        Build a context for a registered actor.

        Raises:
            UnknownActor: ``actor_id`` is not registered
        """
        if config is None:
            config = RotationConfig()
        if clock is None:
            clock = FrameClock(config.default_dt)
        return cls(
            actor=registry.require_actor(actor_id, "actor_id"),
            clock=clock,
            registry=registry,
            config=config,
        )

    @property
    def frame_delta_time(self) -> float:
        return self.clock.frame_delta_time
