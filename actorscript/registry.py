# actorscript/registry.py
"""Actor registry: live actors by id and resolution of look targets."""

import logging
from typing import Dict, Optional

import numpy as np

from actorscript.event_bus import EventBus
from actorscript.targets import ActorRef, Point, coerce_target
from actorscript.transform import ActorTransform
from actorscript.utils.errors import UnknownActor

logger = logging.getLogger(__name__)


class ActorRegistry:
    """
    Registry of the actors in a running game.

    Every actor created here shares the registry's event bus.
    """

    def __init__(self, event_bus=None):
        self.actors: Dict[str, ActorTransform] = {}
        self.event_bus = event_bus if event_bus is not None else EventBus()

    def add_actor(self, actor_id, position=None, rotation=None, spawn_rotation=None,
                  local_rotation=None) -> ActorTransform:
        """
        Create and register an actor

        Args:
            actor_id (str): Unique identifier for the actor
            position: World position, defaults to the origin
            rotation (Quaternion): Initial world rotation, defaults to identity
            spawn_rotation (Quaternion): Spawn rotation, defaults to identity
            local_rotation (Quaternion): Parent-relative rotation, defaults to identity

        Returns:
            ActorTransform: The created actor

        Raises:
            ValueError: An actor with this id already exists
        """
        if actor_id in self.actors:
            raise ValueError(f"Actor '{actor_id}' already registered")

        actor = ActorTransform(
            actor_id,
            position=position,
            rotation=rotation,
            spawn_rotation=spawn_rotation,
            local_rotation=local_rotation,
            event_bus=self.event_bus,
        )
        self.actors[actor_id] = actor
        logger.debug(f"Registered actor {actor_id}")
        return actor

    def remove_actor(self, actor_id):
        """
        Remove an actor

        Returns:
            bool: True if actor was removed, False otherwise
        """
        if actor_id in self.actors:
            del self.actors[actor_id]
            logger.debug(f"Removed actor {actor_id}")
            return True
        return False

    def get_actor(self, actor_id) -> Optional[ActorTransform]:
        """Get an actor by id, or None if not found."""
        return self.actors.get(actor_id)

    def require_actor(self, actor_id, param="actor") -> ActorTransform:
        """Get an actor by id or raise ``UnknownActor`` naming ``param``."""
        actor = self.actors.get(actor_id)
        if actor is None:
            raise UnknownActor(param, actor_id)
        return actor

    def position_of(self, target, param="target") -> np.ndarray:
        """
        Resolve a look target to a world position.

        Args:
            target: ``Point``, ``ActorRef``, a 3-vector or an actor id
            param (str): Parameter name reported on failure

        Returns:
            np.ndarray: World position (copy)

        Raises:
            InvalidArgument: The target is malformed
            UnknownActor: The referenced actor does not exist
        """
        target = coerce_target(param, target)
        if isinstance(target, Point):
            return target.as_array()
        if isinstance(target, ActorRef):
            return self.require_actor(target.actor_id, param).position.copy()
        raise TypeError(f"Unhandled target type: {type(target).__name__}")

    def __len__(self):
        return len(self.actors)

    def __contains__(self, actor_id):
        return actor_id in self.actors
