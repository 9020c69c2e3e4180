# actorscript/commands/__init__.py
"""Command handling and dispatch system."""

from .dispatch import CommandDispatcher, CommandSpec, create_rotation_dispatcher
from .validators import ArgSpec

__all__ = ['CommandDispatcher', 'CommandSpec', 'ArgSpec', 'create_rotation_dispatcher']
