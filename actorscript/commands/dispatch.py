# actorscript/commands/dispatch.py
"""Name-based dispatch of script calls onto the rotation façade."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from actorscript.commands.validators import ArgSpec
from actorscript.utils.errors import InvalidArgument, UserError, error_dict, unknown_command_error

logger = logging.getLogger(__name__)


@dataclass
class CommandSpec:
    """Specification for a script-callable command."""
    handler: Callable
    args: List[ArgSpec]
    help_text: str


class CommandDispatcher:
    """
    Routes script calls by name to façade methods.

    Failures never propagate to the script host: every call returns a
    response dict with an ``ok`` flag.
    """

    def __init__(self):
        self.commands: Dict[str, CommandSpec] = {}

    def register(self, command_name: str, spec: CommandSpec):
        """Register (or replace) a command."""
        self.commands[command_name] = spec
        logger.debug(f"Registered command: {command_name}")

    def names(self) -> List[str]:
        return sorted(self.commands)

    def validate_args(self, command_name: str, params: dict) -> Tuple[dict, List[Tuple[str, str]]]:
        """
        Convert raw parameters for a registered command.

        Every argument is checked so the caller sees all problems at once.

        Returns:
            tuple: (converted params, [(argument name, error message), ...])
        """
        validated = {}
        failures = []

        for arg_spec in self.commands[command_name].args:
            is_valid, value, error_msg = arg_spec.validate(params.get(arg_spec.name))
            if is_valid:
                validated[arg_spec.name] = value
            else:
                failures.append((arg_spec.name, error_msg))

        return validated, failures

    def dispatch(self, command_name: str, facade, params: Optional[dict] = None) -> dict:
        """
        Validate and run a command.

        Args:
            command_name (str): Script-facing name, e.g. ``lookToward``
            facade (RotationFacade): Façade bound to the calling actor
            params (dict): Raw script arguments by name

        Returns:
            dict: Handler result with ``ok`` set, or an error dict
        """
        params = params or {}

        if command_name not in self.commands:
            return error_dict(
                "UNKNOWN_COMMAND",
                unknown_command_error(command_name, self.names()),
                available_commands=", ".join(self.names())
            )

        validated, failures = self.validate_args(command_name, params)
        if failures:
            message = "; ".join(error_msg for _, error_msg in failures)
            logger.warning(f"Rejected {command_name}: {message}")
            return error_dict("INVALID_ARGUMENT", message, parameter=failures[0][0])

        try:
            result = self.commands[command_name].handler(facade, validated)
        except InvalidArgument as e:
            logger.warning(f"Rejected {command_name}: {e}")
            return error_dict("INVALID_ARGUMENT", str(e), parameter=e.param)
        except UserError as e:
            return error_dict("USER_ERROR", str(e))
        except Exception as e:
            logger.error(f"Error executing command {command_name}: {e}", exc_info=True)
            return error_dict("COMMAND_FAILED", f"Command failed: {e}")

        if not isinstance(result, dict):
            result = {"result": result}
        result.setdefault("ok", "error" not in result)

        logger.debug(f"Dispatched {command_name} for actor {getattr(facade.actor, 'actor_id', '?')}")
        return result

    def get_help(self, command_name: Optional[str] = None) -> str:
        """Help text for one command, or a listing of all of them."""
        if command_name is None:
            lines = ["Available commands:"]
            lines.extend(f"  {name}: {self.commands[name].help_text}" for name in self.names())
            return "\n".join(lines)

        if command_name not in self.commands:
            return f"Unknown command: {command_name}"

        spec = self.commands[command_name]
        lines = [f"{command_name}: {spec.help_text}"]
        if spec.args:
            lines.append("Arguments:")
            for arg in spec.args:
                required_str = "required" if arg.required else "optional"
                lines.append(f"  {arg.name} ({arg.arg_type}, {required_str}): {arg.description}")
        return "\n".join(lines)


def create_rotation_dispatcher() -> CommandDispatcher:
    """Create a dispatcher with every rotation command registered."""
    dispatcher = CommandDispatcher()

    from actorscript.commands import rotation_commands

    rotation_commands.register_commands(dispatcher)

    return dispatcher
