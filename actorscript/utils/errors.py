# actorscript/utils/errors.py
"""Error handling and formatting utilities."""


class UserError(Exception):
    """Errors shown to script authors - must be clear and actionable."""
    pass


class ValidationError(UserError):
    """Input validation errors."""
    pass


class InvalidArgument(ValidationError):
    """A script passed a value that breaks an operation's contract.

    Raised before any state is touched, so a failed call never leaves a
    partial change behind.
    """

    def __init__(self, param, message):
        self.param = param
        self.message = message
        super().__init__(f"{param}: {message}")


class UnknownActor(InvalidArgument):
    """An actor reference does not resolve to a live actor."""

    def __init__(self, param, actor_id):
        self.actor_id = actor_id
        super().__init__(param, f"no actor with id '{actor_id}'")


def format_error(error_type, message, suggestion=None):
    """Format an error message for display.

    Args:
        error_type (str): Type of error (e.g., "INVALID_ARGUMENT", "UNKNOWN_COMMAND")
        message (str): Error message
        suggestion (str, optional): Helpful suggestion for the user

    Returns:
        str: Formatted error message
    """
    output = f"⚠ {error_type}: {message}"
    if suggestion:
        output += f"\n  → {suggestion}"
    return output


def unknown_command_error(command_name, available_commands=None):
    """Format an unknown command error.

    Args:
        command_name (str): Unknown command name
        available_commands (list, optional): List of available commands

    Returns:
        str: Formatted error message
    """
    message = f"Unknown command: '{command_name}'"
    suggestion = None

    if available_commands:
        # Find similar commands (simple string matching)
        similar = [cmd for cmd in available_commands if command_name.lower() in cmd.lower()]
        if similar:
            suggestion = f"Did you mean: {', '.join(similar[:3])}?"
        else:
            suggestion = "Call help() to see available commands"

    return format_error("UNKNOWN_COMMAND", message, suggestion)


def success_dict(message, **kwargs):
    """Response dict for a command that ran; extra fields are merged in."""
    return {"ok": True, "status": message, **kwargs}


def error_dict(error_type, message, **kwargs):
    """Response dict for a rejected or failed command."""
    return {"ok": False, "error": error_type, "message": message, **kwargs}
