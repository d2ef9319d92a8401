# githelper/exceptions.py
"""
Custom exception hierarchy for githelper.

All githelper-specific exceptions inherit from GitHelperError to enable
catch-all error handling while still providing specific exception types
for different error conditions.

Only configuration problems escape to callers. Everything that goes wrong
while running a single step ends up in an ExecutionResult instead.
"""

from __future__ import annotations


class GitHelperError(Exception):
    """
    Base exception for all githelper errors.

    Catch this to handle any githelper-specific error.
    """

    pass


class ConfigValidationError(GitHelperError):
    """
    Raised when a step definition or config file fails validation.

    Example:
        >>> StepDefinition(id="", title="Oops", description="", display_command="git", args=())
        ConfigValidationError: Step id cannot be empty
    """

    pass


class PreconditionError(GitHelperError):
    """
    Raised when no project folder is available to run git in.

    The runner never lets this escape from run(); it is turned into a
    failed ExecutionResult carrying the same message.
    """

    def __init__(self, message: str | None = None):
        super().__init__(message or NO_WORKSPACE_MESSAGE)


class InputCancelledError(GitHelperError):
    """
    Raised when the user cancels an input prompt or submits only whitespace.

    Attributes:
        step_id: The step (or quick action) that asked for input
    """

    def __init__(self, step_id: str):
        self.step_id = step_id
        super().__init__(f"Input for '{step_id}' was cancelled")


class UnknownStepError(GitHelperError):
    """
    Raised by front ends when a user names a step that does not exist.

    The controller itself drops unknown ids silently; this is for the CLI,
    where a typo on the command line deserves a usage error.

    Attributes:
        step_id: The id that was not found
        known_ids: Ids that do exist, for the error message
    """

    def __init__(self, step_id: str, known_ids: list[str] | None = None):
        self.step_id = step_id
        self.known_ids = known_ids or []
        msg = f"Unknown step '{step_id}'"
        if self.known_ids:
            msg += f" (available: {', '.join(self.known_ids)})"
        super().__init__(msg)


NO_WORKSPACE_MESSAGE = (
    "No folder is open. Please open a folder first "
    "(pass --workspace or set 'workspace' in the config)."
)
