from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Step id validation
# ─────────────────────────────────────────────────────────────────────────────
def validate_step_id(step_id: str) -> str:
    """
    Validate a step id.

    Step ids key the per-step UI elements of every front end, so they must
    stay stable once shipped and be safe to embed in element ids.

    Raises:
        ConfigValidationError: If the id is empty or contains invalid characters

    Allowed characters:
        - Alphanumerics (a-z, A-Z, 0-9)
        - Underscores (_)
        - Hyphens (-)
    """
    if not step_id:
        raise ConfigValidationError("Step id cannot be empty")

    if not re.match(r"^[\w\-]+$", step_id):
        raise ConfigValidationError(
            f"Invalid step id '{step_id}': must contain only alphanumerics, "
            f"underscores, and hyphens"
        )

    return step_id


def _require_str(value: object, field: str, owner: str, optional: bool = False) -> None:
    if optional and value is None:
        return
    if not isinstance(value, str):
        logger.warning(f"Invalid {owner}: '{field}' is {type(value).__name__}, not a string")
        raise ConfigValidationError(f"'{field}' for {owner} must be a string (got {value!r})")


# ─────────────────────────────────────────────────────────────────────────────
# Input request
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class InputRequest:
    """
    A single free-text value a step asks for before running.

    The value the user types is appended, untouched, as the last argument.
    """

    prompt: str
    """Prompt text shown in the input box."""

    placeholder: str = ""
    """Example value shown as a hint."""

    def __post_init__(self) -> None:
        _require_str(self.prompt, "prompt", "input request")
        _require_str(self.placeholder, "placeholder", "input request")
        if not self.prompt.strip():
            logger.warning("Invalid input request: prompt cannot be empty")
            raise ConfigValidationError("Input prompt cannot be empty")


@dataclass(frozen=True)
class StepDefinition:
    """
    Immutable definition of a single walkthrough step.
    Used both for the built-in catalog and when loading steps from TOML.
    """

    id: str
    """Unique, stable identifier. Front ends key their per-step elements on it."""

    title: str
    """Short heading, e.g. "1. Check Git is Installed"."""

    description: str
    """Plain-English explanation of what the step does and why."""

    display_command: str
    """
    Command shown to the user, for humans only.
    This is NOT what gets executed; `args` is.
    """

    args: tuple[str, ...]
    """
    Arguments passed to git, e.g. ("status",) runs `git status`.
    Lists are accepted and stored as tuples.
    """

    input_request: InputRequest | None = None
    """If set, the user is asked for one value which is appended to `args`."""

    notes: str | None = None
    """Extra tips shown below the command."""

    def __post_init__(self) -> None:
        _require_str(self.id, "id", "step")
        validate_step_id(self.id)
        owner = f"step '{self.id}'"
        _require_str(self.title, "title", owner)
        _require_str(self.description, "description", owner)
        _require_str(self.display_command, "display_command", owner)
        _require_str(self.notes, "notes", owner, optional=True)
        if self.input_request is not None and not isinstance(self.input_request, InputRequest):
            raise ConfigValidationError(f"input_request for {owner} must be an InputRequest")
        if not self.title.strip():
            logger.warning(f"Invalid step '{self.id}': title cannot be empty")
            raise ConfigValidationError(f"Title for step '{self.id}' cannot be empty")

        if isinstance(self.args, str):
            raise ConfigValidationError(
                f"args for step '{self.id}' must be a list of strings, not a single string"
            )
        args = tuple(self.args)
        for a in args:
            if not isinstance(a, str):
                raise ConfigValidationError(
                    f"args for step '{self.id}' must contain only strings (got {a!r})"
                )
        # frozen dataclass: normalize lists to tuples in place
        object.__setattr__(self, "args", args)

    @property
    def requires_input(self) -> bool:
        return self.input_request is not None
