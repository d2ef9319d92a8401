# githelper/execution_result.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StepState(Enum):
    """Stages a single step invocation passes through."""
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    EXECUTING = "executing"
    COMPLETED = "completed"


NO_OUTPUT_PLACEHOLDER = "(no output)"
"""Output text for a successful git call that printed nothing."""

CANCELLED_MESSAGE = "Cancelled — no input provided."
"""Output text when an input prompt is cancelled or left blank."""


@dataclass(frozen=True)
class ExecutionRequest:
    """
    One invocation's worth of git arguments.

    Built fresh per run from a step's argument template plus, at most,
    one user-supplied value. Never stored.
    """

    step_id: str
    resolved_args: tuple[str, ...]

    @classmethod
    def build(
        cls, step_id: str, template: tuple[str, ...], user_input: str | None = None
    ) -> ExecutionRequest:
        """Append user_input (verbatim) to the template, if given."""
        args = tuple(template)
        if user_input is not None:
            args = args + (user_input,)
        return cls(step_id=step_id, resolved_args=args)


@dataclass(frozen=True)
class ExecutionResult:
    """
    Outcome of one invocation.

    Produced once and handed straight to the presentation layer.
    """

    succeeded: bool
    """True iff git exited with status 0."""

    output_text: str
    """Combined stdout + stderr, trimmed, or a fallback message."""

    def __repr__(self) -> str:
        preview = self.output_text if len(self.output_text) <= 40 else self.output_text[:37] + "..."
        return f"ExecutionResult(succeeded={self.succeeded}, output={preview!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {"succeeded": self.succeeded, "output_text": self.output_text}
