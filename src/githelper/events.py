# githelper/events.py
"""
Messages exchanged with the presentation layer.

Outbound, per invocation: at most one StatusEvent followed by exactly one
ResultEvent, both tagged with the step id so an asynchronous front end can
route them to the right element.

Inbound: a {"type": "runStep", "stepId": ...} trigger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Union

from .execution_result import ExecutionResult

RUN_STEP_MESSAGE = "runStep"


@dataclass(frozen=True)
class StatusEvent:
    """A step has started. Fire-and-forget; no acknowledgment expected."""

    step_id: str
    status: str = "running"

    def to_message(self) -> dict[str, Any]:
        return {"type": "status", "stepId": self.step_id, "status": self.status}


@dataclass(frozen=True)
class ResultEvent:
    """A step has finished (or was cancelled before starting)."""

    step_id: str
    succeeded: bool
    output_text: str

    @classmethod
    def from_result(cls, step_id: str, result: ExecutionResult) -> ResultEvent:
        return cls(step_id=step_id, succeeded=result.succeeded, output_text=result.output_text)

    def to_message(self) -> dict[str, Any]:
        return {
            "type": "result",
            "stepId": self.step_id,
            "success": self.succeeded,
            "output": self.output_text,
        }


StepEvent = Union[StatusEvent, ResultEvent]


class Presenter(Protocol):
    """Anything that can show step events to a user."""

    def post_message(self, event: StepEvent) -> None: ...


def parse_run_step_message(message: Any) -> str | None:
    """
    Extract the step id from an inbound trigger message.

    Returns None for anything that is not a well-formed runStep message;
    such messages are dropped by the caller.
    """
    if not isinstance(message, dict):
        return None
    if message.get("type") != RUN_STEP_MESSAGE:
        return None
    step_id = message.get("stepId")
    if not isinstance(step_id, str) or not step_id:
        return None
    return step_id
