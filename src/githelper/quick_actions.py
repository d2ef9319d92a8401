# githelper/quick_actions.py
"""
One-shot git actions available outside the walkthrough.

These are shortcuts for the commands a beginner runs most often. Unlike
walkthrough steps they report back with a short confirmation message
rather than step events.
"""

from __future__ import annotations

from dataclasses import dataclass

from .execution_result import CANCELLED_MESSAGE
from .step_definition import InputRequest


@dataclass(frozen=True)
class QuickAction:
    name: str
    args: tuple[str, ...]
    success_message: str
    """Shown on success. "{input}" is replaced with the value the user typed."""

    input_request: InputRequest | None = None
    cancel_message: str = CANCELLED_MESSAGE

    def format_success(self, user_input: str | None = None) -> str:
        if user_input is None:
            return self.success_message
        return self.success_message.replace("{input}", user_input)


QUICK_ACTIONS: dict[str, QuickAction] = {
    a.name: a
    for a in (
        QuickAction(
            name="status",
            args=("status",),
            success_message="Git status — check the log above for details.",
        ),
        QuickAction(
            name="add",
            args=("add", "."),
            success_message="All files staged successfully!",
        ),
        QuickAction(
            name="commit",
            args=("commit", "-m"),
            success_message='Committed: "{input}"',
            input_request=InputRequest(
                prompt="Enter your commit message",
                placeholder="e.g., Fix login button alignment",
            ),
            cancel_message="Commit cancelled — no message provided.",
        ),
        QuickAction(
            name="push",
            args=("push",),
            success_message="Pushed to remote successfully!",
        ),
        QuickAction(
            name="pull",
            args=("pull",),
            success_message="Pulled latest changes!",
        ),
    )
}
