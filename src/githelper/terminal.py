# githelper/terminal.py
"""
Terminal front end: step cards, status lines, and input prompts.

This is one possible presentation layer over InteractionController; it
only consumes the controller's public API and events.
"""

from __future__ import annotations

import asyncio
import sys
import textwrap
from collections.abc import Callable
from typing import TextIO

from .events import ResultEvent, StatusEvent, StepEvent
from .step_definition import StepDefinition

CARD_WIDTH = 72


def format_step_card(step: StepDefinition, width: int = CARD_WIDTH) -> str:
    """Render a step as a block of plain text."""
    lines = [step.title, "=" * min(len(step.title), width)]
    lines.extend(textwrap.wrap(step.description, width))
    lines.append("")
    lines.append(f"    $ {step.display_command}")
    if step.input_request is not None:
        hint = f" ({step.input_request.placeholder})" if step.input_request.placeholder else ""
        lines.append(f"    asks for: {step.input_request.prompt}{hint}")
    if step.notes:
        lines.append("")
        lines.extend(textwrap.wrap(f"Tip: {step.notes}", width))
    return "\n".join(lines)


class TerminalPresenter:
    """Prints one status line per step event."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream if stream is not None else sys.stdout

    def post_message(self, event: StepEvent) -> None:
        if isinstance(event, StatusEvent):
            self._write(f"… {event.step_id} {event.status}")
        elif isinstance(event, ResultEvent):
            if event.succeeded:
                self._write(f"✓ {event.step_id} succeeded")
            else:
                first_line = event.output_text.splitlines()[0] if event.output_text else ""
                self._write(f"✗ {event.step_id} failed: {first_line}")

    def _write(self, text: str) -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()


class TerminalInputCollector:
    """
    Reads one line from the terminal without blocking the event loop.

    Ctrl-C and end-of-input count as cancelling the prompt.
    """

    def __init__(self, reader: Callable[[str], str] | None = None):
        self._reader = reader or input

    async def prompt(self, prompt: str, placeholder: str) -> str | None:
        label = f"{prompt} [{placeholder}]: " if placeholder else f"{prompt}: "
        try:
            return await asyncio.to_thread(self._reader, label)
        except (EOFError, KeyboardInterrupt):
            return None
