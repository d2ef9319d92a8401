"""
01_message_bridge.py - Driving the controller with JSON messages

This example demonstrates:
- A custom presenter that serializes events as JSON lines, the way a
  web or editor front end would receive them
- Feeding {"type": "runStep", "stepId": ...} triggers to handle_message()
- Unknown ids and malformed messages being dropped silently
- Two steps triggered concurrently, with results tagged by step id

Try it:
    python examples/advanced/01_message_bridge.py
"""
# ruff: noqa: T201

import asyncio
import json
from pathlib import Path

from githelper import CommandRunner, InteractionController, MemoryLogSink, StepCatalog


class JsonLinesPresenter:
    """Prints every event as one JSON object per line."""

    def post_message(self, event):
        print(json.dumps(event.to_message()))


class NoInput:
    """This front end never collects input, so input steps are cancelled."""

    async def prompt(self, prompt, placeholder):
        return None


async def main():
    sink = MemoryLogSink()
    controller = InteractionController(
        catalog=StepCatalog.default(),
        runner=CommandRunner(sink),
        input_collector=NoInput(),
        presenter=JsonLinesPresenter(),
        workspace_roots=[Path.cwd()],
    )

    inbound = [
        {"type": "runStep", "stepId": "check-git"},
        {"type": "runStep", "stepId": "check-status"},
        {"type": "runStep", "stepId": "commit"},  # needs input -> cancelled
        {"type": "runStep", "stepId": "no-such-step"},  # dropped
        {"type": "refresh"},  # dropped
    ]

    # Messages may arrive faster than git finishes; handle them concurrently
    await asyncio.gather(*(controller.handle_message(m) for m in inbound))

    print("\n--- log sink ---")
    print(sink.text)


if __name__ == "__main__":
    asyncio.run(main())
