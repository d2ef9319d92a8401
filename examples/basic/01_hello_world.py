"""
01_hello_world.py - Minimal githelper example

This is the simplest possible githelper example. It demonstrates:
- Building an InteractionController from its collaborators
- Running a walkthrough step with run_step()
- Reading the ExecutionResult

Try it:
    python examples/basic/01_hello_world.py
"""
# ruff: noqa: T201

import asyncio
from pathlib import Path

from githelper import CommandRunner, InteractionController, StepCatalog, StreamLogSink
from githelper.terminal import TerminalInputCollector


async def main():
    """Check that git is installed."""

    # Step 1: The runner writes every git call to a log sink (stdout here)
    runner = CommandRunner(StreamLogSink())

    # Step 2: Wire the controller; git runs in the first workspace root
    controller = InteractionController(
        catalog=StepCatalog.default(),
        runner=runner,
        input_collector=TerminalInputCollector(),
        workspace_roots=[Path.cwd()],
    )

    # Step 3: Run the first step of the walkthrough
    result = await controller.run_step("check-git")

    # Step 4: Check the result
    print(f"Success: {result.succeeded}")
    print(f"Output: {result.output_text}")


if __name__ == "__main__":
    asyncio.run(main())
