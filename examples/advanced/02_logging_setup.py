"""
Example: Logging Configuration for githelper

This example demonstrates the difference between the two kinds of output:
- the log sink, which is what a learner reads (every git call and its output)
- python logging under the "githelper" logger, for diagnosing githelper itself
"""

import asyncio
import logging
from pathlib import Path

from githelper import (
    CommandRunner,
    InteractionController,
    MemoryLogSink,
    StepCatalog,
    disable_logging,
    get_log_file_path,
    setup_logging,
)
from githelper.terminal import TerminalInputCollector


def make_controller() -> InteractionController:
    return InteractionController(
        catalog=StepCatalog.default(),
        runner=CommandRunner(MemoryLogSink()),
        input_collector=TerminalInputCollector(),
        workspace_roots=[Path.cwd()],
    )


async def main():
    # Example 1: Console + file logging
    print("=== Example 1: Console + File Logging ===")
    setup_logging(level="DEBUG", file=True)
    await make_controller().run_step("check-git")
    print(f"Log file: {get_log_file_path()}\n")

    # Example 2: Custom format
    print("=== Example 2: Custom Format ===")
    setup_logging(level="DEBUG", format_string="[%(levelname)s] %(message)s")
    await make_controller().run_step("check-status")

    # Example 3: Prevent double-logging when the root logger is configured
    print("\n=== Example 3: With propagate=False ===")
    logging.basicConfig(level=logging.DEBUG, format="ROOT: %(levelname)s - %(name)s - %(message)s")
    setup_logging(level="DEBUG", propagate=False)
    await make_controller().run_step("check-status")

    # Example 4: Detailed format (includes file:line)
    print("\n=== Example 4: Detailed Format ===")
    setup_logging(level="DEBUG", format="detailed")
    await make_controller().run_step("no-such-step")

    # Example 5: Disable logging (useful for tests)
    print("\n=== Example 5: Disable Logging ===")
    disable_logging()
    await make_controller().run_step("check-git")
    print("Step ran but no githelper logs appeared")


if __name__ == "__main__":
    asyncio.run(main())
