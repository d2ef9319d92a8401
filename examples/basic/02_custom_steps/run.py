"""
02_custom_steps/run.py - Loading a walkthrough from TOML

This example demonstrates:
- Loading configuration with load_config()
- Replacing the built-in steps with [[step]] tables
- Supplying input for a step up front instead of prompting

The steps.toml file in this directory defines the steps.

Try it:
    python examples/basic/02_custom_steps/run.py
"""
# ruff: noqa: T201

import asyncio
from pathlib import Path

from githelper import CommandRunner, InteractionController, StreamLogSink, load_config, setup_logging
from githelper.terminal import TerminalInputCollector, TerminalPresenter, format_step_card


async def main():
    """Load steps from TOML and run the read-only ones."""

    # Step 1: Load configuration from the TOML file next to this script
    config_path = Path(__file__).parent / "steps.toml"
    print(f"Loading steps from {config_path.name}...")
    config = load_config(config_path)
    setup_logging(config.log_level)

    # Step 2: Build the controller from the loaded config
    controller = InteractionController(
        catalog=config.steps,
        runner=CommandRunner(StreamLogSink(), program=config.git),
        input_collector=TerminalInputCollector(),
        presenter=TerminalPresenter(),
        workspace_roots=config.workspace,
    )

    # Step 3: Show the cards
    for step in controller.list_steps():
        print(f"\n{format_step_card(step)}\n")

    # Step 4: Run the steps that don't change anything
    for step_id in ("where-am-i", "history"):
        await controller.run_step(step_id)

    # Step 5: new-branch needs a name; passing it skips the prompt.
    # Uncomment to actually create the branch:
    # await controller.run_step("new-branch", user_input="feature/try-githelper")


if __name__ == "__main__":
    asyncio.run(main())
