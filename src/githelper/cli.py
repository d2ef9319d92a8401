# githelper/cli.py
"""
githelper command line.

    githelper steps                  show the walkthrough
    githelper walk [--from ID]       go through it step by step
    githelper run ID [--input TEXT]  run a single step
    githelper status|add|commit|push|pull
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from . import __version__
from .command_runner import CommandRunner
from .exceptions import GitHelperError, UnknownStepError
from .execution_result import ExecutionResult
from .helper_config import VALID_LOG_LEVELS, HelperConfig
from .interaction_controller import InteractionController
from .load_config import find_default_config, load_config
from .log_sink import StreamLogSink
from .logging_config import setup_logging
from .quick_actions import QUICK_ACTIONS
from .terminal import TerminalInputCollector, TerminalPresenter, format_step_card

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STEP_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="githelper",
        description="A guided, hands-on introduction to everyday git commands.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="TOML config file (default: ./githelper.toml)")
    parser.add_argument(
        "--workspace",
        action="append",
        metavar="DIR",
        help="Project folder to run git in (repeatable; the first one is used). "
        "Defaults to the config value, then the current directory.",
    )
    parser.add_argument("--git", metavar="EXE", help="git executable (default: git)")
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Diagnostic logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    sub.add_parser("steps", help="List the walkthrough steps")

    walk = sub.add_parser("walk", help="Go through the walkthrough interactively")
    walk.add_argument("--from", dest="start", metavar="STEP_ID", help="Start at this step")

    run = sub.add_parser("run", help="Run a single walkthrough step")
    run.add_argument("step_id", metavar="STEP_ID")
    run.add_argument("--input", dest="user_input", help="Value for steps that ask for one")

    for name, action in QUICK_ACTIONS.items():
        p = sub.add_parser(name, help=f"Quick action: git {' '.join(action.args)}")
        if action.input_request is not None:
            p.add_argument("-m", "--message", dest="user_input", help=action.input_request.prompt)

    return parser


def resolve_config(args: argparse.Namespace) -> HelperConfig:
    """Merge the config file (if any) with command line overrides."""
    path = args.config or find_default_config()
    config = load_config(path) if path else HelperConfig()

    workspace = config.workspace
    if args.workspace:
        workspace = tuple(str(Path(w).resolve()) for w in args.workspace)
    elif not workspace:
        workspace = (str(Path.cwd()),)

    return HelperConfig(
        git=args.git or config.git,
        workspace=workspace,
        steps=config.steps,
        log_level=args.log_level or config.log_level,
        log_file=config.log_file,
    )


def build_controller(
    config: HelperConfig,
    stdout: TextIO,
    reader: Callable[[str], str] | None = None,
) -> InteractionController:
    runner = CommandRunner(StreamLogSink(stdout), program=config.git)
    return InteractionController(
        catalog=config.steps,
        runner=runner,
        input_collector=TerminalInputCollector(reader),
        presenter=TerminalPresenter(stdout),
        workspace_roots=config.workspace,
    )


# =====================================================================
#   Commands
# =====================================================================
def cmd_steps(controller: InteractionController, stdout: TextIO) -> int:
    for step in controller.list_steps():
        stdout.write(f"[{step.id}]\n{format_step_card(step)}\n\n")
    return EXIT_OK


async def cmd_run(
    controller: InteractionController, step_id: str, user_input: str | None
) -> int:
    if step_id not in controller.catalog:
        raise UnknownStepError(step_id, controller.catalog.ids())
    result = await controller.run_step(step_id, user_input)
    return _exit_code(result)


async def cmd_walk(
    controller: InteractionController,
    stdout: TextIO,
    reader: Callable[[str], str] | None,
    start: str | None = None,
) -> int:
    steps = list(controller.list_steps())
    if start is not None:
        ids = controller.catalog.ids()
        if start not in ids:
            raise UnknownStepError(start, ids)
        steps = steps[ids.index(start):]

    ask = reader or input
    failures = 0
    for step in steps:
        stdout.write(f"\n{format_step_card(step)}\n\n")
        stdout.flush()
        try:
            answer = await asyncio.to_thread(ask, "Run this step? [Y/n/q] ")
        except EOFError:
            answer = "q"
        answer = answer.strip().lower()
        if answer in ("q", "quit"):
            stdout.write("Stopping the walkthrough. Pick it up again with --from.\n")
            break
        if answer in ("n", "no", "s", "skip"):
            continue

        result = await controller.run_step(step.id)
        if result is not None and not result.succeeded:
            failures += 1
    else:
        stdout.write("\nThat's the whole workflow. Nice work!\n")

    return EXIT_STEP_FAILED if failures else EXIT_OK


async def cmd_quick_action(
    controller: InteractionController,
    name: str,
    user_input: str | None,
    stdout: TextIO,
    reader: Callable[[str], str] | None = None,
) -> int:
    action = QUICK_ACTIONS[name]
    request = action.input_request
    if request is not None:
        if user_input is None:
            # prompt here so the confirmation can quote what was typed
            user_input = await TerminalInputCollector(reader).prompt(request.prompt, request.placeholder)
        if user_input is None or not user_input.strip():
            stdout.write(f"{action.cancel_message}\n")
            return EXIT_STEP_FAILED

    result = await controller.run_quick_action(name, user_input)
    if result is not None and result.succeeded:
        stdout.write(f"{action.format_success(user_input)}\n")
    return _exit_code(result)


def _exit_code(result: ExecutionResult | None) -> int:
    if result is None:
        return EXIT_USAGE
    return EXIT_OK if result.succeeded else EXIT_STEP_FAILED


# =====================================================================
#   Entry point
# =====================================================================
async def run_cli(
    args: argparse.Namespace,
    stdout: TextIO,
    reader: Callable[[str], str] | None = None,
) -> int:
    config = resolve_config(args)
    setup_logging(config.log_level, file=config.log_file)
    logger.debug(f"Using workspace {config.workspace[0] if config.workspace else None}")

    controller = build_controller(config, stdout, reader)

    if args.command == "steps":
        return cmd_steps(controller, stdout)
    if args.command == "run":
        return await cmd_run(controller, args.step_id, args.user_input)
    if args.command == "walk":
        return await cmd_walk(controller, stdout, reader, args.start)
    return await cmd_quick_action(
        controller, args.command, getattr(args, "user_input", None), stdout, reader
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    reader: Callable[[str], str] | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    out = stdout if stdout is not None else sys.stdout
    try:
        return asyncio.run(run_cli(args, out, reader))
    except GitHelperError as e:
        sys.stderr.write(f"githelper: error: {e}\n")
        return EXIT_USAGE
    except KeyboardInterrupt:
        sys.stderr.write("\nInterrupted.\n")
        return 130
