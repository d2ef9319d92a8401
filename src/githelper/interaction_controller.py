# githelper/interaction_controller.py
"""
InteractionController - turns "run step X" requests into git calls.

Per invocation the controller walks through:

    IDLE -> (AWAITING_INPUT) -> EXECUTING -> COMPLETED

- AWAITING_INPUT only happens for steps that declare an input request.
  A cancelled prompt, or a value that is blank after stripping, ends the
  invocation right there with a failed result. No process is started and
  nothing is written to the log sink.
- Before EXECUTING a "running" StatusEvent is posted; after it a ResultEvent
  carrying the runner's result unchanged.
- Unknown step ids are dropped: no events, no log lines.

The controller keeps no state between invocations and does not serialize
them. Front ends that want one-at-a-time behaviour per step (e.g. by
disabling a button) do that themselves.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from typing import Any, Protocol

from .command_runner import CommandRunner
from .events import Presenter, ResultEvent, StatusEvent, StepEvent, parse_run_step_message
from .exceptions import InputCancelledError
from .execution_result import CANCELLED_MESSAGE, ExecutionRequest, ExecutionResult, StepState
from .quick_actions import QUICK_ACTIONS, QuickAction
from .step_catalog import StepCatalog
from .step_definition import InputRequest, StepDefinition

logger = logging.getLogger(__name__)


class InputCollector(Protocol):
    """Asks the user for one line of text."""

    async def prompt(self, prompt: str, placeholder: str) -> str | None:
        """Return the text entered, or None if the user cancelled."""
        ...


class InteractionController:
    def __init__(
        self,
        catalog: StepCatalog,
        runner: CommandRunner,
        input_collector: InputCollector,
        presenter: Presenter | None = None,
        workspace_roots: Sequence[str | os.PathLike[str]] = (),
    ):
        """
        Args:
            catalog: Steps that can be run
            runner: Executes git and records each call in its log sink
            input_collector: Used when a step needs a value and none was given
            presenter: Receives status/result events; None discards them
            workspace_roots: Project folders; git runs in the first one
        """
        self._catalog = catalog
        self._runner = runner
        self._input = input_collector
        self._presenter = presenter
        self._roots = [os.fspath(r) for r in workspace_roots]

        if len(self._roots) > 1:
            logger.debug(f"{len(self._roots)} workspace roots configured; using {self._roots[0]}")

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    @property
    def working_directory(self) -> str | None:
        """First workspace root, or None when no folder is open."""
        return self._roots[0] if self._roots else None

    @property
    def catalog(self) -> StepCatalog:
        return self._catalog

    def list_steps(self) -> tuple[StepDefinition, ...]:
        return self._catalog.list_steps()

    async def handle_message(self, message: Any) -> ExecutionResult | None:
        """
        Entry point for the inbound trigger channel.

        Accepts {"type": "runStep", "stepId": "..."}; anything else is ignored.
        """
        step_id = parse_run_step_message(message)
        if step_id is None:
            logger.debug(f"Ignoring unrecognized message: {message!r}")
            return None
        return await self.run_step(step_id)

    async def run_step(self, step_id: str, user_input: str | None = None) -> ExecutionResult | None:
        """
        Run one walkthrough step.

        Args:
            step_id: Id of a step in the catalog
            user_input: Value for steps with an input request. When None the
                input collector is asked. Ignored for steps without one.

        Returns:
            The result that was posted to the presenter, or None if step_id
            is not in the catalog.
        """
        step = self._catalog.find(step_id)
        if step is None:
            logger.debug(f"Dropping request for unknown step '{step_id}'")
            return None

        logger.debug(f"Step '{step_id}': {StepState.IDLE.value}")

        try:
            value = await self._collect_input(step_id, step.input_request, user_input)
        except InputCancelledError:
            result = ExecutionResult(succeeded=False, output_text=CANCELLED_MESSAGE)
            self._post(ResultEvent.from_result(step_id, result))
            logger.debug(f"Step '{step_id}': {StepState.COMPLETED.value} (cancelled)")
            return result

        request = ExecutionRequest.build(step_id, step.args, value)

        self._post(StatusEvent(step_id))
        logger.debug(f"Step '{step_id}': {StepState.EXECUTING.value} {list(request.resolved_args)}")

        result = await self._runner.run(request.resolved_args, self.working_directory)

        self._post(ResultEvent.from_result(step_id, result))
        logger.debug(f"Step '{step_id}': {StepState.COMPLETED.value} (succeeded={result.succeeded})")
        return result

    async def run_quick_action(
        self, name: str, user_input: str | None = None
    ) -> ExecutionResult | None:
        """
        Run one of QUICK_ACTIONS by name.

        Same input rules as run_step, but no events are posted; callers show
        action.format_success() themselves. Returns None for unknown names.
        """
        action = QUICK_ACTIONS.get(name)
        if action is None:
            logger.debug(f"Dropping request for unknown quick action '{name}'")
            return None
        return await self._run_action(action, user_input)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    async def _run_action(self, action: QuickAction, user_input: str | None) -> ExecutionResult:
        try:
            value = await self._collect_input(action.name, action.input_request, user_input)
        except InputCancelledError:
            logger.debug(f"Quick action '{action.name}' cancelled")
            return ExecutionResult(succeeded=False, output_text=action.cancel_message)

        request = ExecutionRequest.build(action.name, action.args, value)
        return await self._runner.run(request.resolved_args, self.working_directory)

    async def _collect_input(
        self, owner_id: str, request: InputRequest | None, user_input: str | None
    ) -> str | None:
        """
        Resolve the single appended value, if any.

        Returns the raw value (not stripped) or None when no input is needed.

        Raises:
            InputCancelledError: Prompt was cancelled or the value is blank
        """
        if request is None:
            return None

        if user_input is None:
            logger.debug(f"Step '{owner_id}': {StepState.AWAITING_INPUT.value}")
            user_input = await self._input.prompt(request.prompt, request.placeholder)

        if user_input is None or not user_input.strip():
            raise InputCancelledError(owner_id)

        return user_input

    def _post(self, event: StepEvent) -> None:
        if self._presenter is None:
            return
        try:
            self._presenter.post_message(event)
        except Exception as e:
            # Presentation problems must not abort the invocation
            logger.exception(f"Presenter failed to handle {event!r}: {e}")

    def __repr__(self) -> str:
        return (
            f"InteractionController(steps={len(self._catalog)}, "
            f"working_directory={self.working_directory!r})"
        )
