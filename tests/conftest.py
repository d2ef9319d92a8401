# tests/conftest.py
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest
from githelper.command_runner import CommandRunner
from githelper.interaction_controller import InteractionController
from githelper.log_sink import MemoryLogSink
from githelper.logging_config import LOGGER_NAME, disable_logging
from githelper.step_catalog import StepCatalog
from githelper.step_definition import InputRequest, StepDefinition


class RecordingPresenter:
    """Collects every event posted by the controller."""

    def __init__(self):
        self.events = []

    def post_message(self, event):
        self.events.append(event)

    @property
    def messages(self):
        return [e.to_message() for e in self.events]


class ScriptedInputCollector:
    """Answers prompts from a list. None means the user cancelled."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts = []

    async def prompt(self, prompt, placeholder):
        self.prompts.append((prompt, placeholder))
        if not self.answers:
            return None
        return self.answers.pop(0)


@pytest.fixture
def sample_step():
    return StepDefinition(
        id="commit",
        title="6. Commit Your Changes",
        description="A commit is a saved snapshot of your staged changes.",
        display_command='git commit -m "your message"',
        args=["commit", "-m"],
        input_request=InputRequest(prompt="Enter your commit message", placeholder="e.g., Fix bug"),
        notes="Keep it short.",
    )


@pytest.fixture
def memory_sink():
    return MemoryLogSink()


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def input_collector():
    return ScriptedInputCollector()


@pytest.fixture
def runner(memory_sink):
    return CommandRunner(memory_sink)


@pytest.fixture
def make_controller(runner, input_collector, presenter, tmp_path):
    """
    Factory for controllers wired to in-memory collaborators.
        controller = make_controller()                    # workspace = tmp_path
        controller = make_controller(workspace_roots=[])  # no folder open
    """
    def _make(catalog=None, workspace_roots=None):
        return InteractionController(
            catalog=catalog or StepCatalog.default(),
            runner=runner,
            input_collector=input_collector,
            presenter=presenter,
            workspace_roots=[tmp_path] if workspace_roots is None else workspace_roots,
        )

    return _make


@pytest.fixture
def create_proc():
    """
    Factory fixture that returns properly configured asyncio subprocess mocks.
    Use it like:
        proc = create_proc(stdout=b"hello\n", returncode=0)
        with patch("asyncio.create_subprocess_exec", return_value=proc):
            ...
    """
    def _make(stdout=b"", stderr=b"", returncode=0, delay=0.0):
        proc = AsyncMock()

        async def communicate():
            if delay:
                await asyncio.sleep(delay)
            return stdout, stderr

        proc.communicate = communicate
        proc.returncode = returncode
        proc.wait = AsyncMock(return_value=returncode)

        return proc

    return _make


@pytest.fixture(autouse=True)
def restore_githelper_logger():
    """Undo setup_logging()/disable_logging() calls made by a test."""
    logger = logging.getLogger(LOGGER_NAME)
    level, propagate = logger.level, logger.propagate
    yield
    disable_logging()
    logger.disabled = False
    logger.setLevel(level)
    logger.propagate = propagate
