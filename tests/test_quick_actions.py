# tests/test_quick_actions.py
from unittest.mock import patch

import pytest

from githelper.quick_actions import QUICK_ACTIONS


def test_quick_action_names():
    assert list(QUICK_ACTIONS) == ["status", "add", "commit", "push", "pull"]
    assert QUICK_ACTIONS["push"].args == ("push",)
    assert QUICK_ACTIONS["add"].args == ("add", ".")


def test_format_success():
    assert QUICK_ACTIONS["commit"].format_success("Fix typo") == 'Committed: "Fix typo"'
    assert QUICK_ACTIONS["pull"].format_success() == "Pulled latest changes!"


@pytest.mark.asyncio
async def test_run_quick_action(make_controller, presenter, memory_sink, create_proc):
    controller = make_controller()

    with patch("asyncio.create_subprocess_exec", return_value=create_proc(stdout=b"Already up to date.")) as spawn:
        result = await controller.run_quick_action("pull")

    assert result.succeeded
    assert spawn.call_args.args == ("git", "pull")
    assert memory_sink.lines[0] == "> git pull"
    # quick actions do not post step events
    assert presenter.events == []


@pytest.mark.asyncio
async def test_quick_commit_with_message(make_controller, create_proc):
    controller = make_controller()

    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        await controller.run_quick_action("commit", "Fix login button alignment")

    assert spawn.call_args.args == ("git", "commit", "-m", "Fix login button alignment")


@pytest.mark.asyncio
async def test_quick_commit_cancelled(make_controller, memory_sink, input_collector):
    controller = make_controller()

    with patch("asyncio.create_subprocess_exec") as spawn:
        result = await controller.run_quick_action("commit")

    spawn.assert_not_called()
    assert input_collector.prompts == [("Enter your commit message", "e.g., Fix login button alignment")]
    assert result.succeeded is False
    assert result.output_text == "Commit cancelled — no message provided."
    assert memory_sink.lines == []


@pytest.mark.asyncio
async def test_unknown_quick_action(make_controller):
    controller = make_controller()
    assert await controller.run_quick_action("rebase") is None
