# tests/test_command_runner/test_error_handling.py
"""
Failure paths of CommandRunner.run(): nothing here may raise.
"""

from unittest.mock import patch

import pytest

from githelper.command_runner import require_workspace
from githelper.exceptions import NO_WORKSPACE_MESSAGE, PreconditionError


@pytest.mark.asyncio
async def test_no_working_directory_does_not_spawn(runner, memory_sink):
    with patch("asyncio.create_subprocess_exec") as spawn:
        result = await runner.run(["status"], None)

    spawn.assert_not_called()
    assert result.succeeded is False
    assert result.output_text == NO_WORKSPACE_MESSAGE
    assert memory_sink.lines == [f"ERROR: {NO_WORKSPACE_MESSAGE}"]
    assert memory_sink.show_count == 1


@pytest.mark.asyncio
async def test_missing_executable_is_a_failure_result(runner, memory_sink, tmp_path):
    err = FileNotFoundError(2, "No such file or directory")
    err.filename = "git"

    with patch("asyncio.create_subprocess_exec", side_effect=err):
        result = await runner.run(["--version"], tmp_path)

    assert result.succeeded is False
    assert "No such file or directory" in result.output_text
    # still logged
    assert memory_sink.lines[0] == "> git --version"
    assert memory_sink.lines[3].startswith("ERROR:\n")
    assert memory_sink.show_count == 1


@pytest.mark.asyncio
async def test_permission_error_is_a_failure_result(runner, tmp_path):
    with patch("asyncio.create_subprocess_exec", side_effect=PermissionError(13, "Permission denied")):
        result = await runner.run(["status"], tmp_path)

    assert result.succeeded is False
    assert "Permission denied" in result.output_text


@pytest.mark.asyncio
async def test_empty_oserror_still_has_text(runner, tmp_path):
    with patch("asyncio.create_subprocess_exec", side_effect=OSError()):
        result = await runner.run(["status"], tmp_path)

    assert result.succeeded is False
    assert result.output_text == "OSError"


def test_require_workspace():
    assert require_workspace("/tmp/project") == "/tmp/project"
    with pytest.raises(PreconditionError, match="No folder is open"):
        require_workspace(None)


@pytest.mark.asyncio
async def test_unacceptable_argument_is_a_failure_result(runner, memory_sink, tmp_path):
    with patch("asyncio.create_subprocess_exec", side_effect=ValueError("embedded null byte")):
        result = await runner.run(["commit", "-m", "fix\x00bug"], tmp_path)

    assert result.succeeded is False
    assert result.output_text == "embedded null byte"
    # the log block is completed as for any other failure
    assert memory_sink.lines[3] == "ERROR:\nembedded null byte"
    assert memory_sink.lines[-1] == ""
    assert memory_sink.show_count == 1


@pytest.mark.asyncio
async def test_unexpected_spawn_error_is_logged_and_returned(runner, memory_sink, tmp_path, caplog):
    with patch("asyncio.create_subprocess_exec", side_effect=RuntimeError("loop closed")):
        result = await runner.run(["status"], tmp_path)

    assert result.succeeded is False
    assert result.output_text == "loop closed"
    assert memory_sink.show_count == 1
    assert "Unexpected error running git" in caplog.text
