# tests/test_cli.py
import io
import os
from unittest.mock import patch

import pytest

from githelper import __version__
from githelper.cli import EXIT_OK, EXIT_STEP_FAILED, EXIT_USAGE, main
from githelper.exceptions import NO_WORKSPACE_MESSAGE


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # keep a stray ./githelper.toml from leaking into tests
    monkeypatch.chdir(tmp_path)


def scripted(*answers):
    remaining = list(answers)
    asked = []

    def reader(prompt):
        asked.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    reader.asked = asked
    return reader


def run_main(argv, reader=None):
    out = io.StringIO()
    code = main(argv, stdout=out, reader=reader)
    return code, out.getvalue()


def test_steps_lists_cards():
    code, out = run_main(["steps"])
    assert code == EXIT_OK
    assert "[check-git]" in out
    assert "1. Check Git is Installed" in out
    assert "$ git push -u origin main" in out
    assert "asks for: Enter your commit message" in out
    assert out.index("[check-git]") < out.index("[pull]")


def test_run_step_success(tmp_path, create_proc):
    proc = create_proc(stdout=b"On branch main\n")

    with patch("asyncio.create_subprocess_exec", return_value=proc) as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "run", "check-status"])

    assert code == EXIT_OK
    assert spawn.call_args.args == ("git", "status")
    assert "> git status" in out
    assert "On branch main" in out
    assert "… check-status running" in out
    assert "✓ check-status succeeded" in out


def test_run_step_failure_exit_code(tmp_path, create_proc):
    proc = create_proc(stderr=b"fatal: not a git repository\n", returncode=128)

    with patch("asyncio.create_subprocess_exec", return_value=proc):
        code, out = run_main(["--workspace", str(tmp_path), "run", "check-status"])

    assert code == EXIT_STEP_FAILED
    assert "✗ check-status failed: fatal: not a git repository" in out


def test_run_commit_with_input(tmp_path, create_proc):
    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        code, _ = run_main(["--workspace", str(tmp_path), "run", "commit", "--input", "fix bug"])

    assert code == EXIT_OK
    assert spawn.call_args.args == ("git", "commit", "-m", "fix bug")


def test_run_commit_prompts_when_no_input(tmp_path, create_proc):
    reader = scripted("Add initial project files")

    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        code, _ = run_main(["--workspace", str(tmp_path), "run", "commit"], reader=reader)

    assert code == EXIT_OK
    assert reader.asked == ["Enter your commit message [e.g., Add initial project files]: "]
    assert spawn.call_args.args[-1] == "Add initial project files"


def test_run_commit_cancelled(tmp_path):
    with patch("asyncio.create_subprocess_exec") as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "run", "commit"], reader=scripted(""))

    spawn.assert_not_called()
    assert code == EXIT_STEP_FAILED
    assert "✗ commit failed: Cancelled — no input provided." in out
    assert "> git" not in out


def test_run_unknown_step(tmp_path, capsys):
    code, _ = run_main(["--workspace", str(tmp_path), "run", "rebase"])
    assert code == EXIT_USAGE
    err = capsys.readouterr().err
    assert "Unknown step 'rebase'" in err
    assert "check-git" in err


def test_workspace_from_config(tmp_path, create_proc):
    project = tmp_path / "project"
    project.mkdir()
    config = tmp_path / "custom.toml"
    config.write_text('workspace = ["project"]\ngit = "git2"\n')

    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        code, _ = run_main(["--config", str(config), "run", "init-repo"])

    assert code == EXIT_OK
    assert spawn.call_args.args == ("git2", "init")
    assert spawn.call_args.kwargs["cwd"] == str(project.resolve())


def test_default_config_picked_up_from_cwd(tmp_path, create_proc):
    (tmp_path / "githelper.toml").write_text(
        """
[[step]]
id = "hello"
title = "Say hello"
description = "Prints the version."
display_command = "git --version"
args = ["--version"]
"""
    )
    code, out = run_main(["steps"])
    assert code == EXIT_OK
    assert "[hello]" in out
    assert "[check-git]" not in out


def test_workspace_defaults_to_cwd(tmp_path, create_proc):
    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        run_main(["run", "check-git"])

    assert spawn.call_args.kwargs["cwd"] == os.getcwd()


def test_invalid_config_is_usage_error(tmp_path, capsys):
    bad = tmp_path / "bad.toml"
    bad.write_text("nonsense = 1\n")
    code, _ = run_main(["--config", str(bad), "steps"])
    assert code == EXIT_USAGE
    assert "Unknown config keys" in capsys.readouterr().err


def test_walk_run_skip_quit(tmp_path, create_proc):
    reader = scripted("y", "n", "q")

    with patch("asyncio.create_subprocess_exec", return_value=create_proc(stdout=b"git version 2.45.0")) as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "walk"], reader=reader)

    assert code == EXIT_OK
    assert spawn.call_count == 1
    assert spawn.call_args.args == ("git", "--version")
    assert "Stopping the walkthrough" in out
    assert "3. Check Status" in out
    assert "4. Make a File Change" not in out


def test_walk_from_step_to_end(tmp_path, create_proc):
    reader = scripted("", "y")

    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "walk", "--from", "push"], reader=reader)

    assert code == EXIT_OK
    assert [c.args for c in spawn.call_args_list] == [("git", "push", "-u", "origin", "main"), ("git", "pull")]
    assert "That's the whole workflow" in out


def test_walk_counts_failures(tmp_path, create_proc):
    reader = scripted("y")

    with patch("asyncio.create_subprocess_exec", return_value=create_proc(returncode=1)):
        code, _ = run_main(["--workspace", str(tmp_path), "walk", "--from", "pull"], reader=reader)

    assert code == EXIT_STEP_FAILED


def test_walk_unknown_start(tmp_path):
    code, _ = run_main(["--workspace", str(tmp_path), "walk", "--from", "nope"])
    assert code == EXIT_USAGE


def test_walk_end_of_input_quits(tmp_path):
    with patch("asyncio.create_subprocess_exec") as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "walk"], reader=scripted())

    spawn.assert_not_called()
    assert code == EXIT_OK
    assert "Stopping the walkthrough" in out


def test_quick_commit_with_message(tmp_path, create_proc):
    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "commit", "-m", "Fix typo"])

    assert code == EXIT_OK
    assert spawn.call_args.args == ("git", "commit", "-m", "Fix typo")
    assert 'Committed: "Fix typo"' in out


def test_quick_commit_prompted(tmp_path, create_proc):
    with patch("asyncio.create_subprocess_exec", return_value=create_proc()):
        code, out = run_main(["--workspace", str(tmp_path), "commit"], reader=scripted("Add readme"))

    assert code == EXIT_OK
    assert 'Committed: "Add readme"' in out


def test_quick_commit_cancelled(tmp_path):
    with patch("asyncio.create_subprocess_exec") as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "commit"], reader=scripted())

    spawn.assert_not_called()
    assert code == EXIT_STEP_FAILED
    assert "Commit cancelled — no message provided." in out


@pytest.mark.parametrize(
    "name,args,message",
    [
        ("status", ("git", "status"), "Git status"),
        ("add", ("git", "add", "."), "All files staged successfully!"),
        ("push", ("git", "push"), "Pushed to remote successfully!"),
        ("pull", ("git", "pull"), "Pulled latest changes!"),
    ],
)
def test_quick_actions(name, args, message, tmp_path, create_proc):
    with patch("asyncio.create_subprocess_exec", return_value=create_proc()) as spawn:
        code, out = run_main(["--workspace", str(tmp_path), name])

    assert code == EXIT_OK
    assert spawn.call_args.args == args
    assert message in out


def test_quick_action_failure_has_no_success_message(tmp_path, create_proc):
    with patch("asyncio.create_subprocess_exec", return_value=create_proc(stderr=b"fatal: no upstream", returncode=1)):
        code, out = run_main(["--workspace", str(tmp_path), "push"])

    assert code == EXIT_STEP_FAILED
    assert "ERROR:\nfatal: no upstream" in out
    assert "Pushed to remote" not in out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_no_workspace_message_constant_mentions_flag():
    assert "--workspace" in NO_WORKSPACE_MESSAGE


@pytest.mark.parametrize("answers", [(), ("   ",)])
def test_quick_commit_cancel_skips_controller(answers, tmp_path):
    with patch("githelper.cli.InteractionController.run_quick_action") as run_quick_action:
        code, out = run_main(["--workspace", str(tmp_path), "commit"], reader=scripted(*answers))

    run_quick_action.assert_not_called()
    assert code == EXIT_STEP_FAILED
    assert out == "Commit cancelled — no message provided.\n"


def test_quick_commit_blank_message_flag_is_cancelled(tmp_path):
    with patch("asyncio.create_subprocess_exec") as spawn:
        code, out = run_main(["--workspace", str(tmp_path), "commit", "-m", " "])

    spawn.assert_not_called()
    assert code == EXIT_STEP_FAILED
    assert "Commit cancelled — no message provided." in out
