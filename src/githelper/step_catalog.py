# githelper/step_catalog.py
"""
StepCatalog - the ordered, read-only list of walkthrough steps.

Catalog order is presentation order and teaching order:
check install -> init -> status -> stage -> commit -> remote -> push -> pull
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import Any

from .exceptions import ConfigValidationError
from .step_definition import InputRequest, StepDefinition

logger = logging.getLogger(__name__)


DEFAULT_STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(
        id="check-git",
        title="1. Check Git is Installed",
        description=(
            "Before we start, let's make sure Git is installed on your computer. "
            "This command prints the Git version number. If you see a version, "
            "you're good to go!"
        ),
        display_command="git --version",
        args=("--version",),
    ),
    StepDefinition(
        id="init-repo",
        title="2. Initialize a Repository",
        description=(
            "This creates a new Git repository in your current folder. "
            "It adds a hidden .git folder that Git uses to track all your changes. "
            "You only need to do this once per project."
        ),
        display_command="git init",
        args=("init",),
        notes=(
            "If your folder is already a Git repo, this is safe to run again. "
            "It won't overwrite anything."
        ),
    ),
    StepDefinition(
        id="check-status",
        title="3. Check Status",
        description=(
            "This shows the current state of your repository: which files are new, "
            "which are modified, and which are staged (ready to commit). "
            "Get in the habit of running this often!"
        ),
        display_command="git status",
        args=("status",),
    ),
    StepDefinition(
        id="make-changes",
        title="4. Make a File Change",
        description=(
            "Before we can stage and commit, we need something to commit! "
            "Go create or edit a file in your project folder, for example "
            "a file called 'hello.txt' with some text in it. "
            "When you're ready, run this step to see your changes listed."
        ),
        display_command="git status",
        args=("status",),
        notes="This step runs 'git status' so you can see your new/changed files appear in the output.",
    ),
    StepDefinition(
        id="stage-files",
        title="5. Stage Your Files",
        description=(
            "Staging tells Git which changes you want to include in your next commit. "
            "Think of it like putting files into a box before sealing it. "
            "The dot (.) means 'stage everything in the current folder'."
        ),
        display_command="git add .",
        args=("add", "."),
        notes="You can also stage specific files with 'git add filename.txt'.",
    ),
    StepDefinition(
        id="commit",
        title="6. Commit Your Changes",
        description=(
            "A commit is a saved snapshot of your staged changes. "
            "Each commit needs a message describing what you changed. "
            "Good commit messages are short but descriptive, like 'Add homepage layout'."
        ),
        display_command='git commit -m "your message"',
        # message becomes the argument after -m
        args=("commit", "-m"),
        input_request=InputRequest(
            prompt="Enter your commit message",
            placeholder="e.g., Add initial project files",
        ),
    ),
    StepDefinition(
        id="add-remote",
        title="7. Add a Remote (GitHub)",
        description=(
            "A 'remote' is a copy of your repo stored online (like on GitHub). "
            "This command links your local repo to a GitHub repository. "
            "First, create a new repo on github.com, then paste the URL here."
        ),
        display_command="git remote add origin <url>",
        args=("remote", "add", "origin"),
        input_request=InputRequest(
            prompt="Enter your GitHub repository URL",
            placeholder="https://github.com/username/my-repo.git",
        ),
        notes=(
            "Find the URL on your GitHub repo page: click the green 'Code' button "
            "and copy the HTTPS link."
        ),
    ),
    StepDefinition(
        id="push",
        title="8. Push to GitHub",
        description=(
            "Push uploads your commits to the remote repository (GitHub). "
            "The '-u' flag sets 'origin main' as the default, so next time "
            "you can just type 'git push' without the extra arguments."
        ),
        display_command="git push -u origin main",
        args=("push", "-u", "origin", "main"),
        notes=(
            "If your default branch is called 'master' instead of 'main', "
            "change 'main' to 'master'. Newer Git versions use 'main' by default."
        ),
    ),
    StepDefinition(
        id="pull",
        title="9. Pull from GitHub",
        description=(
            "Pull downloads the latest changes from the remote repository "
            "and merges them into your local branch. This is how you stay "
            "up to date with changes made by teammates (or yourself on another computer)."
        ),
        display_command="git pull",
        args=("pull",),
        notes="Always pull before you start working to avoid merge conflicts!",
    ),
)


class StepCatalog:
    """
    Ordered, read-only collection of StepDefinitions.

    There is no mutation API. A lookup miss is not an error here; callers
    treat a missing id as a no-op.
    """

    def __init__(self, steps: Iterable[StepDefinition]):
        self._steps: tuple[StepDefinition, ...] = tuple(steps)
        self._by_id: dict[str, StepDefinition] = {s.id: s for s in self._steps}
        if len(self._by_id) != len(self._steps):
            counts = Counter(s.id for s in self._steps)
            dupes = sorted(i for i, n in counts.items() if n > 1)
            raise ConfigValidationError(f"Duplicate step ids detected: {dupes}")

        logger.debug(f"StepCatalog initialized with {len(self._steps)} steps")

    @classmethod
    def default(cls) -> StepCatalog:
        """The built-in Git walkthrough."""
        return cls(DEFAULT_STEPS)

    @classmethod
    def from_dicts(cls, tables: list[dict[str, Any]]) -> StepCatalog:
        """
        Build a catalog from plain dicts, e.g. the [[step]] tables of a TOML file.

        The optional "input" table maps to InputRequest
        ({prompt = "...", placeholder = "..."}).

        Raises:
            ConfigValidationError: On unknown keys or invalid values
        """
        steps = []
        for table in tables:
            data = dict(table)
            input_table = data.pop("input", None)
            if input_table is not None:
                if not isinstance(input_table, dict):
                    raise ConfigValidationError(
                        f"Step '{data.get('id', '<unknown>')}': 'input' must be a table"
                    )
                try:
                    data["input_request"] = InputRequest(**input_table)
                except TypeError as e:
                    raise ConfigValidationError(f"Invalid input table in [[step]]: {e}") from None
            try:
                steps.append(StepDefinition(**data))
            except TypeError as e:
                raise ConfigValidationError(f"Invalid config in [[step]]: {e}") from None

        if not steps:
            raise ConfigValidationError("At least one [[step]] is required")

        return cls(steps)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def find(self, step_id: str) -> StepDefinition | None:
        """Return the step with this id, or None."""
        return self._by_id.get(step_id)

    def list_steps(self) -> tuple[StepDefinition, ...]:
        return self._steps

    def ids(self) -> list[str]:
        return [s.id for s in self._steps]

    def __iter__(self) -> Iterator[StepDefinition]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __contains__(self, step_id: object) -> bool:
        return step_id in self._by_id

    def __repr__(self) -> str:
        return f"StepCatalog(steps={len(self._steps)})"
