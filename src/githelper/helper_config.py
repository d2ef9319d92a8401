# githelper/helper_config.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .command_runner import DEFAULT_GIT
from .exceptions import ConfigValidationError
from .step_catalog import StepCatalog

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class HelperConfig:
    """
    Top-level configuration object returned by load_config().
    Contains everything needed to build an InteractionController.
    """

    git: str = DEFAULT_GIT
    """Executable name for git, resolved on PATH."""

    workspace: tuple[str, ...] = ()
    """
    Project roots. git runs in the first one; an empty tuple means no
    folder is open and every step fails with the no-workspace message.
    """

    steps: StepCatalog = field(default_factory=StepCatalog.default)
    """The walkthrough. [[step]] tables in the config file replace the built-in one."""

    log_level: str = "WARNING"
    """Level for the python 'githelper' logger (not the user-facing log sink)."""

    log_file: bool = False
    """Also write python logging records to the default log file."""

    def __post_init__(self) -> None:
        if not self.git.strip():
            logger.warning("Invalid config: git executable cannot be empty")
            raise ConfigValidationError("'git' cannot be empty")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid config: unknown log level {self.log_level!r}")
            raise ConfigValidationError(
                f"Invalid log level '{self.log_level}': must be one of {', '.join(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, "workspace", tuple(str(w) for w in self.workspace))
        object.__setattr__(self, "log_level", self.log_level.upper())
