from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO

try:
    import tomllib as tomli  # Python 3.11+
except ImportError:
    import tomli  # <3.11

from .exceptions import ConfigValidationError
from .helper_config import HelperConfig
from .step_catalog import StepCatalog

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "githelper.toml"

_TOP_LEVEL_KEYS = {"git", "workspace", "logging", "step"}
_LOGGING_KEYS = {"level", "file"}


# =====================================================================
#   Main loader
# =====================================================================
def load_config(path: str | Path | BinaryIO) -> HelperConfig:
    """
    Load and validate a TOML config file into a HelperConfig.
    Resolves relative `workspace` paths relative to the config file location.
    """
    config_path: Path | None = None
    if not hasattr(path, "read"):
        config_path = Path(path).resolve()
        with open(config_path, "rb") as f:
            data = _parse(f, config_path)
    else:
        data = _parse(path, None)  # type: ignore[arg-type]

    # Resolve base directory for relative paths
    base_dir = config_path.parent if config_path else Path.cwd()

    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigValidationError(
            f"Unknown config keys: {sorted(unknown)}. Valid keys: {sorted(_TOP_LEVEL_KEYS)}"
        )

    kwargs: dict[str, Any] = {}

    if "git" in data:
        if not isinstance(data["git"], str):
            raise ConfigValidationError("'git' must be a string")
        kwargs["git"] = data["git"]

    # ────── workspace: a single path or a list of them ──────
    if "workspace" in data:
        kwargs["workspace"] = tuple(
            _resolve_path(p, base_dir) for p in _as_path_list(data["workspace"])
        )
        logger.debug(f"Loaded {len(kwargs['workspace'])} workspace root(s)")

    # ────── [logging] ──────
    logging_dict = data.get("logging", {})
    if not isinstance(logging_dict, dict):
        raise ConfigValidationError("[logging] must be a table")
    bad = set(logging_dict) - _LOGGING_KEYS
    if bad:
        raise ConfigValidationError(f"Invalid config in [logging]: unknown keys {sorted(bad)}")
    if "level" in logging_dict:
        kwargs["log_level"] = str(logging_dict["level"])
    if "file" in logging_dict:
        kwargs["log_file"] = bool(logging_dict["file"])

    # ────── [[step]] ──────
    if "step" in data:
        step_data = data["step"]
        if not isinstance(step_data, list):
            raise ConfigValidationError("[[step]] must be an array of tables")
        kwargs["steps"] = StepCatalog.from_dicts(step_data)
        logger.debug(f"Loaded {len(kwargs['steps'])} custom steps")

    return HelperConfig(**kwargs)


def find_default_config(directory: str | Path | None = None) -> Path | None:
    """Return ./githelper.toml (or directory/githelper.toml) if it exists."""
    candidate = Path(directory or Path.cwd()) / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None


# =====================================================================
#   Helpers
# =====================================================================
def _parse(f: BinaryIO, config_path: Path | None) -> dict[str, Any]:
    try:
        return tomli.load(f)
    except tomli.TOMLDecodeError as e:
        where = f" in {config_path}" if config_path else ""
        raise ConfigValidationError(f"Invalid TOML{where}: {e}") from None


def _as_path_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    raise ConfigValidationError("'workspace' must be a path or a list of paths")


def _resolve_path(value: str, base_dir: Path) -> str:
    p = Path(value).expanduser()
    if not p.is_absolute():
        p = base_dir / p
    return str(p.resolve())
