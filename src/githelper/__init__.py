__version__ = "0.1.0"

from .command_runner import CommandRunner, format_command_line
from .events import ResultEvent, StatusEvent
from .exceptions import (
    NO_WORKSPACE_MESSAGE,
    ConfigValidationError,
    GitHelperError,
    InputCancelledError,
    PreconditionError,
    UnknownStepError,
)
from .execution_result import (
    CANCELLED_MESSAGE,
    NO_OUTPUT_PLACEHOLDER,
    ExecutionRequest,
    ExecutionResult,
    StepState,
)
from .helper_config import HelperConfig
from .interaction_controller import InteractionController
from .load_config import load_config
from .log_sink import LogSink, MemoryLogSink, StreamLogSink
from .logging_config import disable_logging, get_log_file_path, setup_logging
from .quick_actions import QUICK_ACTIONS, QuickAction
from .step_catalog import DEFAULT_STEPS, StepCatalog
from .step_definition import InputRequest, StepDefinition

__all__ = [
    # Version
    "__version__",
    # Core Components
    "CommandRunner",
    "HelperConfig",
    "InteractionController",
    "StepCatalog",
    "StepDefinition",
    "InputRequest",
    "QuickAction",
    "load_config",
    # Data
    "DEFAULT_STEPS",
    "QUICK_ACTIONS",
    "ExecutionRequest",
    "ExecutionResult",
    "StepState",
    "StatusEvent",
    "ResultEvent",
    "CANCELLED_MESSAGE",
    "NO_OUTPUT_PLACEHOLDER",
    "NO_WORKSPACE_MESSAGE",
    # Log sinks
    "LogSink",
    "MemoryLogSink",
    "StreamLogSink",
    # Utilities
    "format_command_line",
    "setup_logging",
    "disable_logging",
    "get_log_file_path",
    # Exceptions
    "GitHelperError",
    "ConfigValidationError",
    "InputCancelledError",
    "PreconditionError",
    "UnknownStepError",
]
