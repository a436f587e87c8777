"""Documentation include dependency checker."""

from .config import BuildEnvironment, CheckConfig, ConfigError, load_config
from .hook import IncludeCheckHook
from .models import ClassificationResult, StatusUpdate

__all__ = [
    "BuildEnvironment",
    "CheckConfig",
    "ClassificationResult",
    "ConfigError",
    "IncludeCheckHook",
    "StatusUpdate",
    "load_config",
]

__version__ = "0.1.0"
