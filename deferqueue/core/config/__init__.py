"""Configuration package for deferqueue.

Pydantic configuration models and loading utilities, re-exported at package level.
"""

from deferqueue.core.config.loader import (
    check_unexpanded_vars,
    expand_env_vars,
    expand_env_vars_recursive,
    load_config,
)
from deferqueue.core.config.models import Config, DeferQueueConfig, LoggingConfig

__all__ = [
    # Models
    "Config",
    "DeferQueueConfig",
    "LoggingConfig",
    # Loaders
    "check_unexpanded_vars",
    "expand_env_vars",
    "expand_env_vars_recursive",
    "load_config",
]
