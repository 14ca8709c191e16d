"""Core functionality for deferqueue: logging and configuration.

Note: configuration names are loaded lazily because the config models
depend on deferqueue.runtime, which itself imports deferqueue.core.logging.
"""

from typing import Any

from deferqueue.core.logging import get_queue_logger, setup_logging

__all__ = [
    "Config",
    "load_config",
    "get_queue_logger",
    "setup_logging",
]


def __getattr__(name: str) -> Any:
    """Lazy import config names to avoid circular imports."""
    if name in ("Config", "load_config"):
        from deferqueue.core import config

        return getattr(config, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
