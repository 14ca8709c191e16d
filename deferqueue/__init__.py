"""deferqueue - collect deferred callbacks and drain them with isolated failures."""

from deferqueue.core.config import Config, DeferQueueConfig, LoggingConfig, load_config
from deferqueue.core.logging import get_queue_logger, setup_logging
from deferqueue.model import DeferUnit, Outcome, OutcomeStatus
from deferqueue.runtime import DeferQueue, DeferredCallback, RemovalOrder

__all__ = [
    "Config",
    "DeferQueue",
    "DeferQueueConfig",
    "DeferUnit",
    "DeferredCallback",
    "LoggingConfig",
    "Outcome",
    "OutcomeStatus",
    "RemovalOrder",
    "get_queue_logger",
    "load_config",
    "setup_logging",
]
