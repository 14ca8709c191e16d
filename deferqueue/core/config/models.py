"""Pydantic configuration models for deferqueue.

For loading logic, see loader.py.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from deferqueue.runtime.defer_queue import DeferQueue, RemovalOrder


class DeferQueueConfig(BaseModel):
    """Configuration for a single DeferQueue."""

    name: str = Field(default="", description="Queue name used in diagnostic messages")
    removal_order: RemovalOrder = Field(
        default=RemovalOrder.LIFO,
        description="Sync unit removal order: lifo (newest first) or fifo (oldest first)",
    )
    report_outcomes: bool = Field(default=True, description="Collect and return per-callback outcomes")


class LoggingConfig(BaseModel):
    """Configuration for logging system."""

    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    directory: str | None = Field(default=None, description="Directory for log files (console only when unset)")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB before rotation")
    backup_count: int = Field(default=5, description="Number of backup log files to keep")


class Config(BaseModel):
    """Root configuration for deferqueue."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")
    queues: dict[str, DeferQueueConfig] = Field(default_factory=dict, description="Named queue definitions")

    @model_validator(mode="before")
    @classmethod
    def _default_queue_names(cls, data: Any) -> Any:
        """Use the mapping key as name for queue entries that omit one.

        A bare ``queues:`` key in YAML loads as None and means no queues.
        """
        if not isinstance(data, dict) or "queues" not in data:
            return data
        if data["queues"] is None:
            return {**data, "queues": {}}
        if not isinstance(data["queues"], dict):
            return data

        queues: dict[str, Any] = {}
        for key, entry in data["queues"].items():
            if isinstance(entry, DeferQueueConfig):
                entry = entry.model_dump(exclude_unset=True)
            if entry is None:
                entry = {}
            if isinstance(entry, dict):
                entry = {**entry}
                entry.setdefault("name", key)
            queues[key] = entry
        return {**data, "queues": queues}

    def build_queue(self, key: str) -> DeferQueue:
        """Create a DeferQueue for a configured entry.

        Raises:
            KeyError: If no queue is configured under ``key``.
        """
        if key not in self.queues:
            raise KeyError(f"No queue configured under {key!r}")
        return DeferQueue.from_config(self.queues[key])
