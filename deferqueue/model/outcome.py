"""Outcome records produced by draining a DeferQueue."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class OutcomeStatus(StrEnum):
    """Result of a single deferred callback execution."""

    SUCCESS = "success"
    FAILED = "failed"


class DeferUnit(StrEnum):
    """Which drain unit executed a callback."""

    SYNC = "sync"
    ASYNC = "async"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Record of one callback execution.

    Exactly one of ``result`` / ``error`` is meaningful, selected by ``status``.
    The error is kept as the raised exception object, untouched.

    Attributes:
        status: Whether the callback succeeded or failed.
        result: Return value of the callback (after awaiting, if awaitable).
        error: Exception raised by the callback.
        unit: Drain unit that ran the callback.
        queue_name: Name of the queue the callback was registered on.
    """

    status: OutcomeStatus
    result: T | None = None
    error: BaseException | None = None
    unit: DeferUnit = DeferUnit.SYNC
    queue_name: str = ""

    @classmethod
    def success(cls, result: T, unit: DeferUnit = DeferUnit.SYNC, queue_name: str = "") -> "Outcome[T]":
        return cls(OutcomeStatus.SUCCESS, result=result, unit=unit, queue_name=queue_name)

    @classmethod
    def failed(cls, error: BaseException, unit: DeferUnit = DeferUnit.SYNC, queue_name: str = "") -> "Outcome[T]":
        return cls(OutcomeStatus.FAILED, error=error, unit=unit, queue_name=queue_name)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    def unwrap(self) -> T | None:
        """Return the result, or re-raise the recorded error.

        Raises:
            BaseException: The exception the callback raised, if it failed.
        """
        if self.error is not None:
            raise self.error
        return self.result

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (errors rendered with repr)."""
        data: dict[str, Any] = {"status": str(self.status), "unit": str(self.unit)}
        if self.ok:
            data["result"] = self.result
        else:
            data["error"] = repr(self.error)
        return data
