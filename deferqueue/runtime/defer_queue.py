"""Deferred-callback queue with a concurrent async unit and a sequential sync unit."""

import asyncio
import inspect
from collections import deque
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from deferqueue.core.logging import get_queue_logger
from deferqueue.model.outcome import DeferUnit, Outcome

if TYPE_CHECKING:
    from deferqueue.core.config.models import DeferQueueConfig

DeferredCallback = Callable[[], Any]

ASYNC_FAILURE_MESSAGE = "failed to perform async deferred function"
SYNC_FAILURE_MESSAGE = "Failed to run sync deferred callback"


class RemovalOrder(StrEnum):
    """Order in which the sync unit removes callbacks from the sync sequence.

    - LIFO: most recently appended callback runs first (default)
    - FIFO: first appended callback runs first
    """

    LIFO = "lifo"
    FIFO = "fifo"


class DeferQueue:
    """Collects deferred callbacks and runs them all on demand.

    Two sequences are kept:
    - async_list: every callback runs concurrently when the queue is drained.
      The list is snapshotted when ``defer()`` starts and is never consumed,
      so a later drain runs the same callbacks again.
    - sync_list: callbacks run one at a time, each awaited before the next
      is removed. The sequence is re-read on every iteration and consumed,
      so callbacks appended mid-drain run in the same drain.

    Both units run concurrently with each other. No locking is applied.
    """

    def __init__(
        self,
        name: str = "",
        *,
        removal_order: RemovalOrder = RemovalOrder.LIFO,
        report_outcomes: bool = True,
    ):
        """Initialize the queue.

        Args:
            name: Label used in diagnostic messages. Not required to be unique.
            removal_order: Removal policy for the sync unit.
            report_outcomes: Whether ``defer()`` collects and returns outcomes.
        """
        self.name = name
        self.removal_order = RemovalOrder(removal_order)
        self.report_outcomes = report_outcomes
        self.async_list: list[DeferredCallback] = []
        self.sync_list: deque[DeferredCallback] = deque()
        self._drains = 0
        self._logger = get_queue_logger(name)

    @classmethod
    def from_config(cls, config: "DeferQueueConfig") -> "DeferQueue":
        """Build a queue from its configuration model."""
        return cls(
            config.name,
            removal_order=config.removal_order,
            report_outcomes=config.report_outcomes,
        )

    def append_sync(self, callback: DeferredCallback) -> None:
        """Queue a callback for the sequential sync unit."""
        self.sync_list.append(callback)

    def append_async(self, callback: DeferredCallback) -> None:
        """Queue a callback for the concurrent async unit."""
        self.async_list.append(callback)

    async def defer(self) -> list[Outcome[Any]] | None:
        """Drain the queue.

        Runs every async callback concurrently alongside the sync unit and
        waits for both to finish. Callback failures are logged and recorded,
        never raised.

        Returns:
            Outcomes in the order the callbacks settled, or None when
            outcome reporting is disabled.
        """
        # Snapshot before the first suspension point
        async_snapshot = list(self.async_list)
        outcomes: list[Outcome[Any]] = []

        self._logger.debug(
            f"Draining queue {self.name!r}: {len(async_snapshot)} async, {len(self.sync_list)} sync"
        )

        await asyncio.gather(
            *(self._run_async(callback, outcomes) for callback in async_snapshot),
            self._run_sync_unit(outcomes),
        )

        self._drains += 1
        self._logger.debug(f"Drained queue {self.name!r}: {len(outcomes)} callbacks settled")

        if not self.report_outcomes:
            return None
        return outcomes

    async def _run_async(self, callback: DeferredCallback, outcomes: list[Outcome[Any]]) -> None:
        outcomes.append(await self._invoke(callback, DeferUnit.ASYNC, ASYNC_FAILURE_MESSAGE))

    async def _run_sync_unit(self, outcomes: list[Outcome[Any]]) -> None:
        while self.sync_list:
            if self.removal_order == RemovalOrder.LIFO:
                callback = self.sync_list.pop()
            else:
                callback = self.sync_list.popleft()
            outcomes.append(await self._invoke(callback, DeferUnit.SYNC, SYNC_FAILURE_MESSAGE))

    async def _invoke(self, callback: DeferredCallback, unit: DeferUnit, failure_message: str) -> Outcome[Any]:
        """Run one callback, awaiting its result if needed, and capture the outcome."""
        try:
            result = callback()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            self._logger.error(f"{self.name} {failure_message}: {e!r}", exc_info=True)
            return Outcome.failed(e, unit=unit, queue_name=self.name)
        return Outcome.success(result, unit=unit, queue_name=self.name)

    def get_stats(self) -> dict[str, int | str]:
        """Get current queue statistics."""
        return {
            "name": self.name,
            "sync_pending": len(self.sync_list),
            "async_registered": len(self.async_list),
            "drains": self._drains,
        }

    def __repr__(self) -> str:
        return (
            f"DeferQueue(name={self.name!r}, removal_order={self.removal_order.value}, "
            f"async={len(self.async_list)}, sync={len(self.sync_list)})"
        )
