"""Runtime services for deferqueue."""

from deferqueue.runtime.defer_queue import DeferQueue, DeferredCallback, RemovalOrder

__all__ = ["DeferQueue", "DeferredCallback", "RemovalOrder"]
