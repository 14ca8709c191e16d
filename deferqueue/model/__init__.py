"""deferqueue domain models.

Plain dataclasses and enums with no dependency on the runtime or config layers.
"""

from deferqueue.model.outcome import DeferUnit, Outcome, OutcomeStatus

__all__ = ["DeferUnit", "Outcome", "OutcomeStatus"]
