"""Event system: bus and event types for the ripper lifecycle."""

from styleripper.events.bus import EventBus, EventRecorder
from styleripper.events.types import (
    ClassnamesCounted,
    DeadRulesEliminated,
    RenamePlanned,
    RipCompleted,
    RipStarted,
)

__all__ = [
    "EventBus",
    "EventRecorder",
    "ClassnamesCounted",
    "DeadRulesEliminated",
    "RenamePlanned",
    "RipCompleted",
    "RipStarted",
]
