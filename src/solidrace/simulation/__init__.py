"""Simulation engine components."""

from .events import RaceScheduler, ScheduledAction
from .race import CarSnapshot, IncompleteDriverError, Race, RaceSummary

__all__ = [
    "CarSnapshot",
    "IncompleteDriverError",
    "Race",
    "RaceScheduler",
    "RaceSummary",
    "ScheduledAction",
]
