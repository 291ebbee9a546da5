"""Moment-relative play-by-play ordering."""

from .game_clock import clock_seconds, elapsed_seconds, period_length_seconds
from .loader import LoaderState, MomentPbpLoader
from .ordering import (
    event_elapsed_seconds,
    filter_events_for_moment,
    moment_elapsed_seconds,
    ordered_events,
    sort_chronological,
)

__all__ = [
    "LoaderState",
    "MomentPbpLoader",
    "clock_seconds",
    "elapsed_seconds",
    "event_elapsed_seconds",
    "filter_events_for_moment",
    "moment_elapsed_seconds",
    "ordered_events",
    "period_length_seconds",
    "sort_chronological",
]
