"""Filter and order play-by-play events relative to a moment.

Every function here is pure. Events whose position in game time cannot be
resolved are never excluded and always sort after the resolved ones, in the
order they arrived.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import CompactMoment, PbpEvent
from .game_clock import elapsed_seconds


def event_elapsed_seconds(event: PbpEvent) -> float | None:
    """Temporal key for an event; an explicit ``elapsed_seconds`` wins."""
    if event.elapsed_seconds is not None:
        return event.elapsed_seconds
    return elapsed_seconds(event.period, event.game_clock)


def moment_elapsed_seconds(moment: CompactMoment) -> float | None:
    return elapsed_seconds(moment.period, moment.game_clock)


def filter_events_for_moment(
    moment: CompactMoment,
    events: Sequence[PbpEvent],
) -> list[PbpEvent]:
    """Keep events that happened at or before the moment.

    If the moment itself cannot be placed in game time, nothing is excluded.
    """
    moment_key = moment_elapsed_seconds(moment)
    if moment_key is None:
        return list(events)

    kept: list[PbpEvent] = []
    for event in events:
        event_key = event_elapsed_seconds(event)
        if event_key is None or event_key <= moment_key:
            kept.append(event)
    return kept


def _chronological_key(indexed: tuple[int, PbpEvent]) -> tuple[int, float, int]:
    index, event = indexed
    key = event_elapsed_seconds(event)
    if key is None:
        return (1, 0.0, index)
    return (0, key, index)


def sort_chronological(events: Sequence[PbpEvent]) -> list[PbpEvent]:
    """Order events by elapsed game time.

    Resolved events come first, ascending; ties keep input order. Events
    without a resolvable time follow, in input order.
    """
    return [event for _, event in sorted(enumerate(events), key=_chronological_key)]


def ordered_events(moment: CompactMoment, events: Sequence[PbpEvent]) -> list[PbpEvent]:
    """Play-by-play slice leading up to ``moment``, oldest first."""
    return sort_chronological(filter_events_for_moment(moment, events))
