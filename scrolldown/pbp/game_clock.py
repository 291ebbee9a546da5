"""Game clock conversion.

Turns a period number plus a countdown clock ("MM:SS", seconds may be
fractional) into seconds elapsed since tip-off. Regulation quarters are
12 minutes, every overtime period is 5 minutes.
"""

from __future__ import annotations

from ..utils.parsing import parse_float

REGULATION_PERIODS = 4
REGULATION_PERIOD_SECONDS = 12 * 60
OVERTIME_PERIOD_SECONDS = 5 * 60
SECONDS_PER_MINUTE = 60


def clock_seconds(clock: str | None) -> float | None:
    """Parse a countdown clock to seconds remaining.

    Exactly one colon is required; both sides must be numbers.
    Returns None for anything else.
    """
    if not clock:
        return None
    parts = clock.split(":")
    if len(parts) != 2:
        return None
    minutes = parse_float(parts[0])
    seconds = parse_float(parts[1])
    if minutes is None or seconds is None:
        return None
    return minutes * SECONDS_PER_MINUTE + seconds


def period_length_seconds(period: int) -> int:
    if period <= REGULATION_PERIODS:
        return REGULATION_PERIOD_SECONDS
    return OVERTIME_PERIOD_SECONDS


def period_start_seconds(period: int) -> int:
    """Game seconds elapsed before ``period`` begins."""
    if period <= REGULATION_PERIODS:
        return (period - 1) * REGULATION_PERIOD_SECONDS
    overtime_index = period - REGULATION_PERIODS - 1
    return REGULATION_PERIODS * REGULATION_PERIOD_SECONDS + overtime_index * OVERTIME_PERIOD_SECONDS


def elapsed_seconds(period: int | None, game_clock: str | None) -> float | None:
    """Convert period + countdown clock into elapsed game seconds.

    Returns None when the period is missing or not positive, or the clock
    does not parse. A clock larger than the period length clamps to the
    start of the period.
    """
    if period is None or period <= 0:
        return None
    remaining = clock_seconds(game_clock)
    if remaining is None:
        return None

    elapsed_in_period = max(0.0, period_length_seconds(period) - remaining)
    return float(period_start_seconds(period)) + elapsed_in_period
