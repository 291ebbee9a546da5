"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import os

import pytest

# Set required environment variables before any imports
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("SCROLLDOWN_DATA_MODE", "mock")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from scrolldown.models import CompactMoment, PbpEvent  # noqa: E402


@pytest.fixture
def make_moment():
    """Build a CompactMoment with only the fields under test."""

    def _make(moment_id=10, period=None, game_clock=None, **extra):
        return CompactMoment(id=moment_id, period=period, game_clock=game_clock, **extra)

    return _make


@pytest.fixture
def make_event():
    """Build a PbpEvent with only the fields under test."""

    def _make(event_id, period=None, game_clock=None, elapsed_seconds=None, **extra):
        return PbpEvent(
            id=event_id,
            period=period,
            game_clock=game_clock,
            elapsed_seconds=elapsed_seconds,
            **extra,
        )

    return _make


@pytest.fixture
def sample_pbp_payload():
    """Sample play-by-play response payload as the API returns it."""
    return {
        "events": [
            {
                "id": 2,
                "game_id": 1,
                "period": 1,
                "game_clock": "10:30",
                "elapsed_seconds": 90,
                "event_type": "made_shot",
                "description": "Later bucket",
            },
            {
                "id": 1,
                "game_id": 1,
                "period": 1,
                "game_clock": "12:00",
                "elapsed_seconds": 0,
                "event_type": "jump_ball",
                "description": "Start",
            },
            {
                "id": 3,
                "game_id": 1,
                "period": 1,
                "game_clock": "11:30",
                "elapsed_seconds": 30,
                "event_type": "foul",
                "description": "Mid-sequence",
            },
        ]
    }
