"""Tests for moment and play-by-play models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from scrolldown.models import CompactMoment, PbpEvent, PbpResponse, StringOrInt


class TestStringOrInt:
    """Tests for the polymorphic identifier."""

    def test_int_source(self):
        value = StringOrInt.of(10)
        assert value.kind == "int"
        assert value.string_value == "10"
        assert value.int_value == 10

    def test_string_source(self):
        value = StringOrInt.of("moment-7")
        assert value.kind == "string"
        assert value.string_value == "moment-7"
        assert value.int_value is None

    def test_numeric_string_int_value(self):
        assert StringOrInt.of("42").int_value == 42

    def test_fractional_string_has_no_int_value(self):
        assert StringOrInt.of("1.5").int_value is None

    def test_equality_uses_string_projection(self):
        assert StringOrInt.of(10) == StringOrInt.of("10")
        assert hash(StringOrInt.of(10)) == hash(StringOrInt.of("10"))
        assert StringOrInt.of(10) != StringOrInt.of(11)

    def test_rejects_boolean(self):
        with pytest.raises(ValidationError):
            StringOrInt.of(True)

    def test_rejects_mismatched_kind(self):
        with pytest.raises(ValidationError):
            StringOrInt(kind="int", value="abc")

    def test_serializes_to_raw_value(self):
        moment = CompactMoment(id=12, period=1)
        assert moment.model_dump()["id"] == 12
        assert CompactMoment(id="x1").model_dump()["id"] == "x1"


class TestCompactMoment:
    def test_decodes_api_payload(self):
        moment = CompactMoment.model_validate(
            {
                "id": 10,
                "period": 2,
                "game_clock": "5:12",
                "title": "Tatum heats up",
                "team_abbreviation": "BOS",
                "player_name": "Jayson Tatum",
            }
        )
        assert moment.id.string_value == "10"
        assert moment.period == 2
        assert moment.game_clock == "5:12"

    def test_display_title_fallbacks(self):
        assert CompactMoment(id=1, title="Run", description="Desc").display_title == "Run"
        assert CompactMoment(id=1, description="Desc").display_title == "Desc"
        assert CompactMoment(id=1).display_title == "Moment update"

    def test_time_label(self):
        assert CompactMoment(id=1, period=2, game_clock="5:12").time_label == "Q2 • 5:12"
        assert CompactMoment(id=1, period=3).time_label == "Q3"
        assert CompactMoment(id=1, game_clock="0:09").time_label == "0:09"
        assert CompactMoment(id=1).time_label is None

    def test_is_frozen(self):
        moment = CompactMoment(id=1, period=1)
        with pytest.raises(ValidationError):
            moment.period = 2


class TestPbpEvent:
    def test_display_description(self):
        assert PbpEvent(id=1, description="Tatum dunk").display_description == "Tatum dunk"
        assert PbpEvent(id=1, description="", event_type="made_shot").display_description == "Made Shot"
        assert PbpEvent(id=1).display_description == "Play update"

    def test_elapsed_seconds_accepts_ints(self):
        assert PbpEvent(id=1, elapsed_seconds=90).elapsed_seconds == 90.0

    def test_rejects_non_finite_elapsed_seconds(self):
        with pytest.raises(ValidationError):
            PbpEvent(id=1, elapsed_seconds=float("nan"))

    def test_response_defaults_to_empty(self):
        assert PbpResponse().events == []

    def test_response_decodes_events(self, sample_pbp_payload):
        response = PbpResponse.model_validate(sample_pbp_payload)
        assert [event.id.int_value for event in response.events] == [2, 1, 3]
        assert response.events[0].game_id == StringOrInt.of(1)
