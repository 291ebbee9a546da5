"""Pydantic models for compact moments and play-by-play events."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

IdKind = Literal["int", "string"]

TIME_LABEL_SEPARATOR = " • "


class StringOrInt(BaseModel):
    """Identifier that the API sends as either a number or a string.

    The source kind is kept, but identity and equality always go through
    ``string_value`` so ``10`` and ``"10"`` name the same moment.
    """

    model_config = ConfigDict(frozen=True)

    kind: IdKind
    value: int | str

    @model_validator(mode="before")
    @classmethod
    def from_raw(cls, data: Any) -> Any:
        if isinstance(data, bool):
            raise ValueError("identifier cannot be a boolean")
        if isinstance(data, int):
            return {"kind": "int", "value": data}
        if isinstance(data, str):
            return {"kind": "string", "value": data}
        return data

    @model_validator(mode="after")
    def check_kind(self) -> StringOrInt:
        expected = int if self.kind == "int" else str
        if not isinstance(self.value, expected) or isinstance(self.value, bool):
            raise ValueError(f"identifier value {self.value!r} does not match kind {self.kind!r}")
        return self

    @model_serializer
    def serialize(self) -> int | str:
        return self.value

    @classmethod
    def of(cls, value: int | str) -> StringOrInt:
        return cls.model_validate(value)

    @property
    def string_value(self) -> str:
        return str(self.value)

    @property
    def int_value(self) -> int | None:
        if self.kind == "int":
            return self.value  # type: ignore[return-value]
        try:
            return int(self.value)
        except ValueError:
            return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringOrInt):
            return self.string_value == other.string_value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.string_value)

    def __str__(self) -> str:
        return self.string_value


def _time_label(period: int | None, game_clock: str | None) -> str | None:
    parts: list[str] = []
    if period is not None:
        parts.append(f"Q{period}")
    if game_clock:
        parts.append(game_clock)
    return TIME_LABEL_SEPARATOR.join(parts) if parts else None


class CompactMoment(BaseModel):
    """Compact timeline moment (CompactMoment schema).

    Only ``id``, ``period`` and ``game_clock`` matter for ordering; the rest
    is display payload.
    """

    model_config = ConfigDict(frozen=True)

    id: StringOrInt
    period: int | None = None
    game_clock: str | None = None
    title: str | None = None
    description: str | None = None
    team_abbreviation: str | None = None
    player_name: str | None = None

    @property
    def display_title(self) -> str:
        return self.title or self.description or "Moment update"

    @property
    def time_label(self) -> str | None:
        return _time_label(self.period, self.game_clock)


class PbpEvent(BaseModel):
    """Single play-by-play event.

    ``elapsed_seconds`` is authoritative when the API provides it; otherwise
    the event is placed in game time from ``period`` and ``game_clock``.
    """

    model_config = ConfigDict(frozen=True)

    id: StringOrInt
    game_id: StringOrInt | None = None
    period: int | None = None
    game_clock: str | None = None
    elapsed_seconds: float | None = Field(None, allow_inf_nan=False)
    event_type: str | None = None
    description: str | None = None
    team: str | None = None
    team_id: StringOrInt | None = None
    player_name: str | None = None
    player_id: StringOrInt | None = None
    home_score: int | None = None
    away_score: int | None = None

    @property
    def display_description(self) -> str:
        if self.description:
            return self.description
        if self.event_type:
            return self.event_type.replace("_", " ").title()
        return "Play update"

    @property
    def time_label(self) -> str | None:
        return _time_label(self.period, self.game_clock)


class PbpResponse(BaseModel):
    events: list[PbpEvent] = Field(default_factory=list)
