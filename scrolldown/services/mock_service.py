"""Game service backed by bundled JSON fixtures.

Simulates network latency so loading states behave like the live API.
A moment-specific file (``compact-moment-pbp-<id>.json``) is used when
present, otherwise the shared ``compact-moment-pbp.json``.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from pydantic import ValidationError

from ..logging import logger
from ..models import PbpResponse, StringOrInt
from .exceptions import GameServiceDecodeError
from .game_service import GameService

DEFAULT_PBP_FILENAME = "compact-moment-pbp"


class MockGameService(GameService):
    def __init__(self, data_dir: str | Path, *, delay_seconds: float = 0.0) -> None:
        self.data_dir = Path(data_dir)
        self.delay_seconds = delay_seconds
        self._pbp_cache: dict[str, PbpResponse] = {}

    async def fetch_compact_moment_pbp(self, moment_id: StringOrInt) -> PbpResponse:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        key = moment_id.string_value
        cached = self._pbp_cache.get(key)
        if cached is not None:
            return cached

        path = self._resolve_path(key)
        response = self._load(path)
        logger.debug(
            "mock_moment_pbp_loaded",
            moment_id=key,
            path=str(path),
            event_count=len(response.events),
        )
        self._pbp_cache[key] = response
        return response

    def _resolve_path(self, moment_id: str) -> Path:
        specific = self.data_dir / f"{DEFAULT_PBP_FILENAME}-{moment_id}.json"
        if specific.is_file():
            return specific
        return self.data_dir / f"{DEFAULT_PBP_FILENAME}.json"

    def _load(self, path: Path) -> PbpResponse:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise GameServiceDecodeError(f"Mock data file not found: {path.name}") from exc
        except json.JSONDecodeError as exc:
            raise GameServiceDecodeError(f"Mock data file is not valid JSON: {path.name}") from exc

        try:
            return PbpResponse.model_validate(payload)
        except ValidationError as exc:
            raise GameServiceDecodeError(
                f"Mock data file does not match the play-by-play schema: {path.name}"
            ) from exc
