"""Game service backed by the live ScrollDown API."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from ..logging import logger
from ..models import PbpResponse, StringOrInt
from .exceptions import GameServiceDecodeError, GameServiceError, GameServiceHTTPError
from .game_service import GameService

COMPACT_MOMENT_PBP_PATH = "/api/compact-moments/{moment_id}/pbp"


class RealGameService(GameService):
    """Fetches moment play-by-play over HTTP.

    Owns an ``httpx.AsyncClient`` unless one is injected; use as an async
    context manager or call ``aclose()`` when done.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> RealGameService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def fetch_compact_moment_pbp(self, moment_id: StringOrInt) -> PbpResponse:
        path = COMPACT_MOMENT_PBP_PATH.format(moment_id=moment_id.string_value)
        logger.info("moment_pbp_fetch", path=path, moment_id=moment_id.string_value)
        try:
            response = await self.client.get(path)
        except httpx.HTTPError as exc:
            logger.warning(
                "moment_pbp_fetch_error",
                moment_id=moment_id.string_value,
                error=str(exc),
            )
            raise GameServiceError(f"Could not reach the server: {exc}") from exc

        if response.status_code != 200:
            logger.warning(
                "moment_pbp_fetch_failed",
                moment_id=moment_id.string_value,
                status=response.status_code,
            )
            raise GameServiceHTTPError(
                f"Server returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return PbpResponse.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning(
                "moment_pbp_decode_failed",
                moment_id=moment_id.string_value,
                error_count=exc.error_count(),
            )
            raise GameServiceDecodeError("Play-by-play response could not be decoded") from exc
