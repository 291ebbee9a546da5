"""Shared interface for game data services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..models import PbpResponse, StringOrInt

if TYPE_CHECKING:
    from ..config import Settings


class GameService(ABC):
    """Abstract base class for game data sources (bundled mock or live API)."""

    @abstractmethod
    async def fetch_compact_moment_pbp(self, moment_id: StringOrInt) -> PbpResponse:
        """
        Fetch the raw play-by-play events surrounding a compact moment.

        Args:
            moment_id: Identifier of the moment

        Returns:
            Events in the order the source delivered them

        Raises:
            GameServiceError: The events could not be fetched or decoded
        """
        raise NotImplementedError


def get_game_service(settings: Settings | None = None) -> GameService:
    """Return the service for the configured data mode."""
    from .api_service import RealGameService
    from .mock_service import MockGameService

    if settings is None:
        from ..config import settings as default_settings

        settings = default_settings

    if settings.data_mode == "api":
        return RealGameService(
            base_url=settings.api_base_url,
            timeout=settings.service_config.request_timeout_seconds,
        )
    return MockGameService(
        data_dir=settings.service_config.mock_data_dir,
        delay_seconds=settings.service_config.mock_delay_seconds,
    )
