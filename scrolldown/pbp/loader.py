"""Load the play-by-play slice for one compact moment.

One loader backs one consumer. Each distinct moment is fetched once; a
failed fetch keeps whatever events were already published and leaves the
moment unsatisfied so calling ``load`` again retries it.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import TYPE_CHECKING

from ..logging import logger
from ..models import CompactMoment, PbpEvent
from .ordering import ordered_events

if TYPE_CHECKING:
    from ..services.game_service import GameService


class LoaderState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class MomentPbpLoader:
    """Fetches, filters and orders play-by-play for a moment.

    Published fields: ``events``, ``is_loading``, ``error_message``.

    Every ``load`` call takes a new generation number. When a fetch resumes
    after a newer call has started, its result is dropped, so the most
    recently requested moment always owns the published state.
    """

    def __init__(self) -> None:
        self._events: list[PbpEvent] = []
        self.is_loading = False
        self.error_message: str | None = None
        self._loaded_moment_id: str | None = None
        self._generation = 0

    @property
    def events(self) -> list[PbpEvent]:
        return list(self._events)

    @property
    def loaded_moment_id(self) -> str | None:
        return self._loaded_moment_id

    @property
    def state(self) -> LoaderState:
        if self.is_loading:
            return LoaderState.LOADING
        if self.error_message is not None:
            return LoaderState.FAILED
        if self._loaded_moment_id is not None:
            return LoaderState.LOADED
        return LoaderState.IDLE

    async def load(self, moment: CompactMoment, service: GameService) -> None:
        moment_id = moment.id.string_value
        if self._loaded_moment_id == moment_id:
            if self.is_loading:
                # A fetch for another moment is in flight; this moment is still published.
                self._generation += 1
                self.is_loading = False
            return

        self._generation += 1
        generation = self._generation
        self.is_loading = True
        self.error_message = None
        logger.debug("moment_pbp_load_started", moment_id=moment_id, generation=generation)

        try:
            response = await service.fetch_compact_moment_pbp(moment.id)
        except asyncio.CancelledError:
            if generation == self._generation:
                self.is_loading = False
            raise
        except Exception as exc:
            if generation != self._generation:
                logger.debug("moment_pbp_load_stale", moment_id=moment_id, generation=generation)
                return
            self.error_message = str(exc) or type(exc).__name__
            self.is_loading = False
            logger.warning(
                "moment_pbp_load_failed",
                moment_id=moment_id,
                error=self.error_message,
                error_type=type(exc).__name__,
            )
            return

        if generation != self._generation:
            logger.debug("moment_pbp_load_stale", moment_id=moment_id, generation=generation)
            return

        self._events = ordered_events(moment, response.events)
        self._loaded_moment_id = moment_id
        self.is_loading = False
        logger.info(
            "moment_pbp_loaded",
            moment_id=moment_id,
            raw_count=len(response.events),
            event_count=len(self._events),
        )
