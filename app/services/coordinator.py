"""Input-to-result coordination for the interactive lookup.

The coordinator owns the current search term. Every mutation cancels the
pending debounce timer, clears the previous result and schedules a new lookup
after the quiet period. Each mutation also bumps a generation counter; a
lookup only applies its outcome if its generation is still the current one,
so responses to superseded input are dropped instead of overwriting newer
state.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Protocol

from app.domain.models import (
    Error,
    ErrorReason,
    Idle,
    Loading,
    PokemonRecord,
    ResultState,
    SearchSnapshot,
    Success,
)
from app.i18n import I18nService
from app.logging import logger
from app.services.debounce import Debouncer
from app.services.exceptions import (
    LookupServiceError,
    PokemonNotFound,
    UpstreamServerError,
)
from app.services.pokeapi import normalize_term

DEFAULT_QUIET_PERIOD = 0.3

SnapshotListener = Callable[[SearchSnapshot], None]


class LookupClient(Protocol):
    async def fetch(self, name: str) -> PokemonRecord: ...


_ERROR_KEYS: dict[ErrorReason, str] = {
    "not_found": "lookup.not_found",
    "server_error": "lookup.server_error",
    "connection_error": "lookup.connection_error",
}


def classify_failure(exc: Exception) -> ErrorReason:
    if isinstance(exc, PokemonNotFound):
        return "not_found"
    if isinstance(exc, UpstreamServerError):
        return "server_error"
    # Transport, decode and unexpected client failures all end the attempt the same way.
    return "connection_error"


class QueryCoordinator:
    def __init__(
        self,
        lookup: LookupClient,
        *,
        i18n: I18nService | None = None,
        quiet_period: float = DEFAULT_QUIET_PERIOD,
    ) -> None:
        self._lookup = lookup
        self._i18n = i18n or I18nService()
        self._debouncer = Debouncer(quiet_period)
        self._generation = 0
        self._term = ""
        self._has_searched = False
        self._state: ResultState = Idle()
        self._inflight: set[asyncio.Task[None]] = set()
        self._listeners: list[SnapshotListener] = []

    @property
    def term(self) -> str:
        return self._term

    @property
    def has_searched(self) -> bool:
        return self._has_searched

    @property
    def state(self) -> ResultState:
        return self._state

    @property
    def snapshot(self) -> SearchSnapshot:
        return SearchSnapshot(term=self._term, has_searched=self._has_searched, state=self._state)

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register ``listener`` for snapshot changes; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_term(self, value: str) -> None:
        """Record a new input value and restart the quiet period."""

        self._debouncer.cancel()
        self._generation += 1
        self._term = value
        self._has_searched = True
        self._state = Idle()
        self._notify()
        self._debouncer.schedule(self._fire, self._generation)
        logger.debug("lookup_scheduled", generation=self._generation, delay=self._debouncer.delay)

    async def wait_idle(self) -> None:
        """Wait until no lookup is scheduled or in flight."""

        while self._debouncer.pending or self._inflight:
            if self._inflight:
                await asyncio.gather(*list(self._inflight), return_exceptions=True)
            else:
                await asyncio.sleep(self._debouncer.remaining())

    async def aclose(self) -> None:
        self._debouncer.cancel()
        tasks = list(self._inflight)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._listeners.clear()

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            return
        query = normalize_term(self._term)
        if not query:
            self._has_searched = False
            self._set_state(Idle())
            logger.debug("lookup_skipped_empty", generation=generation)
            return

        self._set_state(Loading(query=query))
        logger.info("lookup_issued", query=query, generation=generation)
        task = asyncio.create_task(self._run_lookup(query, generation))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run_lookup(self, query: str, generation: int) -> None:
        try:
            record = await self._lookup.fetch(query)
        except LookupServiceError as exc:
            reason = classify_failure(exc)
            logger.warning(
                "lookup_failed",
                query=query,
                generation=generation,
                reason=reason,
                error_type=exc.__class__.__name__,
                error=str(exc),
            )
            outcome: ResultState = Error(reason=reason, message=self._i18n.gettext(_ERROR_KEYS[reason]))
        except Exception as exc:
            reason = classify_failure(exc)
            logger.error(
                "lookup_failed",
                query=query,
                generation=generation,
                reason=reason,
                error_type=exc.__class__.__name__,
                error=str(exc),
                exc_info=True,
            )
            outcome = Error(reason=reason, message=self._i18n.gettext(_ERROR_KEYS[reason]))
        else:
            logger.info("lookup_resolved", query=query, generation=generation, pokemon_id=record.id)
            outcome = Success(record=record)

        if generation != self._generation:
            logger.info(
                "lookup_discarded_stale",
                query=query,
                generation=generation,
                current_generation=self._generation,
            )
            return
        self._set_state(outcome)

    def _set_state(self, state: ResultState) -> None:
        self._state = state
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = ["QueryCoordinator", "LookupClient", "classify_failure", "DEFAULT_QUIET_PERIOD"]
