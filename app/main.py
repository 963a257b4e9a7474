"""Application entrypoint: an interactive lookup session on stdin/stdout."""

from __future__ import annotations

import asyncio
import sys
from typing import AsyncIterable, AsyncIterator, Callable

import httpx

from app.config import AppSettings, get_settings
from app.domain.models import SearchSnapshot
from app.i18n import I18nService
from app.logging import configure_logging, logger
from app.services.coordinator import QueryCoordinator
from app.services.pokeapi import PokemonLookupService
from app.views.projector import project
from app.views.render import render_text


def build_renderer(
    settings: AppSettings,
    i18n: I18nService,
    emit: Callable[[str], None] = print,
) -> Callable[[SearchSnapshot], None]:
    """Return a snapshot listener that emits the rendered view when it changes."""

    placeholder = str(settings.presentation.placeholder_image_url)
    last: dict[str, str | None] = {"text": None}

    def _render(snapshot: SearchSnapshot) -> None:
        text = render_text(project(snapshot, placeholder_image=placeholder), i18n)
        if text == last["text"]:
            return
        last["text"] = text
        if text:
            emit(text)

    return _render


async def run_session(coordinator: QueryCoordinator, lines: AsyncIterable[str]) -> None:
    """Feed each line as the new full term value, then let the last lookup settle."""

    async for line in lines:
        coordinator.set_term(line.rstrip("\r\n"))
    await coordinator.wait_idle()


async def _stdin_lines() -> AsyncIterator[str]:
    while True:
        line = await asyncio.to_thread(sys.stdin.readline)
        if not line:
            return
        yield line


async def main(lines: AsyncIterable[str] | None = None) -> None:
    settings = get_settings()
    configure_logging(settings.log_level, stream=sys.stderr, environment=settings.environment)

    i18n = I18nService(default_locale=settings.presentation.language)
    if not i18n.has_locale(settings.presentation.language):
        logger.warning("locale_missing", language=settings.presentation.language)

    print(i18n.gettext("app.title"))
    print(i18n.gettext("app.prompt"))

    async with httpx.AsyncClient(follow_redirects=True) as client:
        service = PokemonLookupService(client, settings=settings.api)
        coordinator = QueryCoordinator(
            service,
            i18n=i18n,
            quiet_period=settings.debounce_seconds,
        )
        renderer = build_renderer(settings, i18n)
        coordinator.subscribe(renderer)
        renderer(coordinator.snapshot)

        logger.info("session_starting", environment=settings.environment)
        try:
            await run_session(coordinator, lines if lines is not None else _stdin_lines())
        finally:
            await coordinator.aclose()
        logger.info("session_finished")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
