"""HTTP client for the remote Pokémon lookup service."""

from __future__ import annotations

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.config import LookupApiSettings
from app.domain.models import PokemonPayload, PokemonRecord
from app.logging import logger
from app.services.exceptions import (
    LookupServiceError,
    LookupTransportError,
    PayloadDecodeError,
    PokemonNotFound,
    UpstreamServerError,
)


def normalize_term(term: str) -> str:
    """Trim and lower-case a raw search term; empty means "no query"."""

    return (term or "").strip().lower()


class PokemonLookupService:
    """Resolves a single name against ``GET {base_url}/pokemon/{name}``.

    Every failure is raised as a :class:`LookupServiceError` subclass so callers
    only have one family of exceptions to classify. No retries are attempted.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: LookupApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or LookupApiSettings()

    async def fetch(self, name: str) -> PokemonRecord:
        query = normalize_term(name)
        if not query:
            raise LookupServiceError("Lookup name must not be empty.")

        url = self._record_url(query)
        try:
            response = await self._client.get(
                url,
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise LookupTransportError(f"Failed to contact lookup service: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise PokemonNotFound(f"No record for {query!r}.")
        if not response.is_success:
            raise UpstreamServerError(response.status_code, response.text[:500])

        try:
            payload = PokemonPayload.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.debug("lookup_payload_invalid", query=query, error=str(exc))
            raise PayloadDecodeError("Lookup service returned an unreadable body.") from exc
        return payload.to_record()

    def _base(self) -> str:
        return str(self._settings.base_url).rstrip("/")

    def _record_url(self, query: str) -> str:
        return f"{self._base()}/pokemon/{quote(query, safe='')}"


__all__ = ["PokemonLookupService", "normalize_term"]
