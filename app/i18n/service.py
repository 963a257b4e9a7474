"""File-based message catalogue with in-memory caching."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

BASE_LOCALE = "es"


class I18nService:
    """Looks up user-facing strings in ``locales/<locale>.json``.

    Missing keys fall back to the default locale, then to the bundled Spanish
    catalogue, then to the key itself.
    """

    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = BASE_LOCALE) -> None:
        self.locales_path = Path(locales_path or Path(__file__).with_name("locales"))
        self.default_locale = default_locale.lower()

    def gettext(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        text = None
        for candidate in self._chain(locale):
            text = self._lookup(candidate, key)
            if text is not None:
                break
        if text is None:
            text = key
        return text.format(**kwargs) if kwargs else text

    def has_locale(self, locale: str) -> bool:
        return bool(self._load_locale(locale.lower()))

    def _chain(self, locale: str | None) -> list[str]:
        chain: list[str] = []
        for candidate in ((locale or "").lower(), self.default_locale, BASE_LOCALE):
            if candidate and candidate not in chain:
                chain.append(candidate)
        return chain

    @lru_cache(maxsize=16)
    def _load_locale(self, locale: str) -> dict[str, str]:
        file_path = self.locales_path / f"{locale}.json"
        if not file_path.exists():
            return {}
        with file_path.open("r", encoding="utf-8") as fp:
            return json.load(fp)

    def _lookup(self, locale: str, key: str) -> str | None:
        table = self._load_locale(locale)
        return table.get(key)


__all__ = ["I18nService", "BASE_LOCALE"]
