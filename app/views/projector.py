"""Pure mapping from coordinator snapshots to display views."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Literal, Union

from app.config import DEFAULT_PLACEHOLDER_IMAGE
from app.domain.models import Error, Idle, Loading, SearchSnapshot, Success

DisplayMode = Literal["welcome", "loading", "error", "result", "blank"]


@dataclass(frozen=True, slots=True)
class ImageSlot:
    src: str
    alt: str
    placeholder: str
    fallback_applied: bool = False

    def on_error(self) -> ImageSlot:
        """Swap in the placeholder the first time the image fails to load."""

        if self.fallback_applied:
            return self
        return replace(self, src=self.placeholder, fallback_applied=True)


@dataclass(frozen=True, slots=True)
class WelcomeView:
    mode: ClassVar[DisplayMode] = "welcome"


@dataclass(frozen=True, slots=True)
class LoadingView:
    mode: ClassVar[DisplayMode] = "loading"
    query: str


@dataclass(frozen=True, slots=True)
class ErrorView:
    mode: ClassVar[DisplayMode] = "error"
    message: str


@dataclass(frozen=True, slots=True)
class ResultView:
    mode: ClassVar[DisplayMode] = "result"
    name: str
    image: ImageSlot
    id: int
    height: float
    weight: float
    types: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BlankView:
    mode: ClassVar[DisplayMode] = "blank"


View = Union[WelcomeView, LoadingView, ErrorView, ResultView, BlankView]


def build_image_slot(url: str | None, alt: str, placeholder: str = DEFAULT_PLACEHOLDER_IMAGE) -> ImageSlot:
    if not url:
        return ImageSlot(src=placeholder, alt=alt, placeholder=placeholder, fallback_applied=True)
    return ImageSlot(src=url, alt=alt, placeholder=placeholder)


def project(snapshot: SearchSnapshot, *, placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE) -> View:
    state = snapshot.state
    if isinstance(state, Loading):
        return LoadingView(query=state.query)
    if isinstance(state, Error):
        return ErrorView(message=state.message)
    if isinstance(state, Success):
        record = state.record
        return ResultView(
            name=record.display_name,
            image=build_image_slot(record.image_url, record.display_name, placeholder_image),
            id=record.id,
            height=record.height,
            weight=record.weight,
            types=record.types,
        )
    if isinstance(state, Idle) and not snapshot.term and not snapshot.has_searched:
        return WelcomeView()
    return BlankView()


__all__ = [
    "DisplayMode",
    "ImageSlot",
    "WelcomeView",
    "LoadingView",
    "ErrorView",
    "ResultView",
    "BlankView",
    "View",
    "build_image_slot",
    "project",
]
