"""Pydantic models shared across the lookup and presentation layers."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class PokemonRecord(BaseModel):
    """Resolved entity, already converted to display units."""

    model_config = ConfigDict(frozen=True)

    id: int
    display_name: str
    height: float
    weight: float
    image_url: str | None = None
    types: tuple[str, ...] = ()


class _TypeRef(BaseModel):
    name: str


class _TypeSlot(BaseModel):
    type: _TypeRef


class _Sprites(BaseModel):
    front_default: str | None = None


class PokemonPayload(BaseModel):
    """Subset of the lookup service body the application relies on.

    ``height`` is expressed in decimetres and ``weight`` in hectograms, so both
    are divided by ten when building a :class:`PokemonRecord`.
    """

    id: int
    name: str
    height: int
    weight: int
    sprites: _Sprites = Field(default_factory=_Sprites)
    types: list[_TypeSlot]

    def to_record(self) -> PokemonRecord:
        return PokemonRecord(
            id=self.id,
            display_name=self.name,
            height=self.height / 10,
            weight=self.weight / 10,
            image_url=self.sprites.front_default or None,
            types=tuple(slot.type.name for slot in self.types),
        )


ErrorReason = Literal["not_found", "server_error", "connection_error"]


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"
    query: str


class Error(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    reason: ErrorReason
    message: str


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    record: PokemonRecord


ResultState = Annotated[Union[Idle, Loading, Error, Success], Field(discriminator="kind")]


class SearchSnapshot(BaseModel):
    """What the coordinator exposes to the projector after every change."""

    model_config = ConfigDict(frozen=True)

    term: str = ""
    has_searched: bool = False
    state: ResultState = Field(default_factory=Idle)


__all__ = [
    "PokemonRecord",
    "PokemonPayload",
    "ErrorReason",
    "Idle",
    "Loading",
    "Error",
    "Success",
    "ResultState",
    "SearchSnapshot",
]
