"""Shared pytest fixtures for lookup, coordinator and view tests."""

from __future__ import annotations

import copy

import pytest
import structlog

PIKACHU_PAYLOAD = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "sprites": {"front_default": "https://img.example/pikachu.png"},
    "types": [{"slot": 1, "type": {"name": "electric", "url": "https://pokeapi.co/api/v2/type/13/"}}],
    "base_experience": 112,
}


@pytest.fixture
def pikachu_payload() -> dict:
    return copy.deepcopy(PIKACHU_PAYLOAD)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
