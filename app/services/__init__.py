from app.services.coordinator import QueryCoordinator
from app.services.debounce import Debouncer
from app.services.pokeapi import PokemonLookupService, normalize_term

__all__ = [
    "Debouncer",
    "PokemonLookupService",
    "QueryCoordinator",
    "normalize_term",
]
