"""Interactive Pokémon lookup with debounced, staleness-safe requests."""
