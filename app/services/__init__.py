"""Business logic services."""
from .pokemon_service import PokemonRetrievalError, PokemonService

__all__ = [
    'PokemonService',
    'PokemonRetrievalError',
]
