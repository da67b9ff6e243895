import logging

from pydantic import ValidationError

from app.clients.database_client import DatabaseClient
from app.models import Pokemon

logger = logging.getLogger(__name__)

# Stored function returning one JSON document per (id, lang), or no row.
GET_POKEMON_QUERY = "SELECT pokedex.getpokemon($1, $2);"


class PokemonRetrievalError(Exception):
    """Raised when a Pokemon record could not be fetched or decoded."""


class PokemonService:
    # Service requires the database client via Dependency Injection
    def __init__(self, db_client: DatabaseClient):
        self._db_client = db_client

    async def get_pokemon_by_id(self, id: int, lang: str) -> Pokemon:
        """
        Fetches the Pokemon with the given ID, localized to `lang`.

        Failures are logged here, once, and re-raised as PokemonRetrievalError
        with the original exception as its cause. A missing record decodes as
        an empty payload and therefore fails the same way as a malformed one.
        """
        try:
            payload = await self._db_client.query(GET_POKEMON_QUERY, id, lang)
        except Exception as e:
            logger.error(f"Query for Pokemon id={id} lang={lang} failed: {e!r}")
            raise PokemonRetrievalError("Failed to query Pokemon data") from e

        try:
            return Pokemon.model_validate_json(payload or b"")
        except ValidationError as e:
            logger.error(f"Could not decode Pokemon id={id} lang={lang}: {e}")
            raise PokemonRetrievalError("Failed to decode Pokemon data") from e
