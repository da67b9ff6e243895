from app.clients import DatabaseClient
from app.services import PokemonService
from fastapi import Depends, Request

def get_db_client(request: Request) -> DatabaseClient:
    # Opened by the application lifespan, shared by every request
    return request.app.state.db_client

def get_pokemon_service(
    db_client: DatabaseClient = Depends(get_db_client),
) -> PokemonService:
    return PokemonService(db_client=db_client)
