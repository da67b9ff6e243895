import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.clients import DatabaseClient
from app.config import ConfigurationError, Settings, load_settings
from app.dependencies import get_pokemon_service
from app.models import ErrorResponse, Pokemon
from app.services import PokemonRetrievalError, PokemonService
from app.validation import is_valid_language_code, parse_id

logger = logging.getLogger(__name__)

router = APIRouter()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


# Endpoint: localized Pokemon record
@router.get(
    "/record/{lang}/{id}",
    response_model=Pokemon,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Returns a Pokemon record localized to the requested language",
)
async def get_pokemon_by_id(
    lang: str,
    id: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Validates the path parameters, then fetches the record from the database."""
    if not id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ID is required.")

    try:
        pokemon_id = parse_id(id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ID.")

    if pokemon_id <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Valid ID is required.")

    if not lang:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Language code is required.")

    if not is_valid_language_code(lang):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Valid Language code is required.")

    # The service has already logged the cause; the client only gets a generic message.
    try:
        return await service.get_pokemon_by_id(pokemon_id, lang.lower())
    except PokemonRetrievalError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to get data.")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Renders every HTTP error as {"error": "<message>"}."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the application. The connection pool is opened by the lifespan,
    so nothing touches the database until the server starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_settings = settings if settings is not None else load_settings()
        app.state.db_client = await DatabaseClient.connect(app_settings)
        try:
            yield
        finally:
            await app.state.db_client.close()

    app = FastAPI(
        title="Pokedex Record API",
        description="Localized Pokemon records served from a PostgreSQL stored function.",
        lifespan=lifespan,
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    """Process entry point: any startup failure ends the process with a non-zero code."""
    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.critical(str(e))
        sys.exit(1)

    configure_logging(settings.log_level)
    logger.info(f"Starting Pokedex Record API on {settings.app_host}:{settings.app_port}")
    # uvicorn exits non-zero itself when the lifespan fails or the port cannot be bound
    uvicorn.run(create_app(settings), host=settings.app_host, port=settings.app_port, log_config=None)


if __name__ == "__main__":
    main()
