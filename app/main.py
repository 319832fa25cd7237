import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse
from app.config import get_settings
from app.services.pokemon_service import PokemonService
from app.dependencies import close_clients, get_pokemon_service
from app.exceptions import PokedexError
from app.models import ErrorResponse, PokemonResponse, TranslatedPokemonResponse

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_clients()

app = FastAPI(
    title="Pokedex API",
    description="Pokemon information with fun translations of their descriptions.",
    lifespan=lifespan,
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Empty Pokemon name"},
    404: {"model": ErrorResponse, "description": "Unknown Pokemon"},
    503: {"model": ErrorResponse, "description": "PokeAPI unavailable"},
}

@app.exception_handler(PokedexError)
async def pokedex_error_handler(request: Request, exc: PokedexError):
    # Public errors carry a short message only, upstream details stay in the logs
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

# Endpoint 1: Basic Pokemon Info
@app.get(
    "/pokemon/{name}",
    response_model=PokemonResponse,
    responses=ERROR_RESPONSES,
    summary="Returns basic Pokemon information",
)
async def get_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Fetches basic information (name, description, habitat, legendary status) for a given Pokemon name."""
    return await service.get_basic_info(name)


# Endpoint 2: Translated Pokemon Info
@app.get(
    "/translated/{name}",
    response_model=TranslatedPokemonResponse,
    responses=ERROR_RESPONSES,
    summary="Returns Pokemon information with fun translation based on legendary/habitat status",
)
async def get_translated_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """
    Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).
    If the translation API fails, the untranslated description is returned.
    """
    return await service.get_translated_info(name)
