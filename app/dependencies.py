from app.cache import SpeciesCache
from app.clients import PokeAPIClient
from app.clients import TranslationClient
from app.services import PokemonService
from fastapi import Depends

_poke_client = None
_translation_client = None
_species_cache = None

def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client

def get_translation_client() -> TranslationClient:
    global _translation_client
    if _translation_client is None:
        _translation_client = TranslationClient()
    return _translation_client

def get_species_cache() -> SpeciesCache:
    # One cache for the whole process lifetime
    global _species_cache
    if _species_cache is None:
        _species_cache = SpeciesCache()
    return _species_cache

def get_pokemon_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    translation_client: TranslationClient = Depends(get_translation_client),
    cache: SpeciesCache = Depends(get_species_cache),
) -> PokemonService:
    return PokemonService(poke_client=poke_client, translation_client=translation_client, cache=cache)

async def close_clients():
    """Closes whichever HTTP clients were created (call on app shutdown)."""
    global _poke_client, _translation_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None
    if _translation_client is not None:
        await _translation_client.close()
        _translation_client = None
