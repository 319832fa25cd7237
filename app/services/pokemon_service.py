import logging
import re
from app.cache import SpeciesCache
from app.clients.pokeapi_client import PokeAPIClient
from app.clients.translation_client import TranslationClient
from app.exceptions import (
    InvalidPokemonName,
    PokemonNotFound,
    PokemonNotFoundError,
    ProviderError,
    RateLimitedError,
    UpstreamUnavailable,
)
from app.models import PokemonResponse, PokemonSpeciesData, TranslatedPokemonResponse
from app.services.translation_rules import select_translation_style

logger = logging.getLogger(__name__)

# PokeAPI species names: lowercase letters, digits and hyphens (e.g. "ho-oh", "porygon2")
POKEMON_NAME_PATTERN = re.compile(r"[a-z0-9-]+")

def normalize_name(name: str) -> str:
    normalized_name = name.strip().lower()
    if not normalized_name:
        raise InvalidPokemonName()
    return normalized_name

class PokemonService:
    # Service requires both clients and the shared species cache via Dependency Injection
    def __init__(self, poke_client: PokeAPIClient, translation_client: TranslationClient, cache: SpeciesCache):
        self._poke_client = poke_client
        self._translation_client = translation_client
        self._cache = cache

    async def _resolve_species(self, name: str) -> PokemonSpeciesData:
        """Normalizes the name and returns the cached record, fetching it on a miss."""
        normalized_name = normalize_name(name)

        if not POKEMON_NAME_PATTERN.fullmatch(normalized_name):
            # Cannot be a species name, so PokeAPI is not asked and nothing is cached
            logger.info(f"Rejected malformed Pokemon name: {normalized_name!r}")
            raise PokemonNotFound()

        cached = self._cache.get(normalized_name)
        if cached is not None:
            logger.info(f"Cache hit for Pokemon: {normalized_name}")
            return cached

        logger.info(f"Cache miss for Pokemon: {normalized_name}")
        try:
            species_data = await self._poke_client.get_pokemon_species(normalized_name)
        except PokemonNotFoundError:
            # Unknown names are not cached, the next request asks PokeAPI again
            logger.info(f"Pokemon not found: {normalized_name}")
            raise PokemonNotFound()
        except ProviderError as e:
            logger.error(f"Species lookup failed for {normalized_name}: {e.detail}")
            raise UpstreamUnavailable()

        self._cache.put(normalized_name, species_data)
        return species_data

    async def get_basic_info(self, name: str) -> PokemonResponse:
        """
        Endpoint 1: Fetches basic Pokemon data and maps to the response model.
        """
        species_data = await self._resolve_species(name)
        return PokemonResponse.from_species(species_data)

    async def get_translated_info(self, name: str) -> TranslatedPokemonResponse:
        """
        Endpoint 2: Fetches data and applies the translation rule.
        Rule: Legendary OR Habitat is 'cave' -> Yoda. Otherwise -> Shakespeare.

        Translation is best effort: if the translation API fails or rate limits us,
        the original description is returned instead of an error.
        """
        # 1. The species record must be resolved before any translation is attempted
        species_data = await self._resolve_species(name)

        # 2. Determine translation style
        translation_style = select_translation_style(species_data.habitat, species_data.is_legendary)

        if not species_data.description:
            return TranslatedPokemonResponse.from_species(species_data)

        # 3. Get the translation, falling back to the original text
        try:
            translated_description = await self._translation_client.translate(
                species_data.description,
                translation_style,
            )
        except RateLimitedError:
            logger.warning(f"Translation rate limited, returning original description for: {species_data.name}")
            return TranslatedPokemonResponse.from_species(species_data)
        except ProviderError as e:
            logger.warning(f"Translation failed ({e.detail}), returning original description for: {species_data.name}")
            return TranslatedPokemonResponse.from_species(species_data)

        # 4. Map to the final response model
        return TranslatedPokemonResponse.from_species(species_data, description=translated_description)
