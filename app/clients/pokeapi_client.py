import httpx
import logging
from urllib.parse import quote
from app.config import get_settings
from app.exceptions import PokemonNotFoundError, ProviderError
from app.models import PokemonSpeciesData

logger = logging.getLogger(__name__)

ENGLISH = "en"

def _clean_flavor_text(text: str) -> str:
    # PokeAPI flavor text is hard-wrapped with newlines and form feeds
    return text.replace('\n', ' ').replace('\f', ' ')

def _extract_english_description(entries) -> str:
    """Returns the first English flavor text in response order, or "" if there is none."""
    if not isinstance(entries, list):
        return ""
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        language = entry.get('language') or {}
        text = entry.get('flavor_text')
        if isinstance(language, dict) and language.get('name') == ENGLISH and isinstance(text, str):
            return _clean_flavor_text(text)
    return ""

def _extract_habitat(data: dict) -> str | None:
    habitat = data.get('habitat')
    if isinstance(habitat, dict) and isinstance(habitat.get('name'), str):
        return habitat['name']
    return None

def _extract_is_legendary(data: dict) -> bool:
    # Only a real JSON boolean counts, anything else degrades to False
    is_legendary = data.get('is_legendary')
    return is_legendary if isinstance(is_legendary, bool) else False

class PokeAPIClient:
    def __init__(self, base_url: str = None, timeout: float = None):
        settings = get_settings()
        self.client = httpx.AsyncClient(
            base_url=settings.pokeapi_base_url if base_url is None else base_url,
            timeout=settings.http_timeout if timeout is None else timeout,
        )

    async def _fetch_species_data(self, pokemon_name: str) -> dict:
        """Internal method to fetch the raw species payload and map transport/status errors."""
        # The name is a single path segment, never URL syntax
        url = f"/pokemon-species/{quote(pokemon_name, safe='')}"

        try:
            response = await self.client.get(url)
            response.raise_for_status()  # Raises for 4xx/5xx status codes
            data = response.json()

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise PokemonNotFoundError(pokemon_name)
            detail = f"PokeAPI failed with status {e.response.status_code}"
            logger.error(f"{detail} for Pokemon: {pokemon_name}")
            raise ProviderError(detail, status_code=e.response.status_code)

        except httpx.RequestError as e:
            # Network failures and timeouts
            logger.error(f"PokeAPI network error for Pokemon {pokemon_name}: {e!r}")
            raise ProviderError(f"PokeAPI network error: {e!r}")

        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for Pokemon: {pokemon_name}")
            raise ProviderError("PokeAPI returned an unexpected response format.")

        if not isinstance(data, dict):
            logger.error(f"PokeAPI returned a non-object body for Pokemon: {pokemon_name}")
            raise ProviderError("PokeAPI returned an unexpected response format.")
        return data

    async def get_pokemon_species(self, name: str) -> PokemonSpeciesData:
        """
        Fetches a species and maps it to the internal record.

        The caller passes the already normalized (lowercase) name. Missing fields
        in the payload degrade to an empty description, no habitat or non-legendary.
        """
        data = await self._fetch_species_data(name)

        provider_name = data.get('name')
        return PokemonSpeciesData(
            name=provider_name.lower() if isinstance(provider_name, str) and provider_name else name,
            description=_extract_english_description(data.get('flavor_text_entries')),
            habitat=_extract_habitat(data),
            is_legendary=_extract_is_legendary(data),
        )

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
