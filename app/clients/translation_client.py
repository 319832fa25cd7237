import httpx
import logging
from app.config import get_settings
from app.exceptions import ProviderError, RateLimitedError
from app.models import TranslationStyle

logger = logging.getLogger(__name__)

class TranslationClient:
    def __init__(self, base_url: str = None, timeout: float = None):
        settings = get_settings()
        self.client = httpx.AsyncClient(
            base_url=settings.translation_base_url if base_url is None else base_url,
            timeout=settings.http_timeout if timeout is None else timeout,
        )

    async def translate(self, text: str, translation_style: TranslationStyle) -> str:
        """Translates text in the given style. Results are not cached."""
        style = TranslationStyle(translation_style)
        url = f"/{style.value}"

        try:
            response = await self.client.post(url=url, json={"text": text})
            response.raise_for_status()

            data = response.json()
            translated_text = data["contents"]["translated"]

        except httpx.HTTPStatusError as e:
            if e.response.status_code == 429:
                logger.warning(f"Translation API rate limit exceeded for style: {style.value}")
                raise RateLimitedError()
            detail = f"Translation API failed with status {e.response.status_code}."
            logger.error(f"Translation API error: {detail}")
            raise ProviderError(detail, status_code=e.response.status_code)

        except httpx.RequestError as e:
            logger.error(f"Translation API network error: {e!r}")
            raise ProviderError(f"Translation API network error: {e!r}")

        except (ValueError, KeyError, TypeError):
            logger.error("Translation API response parsing error.")
            raise ProviderError("Translation API returned an unexpected response format.")

        if not isinstance(translated_text, str):
            logger.error("Translation API response parsing error.")
            raise ProviderError("Translation API returned an unexpected response format.")

        # FunTranslations leaves double spaces where it moves words around
        return translated_text.replace("  ", " ")

    async def close(self):
        """Close the HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
