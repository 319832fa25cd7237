from fastapi import HTTPException, status

# --- Provider-level errors (internal, never shown to API consumers) ---

class ProviderError(Exception):
    """An external API could not be reached or answered with an unusable response."""

    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code  # upstream status, None for network/parsing failures

class RateLimitedError(ProviderError):
    """The translation API refused the call because its rate limit was hit (HTTP 429)."""

    def __init__(self, detail: str = "Rate limit exceeded."):
        super().__init__(detail, status_code=status.HTTP_429_TOO_MANY_REQUESTS)

class PokemonNotFoundError(Exception):
    """PokeAPI has no species with the requested name (HTTP 404)."""

    def __init__(self, name: str):
        super().__init__(f"PokeAPI has no species named '{name}'")
        self.name = name

# --- Public errors (rendered as {"error": detail} by app.main) ---

class PokedexError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal error"

    def __init__(self):
        super().__init__(status_code=self.status_code, detail=self.message)

class InvalidPokemonName(PokedexError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Pokemon name must not be empty"

class PokemonNotFound(PokedexError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Pokemon not found"

class UpstreamUnavailable(PokedexError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Pokemon data provider is unavailable, try again later"
