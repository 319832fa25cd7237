from enum import Enum

from pydantic import BaseModel, ConfigDict

# Internal record built from PokeAPI data (Internal Contract).
# Frozen: once cached, a record is only ever replaced whole, never edited.
class PokemonSpeciesData(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    habitat: str | None  # None means PokeAPI reported no habitat
    is_legendary: bool

# Model for the final, basic API response (Public Endpoint 1)
class PokemonResponse(BaseModel):
    name: str
    description: str
    habitat: str | None
    is_legendary: bool

    @classmethod
    def from_species(cls, species_data: PokemonSpeciesData, **overrides):
        fields = species_data.model_dump()
        fields.update(overrides)
        return cls(**fields)

# Model for the final, translated API response (Public Endpoint 2)
# Same structure, the description holds the translated text
class TranslatedPokemonResponse(PokemonResponse):
    pass

class ErrorResponse(BaseModel):
    error: str

class TranslationStyle(str, Enum):
    """Translation flavours, the value is the FunTranslations endpoint name."""
    YODA = "yoda"
    SHAKESPEARE = "shakespeare"
