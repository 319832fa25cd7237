from app.models import TranslationStyle

CAVE_HABITAT = "cave"

def select_translation_style(habitat: str | None, is_legendary: bool) -> TranslationStyle:
    """
    Rule: Legendary OR habitat is exactly 'cave' -> Yoda. Otherwise -> Shakespeare.
    A missing habitat counts as not 'cave'.
    """
    if habitat == CAVE_HABITAT or is_legendary:
        return TranslationStyle.YODA
    return TranslationStyle.SHAKESPEARE
