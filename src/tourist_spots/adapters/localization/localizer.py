"""String lookup for the selected language."""

import logging

from tourist_spots.adapters.localization.strings import STRING_TABLES
from tourist_spots.domain.models import Category, Language

logger = logging.getLogger(__name__)


class Localizer:
    """Looks up display strings by key.

    Missing keys render as the key itself, like an untranslated resource.
    """

    def __init__(self, tables: dict[Language, dict[str, str]] | None = None) -> None:
        self._tables = tables if tables is not None else STRING_TABLES

    def translate(self, key: str, language: Language) -> str:
        """Get the string for a key in the given language."""
        value = self._tables.get(language, {}).get(key)
        if value is None:
            logger.debug(f"Missing {language.code} string for key '{key}'")
            return key
        return value

    def category_label(self, category: Category | None, language: Language) -> str:
        """Get the label of a category, or of "all" when category is None."""
        key = category.localization_key if category is not None else "category_all"
        return self.translate(key, language)

    def favorite_action_label(self, is_favorite: bool, language: Language) -> str:
        """Label of the detail screen's favorite button for the current state."""
        return self.translate("remove_favorite" if is_favorite else "add_favorite", language)
