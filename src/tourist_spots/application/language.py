"""Language selection service."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from tourist_spots.domain.models import Language

if TYPE_CHECKING:
    from tourist_spots.domain.ports import SettingsStore

logger = logging.getLogger(__name__)

LANGUAGE_SETTING_KEY = "app_language"

LanguageListener = Callable[[Language], None]


class LanguageService:
    """Tracks the selected UI language and persists it in the settings store.

    Switching language only notifies listeners; it never resets other session
    state such as favorites.
    """

    def __init__(self, settings: "SettingsStore", default_language: Language) -> None:
        """Initialize from the stored language, falling back to the default."""
        self._settings = settings
        self._listeners: list[LanguageListener] = []
        self._selected = default_language

        saved = settings.get(LANGUAGE_SETTING_KEY)
        if saved:
            try:
                self._selected = Language.from_code(saved)
            except ValueError:
                logger.warning(
                    f"Ignoring unsupported saved language '{saved}', using {default_language.code}"
                )

    @property
    def selected_language(self) -> Language:
        return self._selected

    def set_language(self, language: Language | str) -> Language:
        """Select and persist a language.

        Args:
            language: A Language or its code.

        Returns:
            The selected language.

        Raises:
            ValueError: If a code is given that is not supported.
        """
        if isinstance(language, str):
            language = Language.from_code(language)

        self._selected = language
        self._settings.set(LANGUAGE_SETTING_KEY, language.code)
        logger.info(f"Language set to {language.code}")

        for listener in list(self._listeners):
            try:
                listener(language)
            except Exception as e:
                logger.warning(f"Language listener failed: {e}", exc_info=True)
        return language

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Register a listener called with the new language after each change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
