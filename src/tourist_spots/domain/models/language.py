"""Language domain model."""

from enum import Enum


class Language(Enum):
    """UI languages the application can be switched to."""

    TRADITIONAL_CHINESE = "zh-Hant"
    ENGLISH = "en"
    JAPANESE = "ja"

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Name of the language written in that language."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Look up a language by its code, ignoring case.

        Raises:
            ValueError: If the code is not a supported language.
        """
        for language in cls:
            if language.value.lower() == code.strip().lower():
                return language
        valid = ", ".join(lang.value for lang in cls)
        raise ValueError(f"Unsupported language '{code}'. Expected one of: {valid}")


_DISPLAY_NAMES = {
    Language.TRADITIONAL_CHINESE: "繁體中文",
    Language.ENGLISH: "English",
    Language.JAPANESE: "日本語",
}
