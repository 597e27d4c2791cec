"""Category domain model."""

from enum import Enum


class Category(Enum):
    """Closed classification of a tourist spot.

    The value of each member is the localization key used to label it.
    """

    NATURE = "category_nature"
    LANDMARK_BUILDING = "category_landmark_building"
    HISTORY = "category_history"
    RELIGION = "category_religion"

    @property
    def localization_key(self) -> str:
        """Key looked up in the string tables to display this category."""
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Category":
        """Parse a category from its short name (e.g. "nature") or localization key.

        Raises:
            ValueError: If the name does not denote a known category.
        """
        normalized = name.strip().lower().replace("-", "_").replace("/", "_")
        normalized = _ALIASES.get(normalized, normalized)
        for category in cls:
            if normalized in (category.name.lower(), category.value):
                return category
        valid = ", ".join(c.name.lower() for c in cls)
        raise ValueError(f"Unknown category '{name}'. Expected one of: {valid}")


_ALIASES = {
    "landmark": "landmark_building",
    "building": "landmark_building",
}
