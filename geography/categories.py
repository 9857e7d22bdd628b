# backend/geography/categories.py
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple, Union

from .strings import CATEGORY_LABELS, resolve_locale


class Category(str, Enum):
    """The ten map layers. Member order is the legend order."""
    MOUNTAINS = "mountains"
    RIVERS = "rivers"
    LAKES = "lakes"
    PRODUCTION = "production"
    PROTECTED_AREAS = "protectedAreas"
    RELIGIOUS_SITES = "religiousSites"
    TRADE_CENTERS = "tradeCenters"
    NATIONAL_PRIDE_PROJECTS = "nationalPrideProjects"
    HIGHWAYS = "highways"
    CAPITALS = "capitals"


CategoryKey = Union[Category, str]

# Order in which a province's collections are walked when building candidates.
# Highways are not province features and never appear here; capitals come last.
FEATURE_CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.MOUNTAINS,
    Category.RIVERS,
    Category.LAKES,
    Category.PRODUCTION,
    Category.PROTECTED_AREAS,
    Category.RELIGIOUS_SITES,
    Category.TRADE_CENTERS,
    Category.NATIONAL_PRIDE_PROJECTS,
    Category.CAPITALS,
)

OPTIONAL_CATEGORIES: FrozenSet[Category] = frozenset({
    Category.PROTECTED_AREAS,
    Category.RELIGIOUS_SITES,
    Category.TRADE_CENTERS,
    Category.NATIONAL_PRIDE_PROJECTS,
})

DEFAULT_ACTIVE_CATEGORIES: FrozenSet[Category] = frozenset({
    Category.MOUNTAINS,
    Category.CAPITALS,
    Category.PROTECTED_AREAS,
    Category.HIGHWAYS,
})


@dataclass(frozen=True)
class CategoryDescriptor:
    key: Category
    label: str
    color: str
    icon: str
    glyph: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "key": self.key.value,
            "label": self.label,
            "color": self.color,
            "icon": self.icon,
            "glyph": self.glyph,
        }


# color, lucide icon name, 24x24 SVG path
_VISUALS: Dict[Category, Tuple[str, str, str]] = {
    Category.MOUNTAINS: ("#6d4c41", "mountain", "m8 3 4 8 5-5 5 15H2L8 3z"),
    Category.RIVERS: (
        "#1976d2",
        "waves",
        "M2 6c.6.5 1.2 1 2.5 1C7 7 7 5 9.5 5c2.6 0 2.4 2 5 2 2.5 0 2.5-2 5-2 1.3 0 1.9.5 2.5 1"
        "M2 12c.6.5 1.2 1 2.5 1 2.5 0 2.5-2 5-2 2.6 0 2.4 2 5 2 2.5 0 2.5-2 5-2 1.3 0 1.9.5 2.5 1"
        "M2 18c.6.5 1.2 1 2.5 1 2.5 0 2.5-2 5-2 2.6 0 2.4 2 5 2 2.5 0 2.5-2 5-2 1.3 0 1.9.5 2.5 1",
    ),
    Category.LAKES: (
        "#00acc1",
        "droplets",
        "M12 22a7 7 0 0 0 7-7c0-2-1-3.9-3-5.5s-3.5-4-4-6.5c-.5 2.5-2 4.9-4 6.5C6 11.1 5 13 5 15a7 7 0 0 0 7 7z",
    ),
    Category.PRODUCTION: (
        "#2e7d32",
        "sprout",
        "M7 20h10M10 20V8a2 2 0 0 1 2-2h0a2 2 0 0 1 2 2v12M12 14v6M12 10V6M12 6V3",
    ),
    Category.PROTECTED_AREAS: (
        "#1b5e20",
        "tree-pine",
        "M12 22s8-4 8-10V5l-8-3-8 3v7c0 6 8 10 8 10z",
    ),
    Category.RELIGIOUS_SITES: (
        "#f57c00",
        "church",
        "M12 22v-9m0 0l-5-5m5 5l5-5M7 8l5-5 5 5",
    ),
    Category.TRADE_CENTERS: (
        "#455a64",
        "store",
        "M3 9l9-7 9 7v11a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z",
    ),
    Category.NATIONAL_PRIDE_PROJECTS: (
        "#fbc02d",
        "star",
        "M12 2l3.09 6.26L22 9.27l-5 4.87 1.18 6.88L12 17.77l-6.18 3.25L7 14.14 2 9.27l6.91-1.01L12 2z",
    ),
    # Highways are drawn as polylines; the glyph is only used by the legend.
    Category.HIGHWAYS: (
        "#212121",
        "route",
        "M6 19a3 3 0 1 0 0-6 3 3 0 0 0 0 6zM18 11a3 3 0 1 0 0-6 3 3 0 0 0 0 6zM9 16h5.5a3.5 3.5 0 0 0 0-7H9.5a3.5 3.5 0 0 1 0-7H15",
    ),
    Category.CAPITALS: (
        "#c62828",
        "building-2",
        "M6 22V4a2 2 0 0 1 2-2h8a2 2 0 0 1 2 2v18M6 12H4a2 2 0 0 0-2 2v6a2 2 0 0 0 2 2h2"
        "M18 9h2a2 2 0 0 1 2 2v9a2 2 0 0 1-2 2h-2M10 6h4M10 10h4M10 14h4M10 18h4",
    ),
}


def to_category(key: CategoryKey) -> Category:
    """Coerce a string key to its Category. Raises ValueError outside the closed set."""
    if isinstance(key, Category):
        return key
    return Category(key)


def to_categories(keys) -> FrozenSet[Category]:
    return frozenset(to_category(k) for k in keys)


def describe(key: CategoryKey, locale: str = None) -> CategoryDescriptor:
    category = to_category(key)
    color, icon, glyph = _VISUALS[category]
    label = CATEGORY_LABELS[resolve_locale(locale)][category.value]
    return CategoryDescriptor(key=category, label=label, color=color, icon=icon, glyph=glyph)


def legend(locale: str = None) -> List[CategoryDescriptor]:
    return [describe(category, locale) for category in Category]
