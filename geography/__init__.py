"""
Static geography layer: the closed category set, localized text and the read-only dataset.
"""

from .categories import (
    Category,
    CategoryDescriptor,
    DEFAULT_ACTIVE_CATEGORIES,
    FEATURE_CATEGORY_ORDER,
    describe,
    legend,
    to_category,
    to_categories,
)
from .dataset import Feature, GeoDataset, Highway, Province
from .nepal_data import INTRO_TIPS, load_nepal_dataset
from .strings import DEFAULT_LOCALE, feature_description, resolve_locale, text

__all__ = [
    "Category",
    "CategoryDescriptor",
    "DEFAULT_ACTIVE_CATEGORIES",
    "FEATURE_CATEGORY_ORDER",
    "describe",
    "legend",
    "to_category",
    "to_categories",
    "Feature",
    "GeoDataset",
    "Highway",
    "Province",
    "INTRO_TIPS",
    "load_nepal_dataset",
    "DEFAULT_LOCALE",
    "feature_description",
    "resolve_locale",
    "text",
]
