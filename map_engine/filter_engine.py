# backend/map_engine/filter_engine.py
import logging
from dataclasses import dataclass
from typing import Dict, Any, Iterable, List, Optional

from geography.categories import Category, CategoryKey, FEATURE_CATEGORY_ORDER, to_categories
from geography.dataset import Feature, GeoDataset, Province

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateItem:
    """One (category, feature) pair selected for rendering."""
    category: Category
    feature: Feature

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category.value, **self.feature.to_dict()}


def _province_scope(dataset: GeoDataset, selected_province: Optional[str]) -> List[Province]:
    if not selected_province:
        return list(dataset.provinces)
    province = dataset.province(selected_province)
    if province is None:
        logger.debug(f"Province '{selected_province}' not in dataset, scope is empty")
        return []
    return [province]


def matches_query(feature: Feature, query: str) -> bool:
    """Case-insensitive substring match on name or province. Descriptions are not indexed."""
    needle = query.lower()
    return needle in (feature.name or "").lower() or needle in (feature.province or "").lower()


def compute_candidates(
    dataset: GeoDataset,
    active_categories: Iterable[CategoryKey],
    selected_province: Optional[str] = None,
    search_query: str = "",
) -> List[CandidateItem]:
    """
    Build the ordered candidate list for the current filter inputs.

    Provinces are walked in dataset order and, within each province, categories in
    FEATURE_CATEGORY_ORDER, so mountains come first and the capital last. Highways
    are not province features and are handled by the overlay composer.
    The search query filters afterwards without reordering.
    """
    active = to_categories(active_categories)
    candidates: List[CandidateItem] = []

    for province in _province_scope(dataset, selected_province):
        for category in FEATURE_CATEGORY_ORDER:
            if category not in active:
                continue
            for feature in province.features_for(category):
                candidates.append(CandidateItem(category, feature))

    if search_query:
        candidates = [c for c in candidates if matches_query(c.feature, search_query)]

    return candidates
