# backend/map_engine/view_projector.py
from dataclasses import dataclass
from typing import Dict, List, Sequence

from geography.categories import Category, describe
from geography.strings import feature_description, text

from .filter_engine import CandidateItem


@dataclass(frozen=True)
class ListEntry:
    """List-view card: the same display fields as a marker popup, without geometry."""
    category: Category
    category_label: str
    name: str
    description: str
    province: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "category": self.category.value,
            "category_label": self.category_label,
            "name": self.name,
            "description": self.description,
            "province": self.province,
        }


def project_list_items(candidates: Sequence[CandidateItem], locale: str = None) -> List[ListEntry]:
    entries = []
    for item in candidates:
        descriptor = describe(item.category, locale)
        entries.append(ListEntry(
            category=item.category,
            category_label=descriptor.label,
            name=item.feature.name,
            description=feature_description(item.feature, locale),
            province=item.feature.province,
        ))
    return entries


def list_summary(entries: Sequence[ListEntry], locale: str = None) -> str:
    return text("list_summary", locale, count=len(entries))
