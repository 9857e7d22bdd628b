"""
Read-only access to the provinces, their feature collections and the highway network.
Records are taken as given: coordinates are not range-checked here.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .categories import Category, FEATURE_CATEGORY_ORDER, OPTIONAL_CATEGORIES


@dataclass(frozen=True)
class Feature:
    name: str
    province: str
    lat: float
    lng: float
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Feature":
        return cls(
            name=data.get("name"),
            province=data.get("province"),
            lat=data.get("lat"),
            lng=data.get("lng"),
            description=data.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {"name": self.name, "province": self.province, "lat": self.lat, "lng": self.lng}
        if self.description:
            payload["description"] = self.description
        return payload


@dataclass(frozen=True)
class Highway:
    name: str
    description: str
    path: Tuple[Tuple[float, float], ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Highway":
        return cls(
            name=data.get("name"),
            description=data.get("description", ""),
            path=tuple(tuple(point) for point in data.get("path", ())),
        )


@dataclass(frozen=True)
class Province:
    name: str
    capital: Feature
    mountains: Tuple[Feature, ...] = ()
    rivers: Tuple[Feature, ...] = ()
    lakes: Tuple[Feature, ...] = ()
    production: Tuple[Feature, ...] = ()
    # None means the province publishes no such collection
    protectedAreas: Optional[Tuple[Feature, ...]] = None
    religiousSites: Optional[Tuple[Feature, ...]] = None
    tradeCenters: Optional[Tuple[Feature, ...]] = None
    nationalPrideProjects: Optional[Tuple[Feature, ...]] = None

    def features_for(self, category: Category) -> Tuple[Feature, ...]:
        """Features of one category, in collection order. Absent collections read as empty."""
        if category is Category.CAPITALS:
            return (self.capital,)
        if category is Category.HIGHWAYS:
            return ()
        return getattr(self, category.value) or ()

    def feature_count(self) -> int:
        return sum(len(self.features_for(c)) for c in FEATURE_CATEGORY_ORDER)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Province":
        collections = {}
        for category in FEATURE_CATEGORY_ORDER:
            if category is Category.CAPITALS:
                continue
            raw = data.get(category.value)
            if raw is None:
                collections[category.value] = None if category in OPTIONAL_CATEGORIES else ()
            else:
                collections[category.value] = tuple(Feature.from_dict(item) for item in raw)
        return cls(name=data["name"], capital=Feature.from_dict(data["capital"]), **collections)


class GeoDataset:
    """Provinces in their natural order plus the province-independent highways."""

    def __init__(self, provinces: Iterable[Province], highways: Iterable[Highway] = ()):
        self.provinces: Tuple[Province, ...] = tuple(provinces)
        self.highways: Tuple[Highway, ...] = tuple(highways)
        self._by_name = {p.name: p for p in self.provinces}

    def province(self, name: str) -> Optional[Province]:
        return self._by_name.get(name)

    def province_names(self) -> List[str]:
        return [p.name for p in self.provinces]

    def total_features(self) -> int:
        return sum(p.feature_count() for p in self.provinces)

    @classmethod
    def from_dict(cls, provinces: Dict[str, Dict[str, Any]], highways: Iterable[Dict[str, Any]] = ()) -> "GeoDataset":
        """
        Build from the front-end data shape: a name-keyed mapping of province records
        (camelCase collection keys) and a list of highway records.
        Mapping order is kept as the province order.
        """
        return cls(
            [Province.from_dict(record) for record in provinces.values()],
            [Highway.from_dict(record) for record in highways],
        )

    def __repr__(self):
        return f"GeoDataset(provinces={len(self.provinces)}, highways={len(self.highways)})"
