"""
Map-mode overlay composition.

Turns the candidate list and the highway network into renderer-agnostic descriptors:
one dashed polyline per highway (emitted first so markers stay on top) and one
styled marker per candidate. Nothing here talks to the map itself.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from geography.categories import Category, CategoryKey, describe, to_categories
from geography.dataset import Highway
from geography.strings import feature_description, text

from .filter_engine import CandidateItem

# Leaflet divIcon geometry for category markers
MARKER_ICON_SIZE = (32, 32)
MARKER_ICON_ANCHOR = (16, 32)
MARKER_POPUP_ANCHOR = (0, -32)
MARKER_ICON_CLASS = "custom-marker-icon"


@dataclass(frozen=True)
class PopupContent:
    category_label: str
    name: str
    description: str
    province: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "category_label": self.category_label,
            "name": self.name,
            "description": self.description,
            "province": self.province,
        }


@dataclass(frozen=True)
class MarkerStyle:
    color: str
    glyph: str
    icon: str


@dataclass(frozen=True)
class MarkerDescriptor:
    category: Category
    position: Tuple[float, float]
    style: MarkerStyle
    popup: PopupContent
    tooltip_text: Optional[str] = None

    kind = "marker"

    def icon_html(self) -> str:
        return (
            '<div class="flex items-center justify-center w-8 h-8 rounded-full border-2 border-white shadow-lg" '
            f'style="background-color: {self.style.color}; color: white;">'
            '<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 24 24" fill="none" '
            'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
            f'<path d="{self.style.glyph}"/></svg></div>'
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "category": self.category.value,
            "position": list(self.position),
            "style": {"color": self.style.color, "glyph": self.style.glyph, "icon": self.style.icon},
            "icon": {
                "html": self.icon_html(),
                "className": MARKER_ICON_CLASS,
                "iconSize": list(MARKER_ICON_SIZE),
                "iconAnchor": list(MARKER_ICON_ANCHOR),
                "popupAnchor": list(MARKER_POPUP_ANCHOR),
            },
            "popup": self.popup.to_dict(),
            "tooltip": self.tooltip_text,
        }


@dataclass(frozen=True)
class PolylineStyle:
    color: str = "#ef4444"
    weight: int = 4
    opacity: float = 0.8
    dash_array: Optional[str] = "10, 10"

    @property
    def dashed(self) -> bool:
        return bool(self.dash_array)


HIGHWAY_STYLE = PolylineStyle()


@dataclass(frozen=True)
class PolylineDescriptor:
    path: Tuple[Tuple[float, float], ...]
    style: PolylineStyle
    tooltip_text: str
    popup_name: str
    popup_description: str

    kind = "polyline"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "category": Category.HIGHWAYS.value,
            "path": [list(point) for point in self.path],
            # keys follow Leaflet pathOptions
            "style": {
                "color": self.style.color,
                "weight": self.style.weight,
                "opacity": self.style.opacity,
                "dashArray": self.style.dash_array,
            },
            "popup": {"name": self.popup_name, "description": self.popup_description},
            "tooltip": self.tooltip_text,
        }


OverlayDescriptor = Union[PolylineDescriptor, MarkerDescriptor]


def compose_highway(highway: Highway) -> PolylineDescriptor:
    return PolylineDescriptor(
        path=highway.path,
        style=HIGHWAY_STYLE,
        tooltip_text=highway.name,
        popup_name=highway.name,
        popup_description=highway.description,
    )


def compose_marker(item: CandidateItem, locale: str = None) -> MarkerDescriptor:
    descriptor = describe(item.category, locale)
    feature = item.feature
    return MarkerDescriptor(
        category=item.category,
        position=(feature.lat, feature.lng),
        style=MarkerStyle(color=descriptor.color, glyph=descriptor.glyph, icon=descriptor.icon),
        popup=PopupContent(
            category_label=descriptor.label,
            name=feature.name,
            description=feature_description(feature, locale),
            province=feature.province,
        ),
    )


def compose_map_overlays(
    candidates: Sequence[CandidateItem],
    highways: Iterable[Highway],
    active_categories: Iterable[CategoryKey],
    locale: str = None,
) -> List[OverlayDescriptor]:
    overlays: List[OverlayDescriptor] = []
    # Highways are never province-scoped: they depend only on their own toggle.
    if Category.HIGHWAYS in to_categories(active_categories):
        overlays.extend(compose_highway(h) for h in highways)
    overlays.extend(compose_marker(item, locale) for item in candidates)
    return overlays


def markers_only(overlays: Iterable[OverlayDescriptor]) -> List[MarkerDescriptor]:
    return [o for o in overlays if isinstance(o, MarkerDescriptor)]


def province_label(locale: str = None) -> str:
    """Caption printed beside the province badge in popups."""
    return text("province_badge", locale)
