#!/usr/bin/env python3
"""
Tests for map overlay composition (markers, highway polylines, popup content)
"""

import os
import sys

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from geography.categories import Category
from geography.dataset import GeoDataset
from geography.nepal_data import load_nepal_dataset
from map_engine.filter_engine import compute_candidates
from map_engine.overlay_composer import (
    MarkerDescriptor,
    PolylineDescriptor,
    compose_map_overlays,
    markers_only,
)

NEPAL = load_nepal_dataset()


def _tiny_dataset(lat=27.7, lng=85.3, description=None):
    capital = {"name": "Kathmandu", "province": "Bagmati", "lat": lat, "lng": lng}
    if description:
        capital["description"] = description
    return GeoDataset.from_dict(
        {"Bagmati": {"name": "Bagmati", "capital": capital,
                     "mountains": [], "rivers": [], "lakes": [], "production": []}},
        [{"name": "Tribhuvan Highway", "description": "पहिलो राजमार्ग",
          "path": [[27.01, 84.88], [27.72, 85.32]]}],
    )


def test_highways_come_first_then_markers_in_candidate_order():
    active = {Category.HIGHWAYS, Category.MOUNTAINS, Category.CAPITALS}
    candidates = compute_candidates(NEPAL, active, None, "")
    overlays = compose_map_overlays(candidates, NEPAL.highways, active)

    n_highways = len(NEPAL.highways)
    assert all(isinstance(o, PolylineDescriptor) for o in overlays[:n_highways])
    assert all(isinstance(o, MarkerDescriptor) for o in overlays[n_highways:])
    assert [m.popup.name for m in overlays[n_highways:]] == [c.feature.name for c in candidates]


def test_highway_style_and_popup():
    active = {Category.HIGHWAYS}
    polyline = compose_map_overlays([], NEPAL.highways, active)[0]

    assert polyline.style.color == "#ef4444"
    assert polyline.style.weight == 4
    assert polyline.style.opacity == 0.8
    assert polyline.style.dashed
    assert polyline.tooltip_text == NEPAL.highways[0].name
    assert polyline.popup_description == NEPAL.highways[0].description
    assert polyline.path == NEPAL.highways[0].path


def test_no_highways_when_toggle_is_off():
    active = {Category.CAPITALS}
    overlays = compose_map_overlays(compute_candidates(NEPAL, active), NEPAL.highways, active)
    assert not any(isinstance(o, PolylineDescriptor) for o in overlays)


def test_highways_do_not_depend_on_province_selection():
    active = {Category.HIGHWAYS, Category.CAPITALS}
    rendered = []
    for province in (None, "Koshi", "Sudurpashchim", "Atlantis"):
        overlays = compose_map_overlays(compute_candidates(NEPAL, active, province), NEPAL.highways, active)
        rendered.append([o.tooltip_text for o in overlays if isinstance(o, PolylineDescriptor)])
    assert all(r == rendered[0] for r in rendered)
    assert len(rendered[0]) == 4


def test_marker_style_comes_from_category():
    active = {Category.LAKES}
    marker = compose_map_overlays(compute_candidates(NEPAL, active, "Karnali"), NEPAL.highways, active)[0]
    assert marker.style.color == "#00acc1"
    assert marker.style.icon == "droplets"
    assert marker.popup.category_label == "ताल"
    assert marker.tooltip_text is None


def test_missing_description_uses_province_template_without_mutating_feature():
    dataset = _tiny_dataset()
    candidates = compute_candidates(dataset, {"capitals"})
    marker = compose_map_overlays(candidates, dataset.highways, {"capitals"})[0]

    assert marker.popup.description == "Bagmati प्रदेशमा अवस्थित एक महत्वपूर्ण भौगोलिक विशेषता।"
    assert candidates[0].feature.description is None

    marker_en = compose_map_overlays(candidates, dataset.highways, {"capitals"}, locale="en")[0]
    assert marker_en.popup.description == "An important geographic feature located in Bagmati province."


def test_own_description_wins_over_template():
    dataset = _tiny_dataset(description="संघीय राजधानी")
    marker = compose_map_overlays(compute_candidates(dataset, {"capitals"}), (), {"capitals"})[0]
    assert marker.popup.description == "संघीय राजधानी"


def test_out_of_range_coordinates_are_rendered_as_given():
    dataset = _tiny_dataset(lat=95.0, lng=-200.0)
    marker = compose_map_overlays(compute_candidates(dataset, {"capitals"}), (), {"capitals"})[0]
    assert marker.position == (95.0, -200.0)


def test_marker_serialization_carries_leaflet_icon_options():
    dataset = _tiny_dataset()
    marker = compose_map_overlays(compute_candidates(dataset, {"capitals"}), (), {"capitals"})[0]
    payload = marker.to_dict()

    assert payload["type"] == "marker"
    assert payload["category"] == "capitals"
    assert payload["position"] == [27.7, 85.3]
    assert payload["icon"]["iconSize"] == [32, 32]
    assert payload["icon"]["iconAnchor"] == [16, 32]
    assert payload["icon"]["popupAnchor"] == [0, -32]
    assert "#c62828" in payload["icon"]["html"]
    assert marker.style.glyph in payload["icon"]["html"]
    assert payload["popup"]["province"] == "Bagmati"


def test_polyline_serialization_uses_path_options_keys():
    dataset = _tiny_dataset()
    payload = compose_map_overlays([], dataset.highways, {"highways"})[0].to_dict()
    assert payload["type"] == "polyline"
    assert payload["style"] == {"color": "#ef4444", "weight": 4, "opacity": 0.8, "dashArray": "10, 10"}
    assert payload["path"] == [[27.01, 84.88], [27.72, 85.32]]
    assert payload["tooltip"] == "Tribhuvan Highway"


def test_markers_only_drops_polylines():
    active = {Category.HIGHWAYS, Category.CAPITALS}
    overlays = compose_map_overlays(compute_candidates(NEPAL, active), NEPAL.highways, active)
    assert len(markers_only(overlays)) == len(NEPAL.provinces)
