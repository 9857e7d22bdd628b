#!/usr/bin/env python3
"""
Tests for the list view projection and its consistency with the map view
"""

import os
import sys
from collections import Counter

import pytest

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from geography.categories import Category, FEATURE_CATEGORY_ORDER
from geography.nepal_data import load_nepal_dataset
from map_engine.filter_engine import compute_candidates
from map_engine.overlay_composer import compose_map_overlays, markers_only
from map_engine.view_projector import list_summary, project_list_items

NEPAL = load_nepal_dataset()


@pytest.mark.parametrize("province,query", [
    (None, ""),
    ("Bagmati", ""),
    (None, "lake"),
    ("Lumbini", "a"),
    ("Nowhere", ""),
])
def test_list_and_map_show_the_same_features(province, query):
    active = set(FEATURE_CATEGORY_ORDER) | {Category.HIGHWAYS}
    candidates = compute_candidates(NEPAL, active, province, query)

    entries = project_list_items(candidates)
    markers = markers_only(compose_map_overlays(candidates, NEPAL.highways, active))

    assert Counter((e.name, e.province) for e in entries) == \
        Counter((m.popup.name, m.popup.province) for m in markers)
    assert [e.description for e in entries] == [m.popup.description for m in markers]


def test_entries_carry_category_label_and_fallback():
    candidates = compute_candidates(NEPAL, {"tradeCenters"}, "Karnali")
    entries = project_list_items(candidates)

    assert [e.name for e in entries] == ["Jumla Khalanga"]
    assert entries[0].category_label == "व्यापारिक केन्द्र"
    assert entries[0].description == "Karnali प्रदेशमा अवस्थित एक महत्वपूर्ण भौगोलिक विशेषता।"
    assert entries[0].to_dict()["category"] == "tradeCenters"


def test_projection_does_not_refilter():
    candidates = compute_candidates(NEPAL, {"mountains"}, None, "")
    assert len(project_list_items(candidates)) == len(candidates)
    assert project_list_items([]) == []


def test_list_summary_counts_entries():
    entries = project_list_items(compute_candidates(NEPAL, {"capitals"}))
    assert list_summary(entries) == "तपाईंको फिल्टर अनुसार 7 वस्तुहरू देखाइएको छ"
    assert list_summary(entries, "en") == "Showing 7 features for your filters"
