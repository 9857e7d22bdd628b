"""
Map engine: filter the dataset for the current toggles, then project the result
either as map overlays or as list entries.
"""

from .filter_engine import CandidateItem, compute_candidates, matches_query
from .overlay_composer import (
    HIGHWAY_STYLE,
    MarkerDescriptor,
    PolylineDescriptor,
    compose_map_overlays,
    markers_only,
    province_label,
)
from .view_projector import ListEntry, list_summary, project_list_items

__all__ = [
    "CandidateItem",
    "compute_candidates",
    "matches_query",
    "HIGHWAY_STYLE",
    "MarkerDescriptor",
    "PolylineDescriptor",
    "compose_map_overlays",
    "markers_only",
    "province_label",
    "ListEntry",
    "list_summary",
    "project_list_items",
]
