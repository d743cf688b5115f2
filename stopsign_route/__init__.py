"""Top-level package interface for stopsign_route.

Expose the main API: detect_stop_signs, annotate_route and the pipeline helpers.
"""
from .detect import detect_stop_signs  # re-export
from .route import annotate_route, bbox_origin, default_route
from .core import process_image, read_image, results_to_json
from .types import Candidate, RouteNode

__all__ = [
    "detect_stop_signs",
    "annotate_route",
    "bbox_origin",
    "default_route",
    "process_image",
    "read_image",
    "results_to_json",
    "Candidate",
    "RouteNode",
]
