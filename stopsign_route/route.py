from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_ROUTE, ROUTE_THRESH
from .geometry import euclidean
from .types import Candidate, RouteNode

# Maps a detection into route coordinates.
Alignment = Callable[[Candidate], Tuple[float, float]]


def bbox_origin(c: Candidate) -> Tuple[float, float]:
    """
    Placeholder alignment: the raw bbox top-left in image pixels, used as-is
    in route units. Swap in a real image->map transform via `to_route_xy`.
    """
    x, y, _, _ = c.bbox
    return float(x), float(y)


def default_route(points: Optional[Iterable[Tuple[float, float]]] = None) -> List[RouteNode]:
    points = DEFAULT_ROUTE if points is None else points
    return [RouteNode(float(x), float(y)) for x, y in points]


def annotate_route(
    route: List[RouteNode],
    candidates: Sequence[Candidate],
    *,
    dist_thresh: float = ROUTE_THRESH["near_dist"],
    to_route_xy: Alignment = bbox_origin,
) -> List[RouteNode]:
    # flags only go up; a node already marked stays marked
    anchors = [to_route_xy(c) for c in candidates]
    for node in route:
        for ax, ay in anchors:
            if euclidean(node.x, node.y, ax, ay) < dist_thresh:
                node.has_stop = True
    return route


def format_route(route: Sequence[RouteNode]) -> List[str]:
    lines = ["Route:"]
    for i, n in enumerate(route):
        flag = "true" if n.has_stop else "false"
        lines.append(f" Node {i}: (x={n.x:g}, y={n.y:g}), hasStop={flag}")
    return lines
