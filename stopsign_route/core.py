from typing import Any, Dict, List, Optional, Tuple
import logging
import numpy as np
import cv2

from .detect import detect_stop_signs
from .route import annotate_route, default_route
from .types import Candidate, RouteNode
from .visualize import visualize_color_masks

logger = logging.getLogger(__name__)


def read_image(path: str) -> np.ndarray:
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise FileNotFoundError(f"Cannot read image: {path}")
    return img


def process_image(
        image_bgr: np.ndarray,
        route: Optional[List[RouteNode]] = None,
        *,
        debug: bool = False,
    ) -> Tuple[List[Candidate], List[RouteNode]]:
    route = default_route() if route is None else route

    masks: Optional[Dict[str, np.ndarray]] = {} if debug else None
    signs = detect_stop_signs(image_bgr, debug_masks=masks)

    if debug:
        visualize_color_masks(masks)

    annotate_route(route, signs)
    marked = sum(1 for n in route if n.has_stop)
    logger.info("Marked %d of %d route node(s) with a stop sign.", marked, len(route))
    return signs, route


def results_to_json(candidates: List[Candidate], route: List[RouteNode]) -> Dict[str, Any]:
    signs = []
    for c in candidates:
        cx, cy = c.center if c.center is not None else (None, None)
        signs.append({
            "bbox": [int(v) for v in c.bbox],
            "polygon": c.contour.reshape(-1, 2).astype(int).tolist(),
            "area": float(c.area),
            "center_x": cx,
            "center_y": cy,
        })

    nodes = [{"x": n.x, "y": n.y, "has_stop": bool(n.has_stop)} for n in route]
    return {"stop_signs": signs, "route": nodes}
