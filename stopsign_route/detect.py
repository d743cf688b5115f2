from typing import List, Optional
import logging
import cv2
import numpy as np

from .config import HSV_RANGES, MORPH, SHAPE_THRESH
from .geometry import find_contours, approx_poly, polygon_center
from .preprocess import build_red_mask
from .types import Candidate

logger = logging.getLogger(__name__)


def detect_octagons_from_mask(
    mask: np.ndarray,
    *,
    min_area: float = SHAPE_THRESH["min_area"],
    poly_eps_ratio: float = SHAPE_THRESH["poly_eps_ratio"],
    n_vertices: int = SHAPE_THRESH["n_vertices"],
) -> List[Candidate]:
    """
    Keep every external contour whose simplified polygon has exactly
    `n_vertices` corners and an area strictly above `min_area`.

    Any polygon with the right vertex count passes, convex or not.
    """
    if n_vertices < 3:
        raise ValueError("n_vertices must be >= 3")

    out: List[Candidate] = []

    for i, cnt in enumerate(find_contours(mask)):
        poly = approx_poly(cnt, poly_eps_ratio)
        if len(poly) != n_vertices:
            logger.debug("contour %d: %d vertices, rejected", i, len(poly))
            continue

        area = float(cv2.contourArea(poly))
        if area <= float(min_area):
            logger.debug("contour %d: area %.1f <= %s, rejected", i, area, min_area)
            continue

        x, y, w, h = cv2.boundingRect(poly)
        logger.debug("contour %d: accepted bbox=(%d,%d,%d,%d) area=%.1f", i, x, y, w, h, area)

        out.append(Candidate(
            bbox=(int(x), int(y), int(w), int(h)),
            contour=poly,
            area=area,
            center=polygon_center(poly),
        ))
    return out


def detect_stop_signs(
    image_bgr: np.ndarray,
    *,
    ranges: Optional[list] = None,
    morph_kernel: int = MORPH["kernel_size"],
    morph_iterations: int = MORPH["iterations"],
    min_area: float = SHAPE_THRESH["min_area"],
    poly_eps_ratio: float = SHAPE_THRESH["poly_eps_ratio"],
    n_vertices: int = SHAPE_THRESH["n_vertices"],
    debug_masks: Optional[dict] = None,
) -> List[Candidate]:
    """Find red octagons in a BGR image. No red pixels -> empty list."""
    ranges = HSV_RANGES["red"] if ranges is None else ranges

    mask = build_red_mask(
        image_bgr,
        ranges,
        k=morph_kernel,
        iterations=morph_iterations,
        debug_masks=debug_masks,
    )
    signs = detect_octagons_from_mask(
        mask,
        min_area=min_area,
        poly_eps_ratio=poly_eps_ratio,
        n_vertices=n_vertices,
    )
    logger.info("Found %d stop sign candidate(s).", len(signs))
    return signs
