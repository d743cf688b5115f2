from typing import List, Optional, Tuple
import math
import numpy as np
import cv2


def find_contours(mask: np.ndarray) -> List[np.ndarray]:
    # outer boundaries only; holes inside a shape are ignored
    contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    return list(contours)


def approx_poly(cnt: np.ndarray, eps_ratio: float) -> np.ndarray:
    """Douglas-Peucker simplification with a tolerance of `eps_ratio` x perimeter."""
    return cv2.approxPolyDP(cnt, eps_ratio * cv2.arcLength(cnt, True), True)


def polygon_center(poly: np.ndarray) -> Optional[Tuple[float, float]]:
    m = cv2.moments(poly)
    area = m["m00"]
    if area == 0:
        return None
    return (m["m10"] / area, m["m01"] / area)


def euclidean(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)
