from typing import List, Optional
import cv2
import numpy as np

from .config import HSV_RANGES, MORPH


def threshold_hsv(hsv: np.ndarray, ranges: List[tuple]) -> np.ndarray:
    """OR of one `inRange` mask per ((hmin, hmax), (smin, smax), (vmin, vmax)) band."""
    mask = np.zeros(hsv.shape[:2], dtype=np.uint8)
    for h, s, v in ranges:
        lower = np.array([h[0], s[0], v[0]], dtype=np.uint8)
        upper = np.array([h[1], s[1], v[1]], dtype=np.uint8)
        mask |= cv2.inRange(hsv, lower, upper)
    return mask


def erode_dilate(
    mask: np.ndarray,
    k: int = MORPH["kernel_size"],
    iterations: int = MORPH["iterations"],
) -> np.ndarray:
    """
    Remove speckles (erode) then restore the surviving blobs (dilate).
    Fixed parameters; nothing here adapts to the image.
    """
    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (k, k))
    mask = cv2.erode(mask, kernel, iterations=iterations)
    mask = cv2.dilate(mask, kernel, iterations=iterations)
    return mask


def build_red_mask(
    image_bgr: np.ndarray,
    ranges: Optional[List[tuple]] = None,
    *,
    k: int = MORPH["kernel_size"],
    iterations: int = MORPH["iterations"],
    debug_masks: Optional[dict] = None,
) -> np.ndarray:
    ranges = HSV_RANGES["red"] if ranges is None else ranges

    hsv = cv2.cvtColor(image_bgr, cv2.COLOR_BGR2HSV)
    raw = threshold_hsv(hsv, ranges)
    clean = erode_dilate(raw, k=k, iterations=iterations)

    if debug_masks is not None:
        debug_masks["raw"] = raw
        debug_masks["clean"] = clean
    return clean
