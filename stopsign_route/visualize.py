from typing import Dict, List
import matplotlib.pyplot as plt
import numpy as np
import cv2

from .config import BOX_COLOR, BOX_THICKNESS, POLY_COLOR, POLY_THICKNESS, WINDOW_TITLE
from .types import Candidate


def visualize_color_masks(masks: Dict[str, np.ndarray], title: str = "Red HSV Masks"):
    """One row of grayscale panels, one per mask (e.g. `raw` and `clean`)."""
    n = max(len(masks), 1)
    fig, axes = plt.subplots(1, n, figsize=(5 * n, 5), squeeze=False)

    for ax, (name, mask) in zip(axes[0], masks.items()):
        ax.imshow(mask, cmap="gray", vmin=0, vmax=255)
        ax.set_title(f"{name} ({cv2.countNonZero(mask)} px)")
    for ax in axes[0]:
        ax.axis("off")

    fig.suptitle(title, fontsize=14)
    plt.tight_layout()
    plt.show()


def draw_detections_on_image(image_bgr: np.ndarray, candidates: List[Candidate]) -> np.ndarray:
    vis = image_bgr.copy()

    for c in candidates:
        x, y, w, h = c.bbox
        cv2.rectangle(vis, (x, y), (x + w, y + h), BOX_COLOR, BOX_THICKNESS)
        cv2.polylines(vis, [c.contour], True, POLY_COLOR, POLY_THICKNESS)

    return vis


def show_detections(vis_bgr: np.ndarray, title: str = WINDOW_TITLE) -> None:
    # blocks until any key is pressed
    cv2.imshow(title, vis_bgr)
    cv2.waitKey(0)
    cv2.destroyWindow(title)
