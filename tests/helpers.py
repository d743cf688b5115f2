import math

import cv2
import numpy as np

RED = (0, 0, 255)          # hue 0
DEEP_RED = (40, 0, 255)    # hue ~175, upper red range
BLUE = (255, 0, 0)
WHITE = (255, 255, 255)


def regular_polygon(cx, cy, r, n, phase=None):
    # flat top/bottom edges for even n
    phase = math.pi / n if phase is None else phase
    pts = [
        (cx + r * math.cos(phase + 2 * math.pi * k / n), cy + r * math.sin(phase + 2 * math.pi * k / n))
        for k in range(n)
    ]
    return np.array(pts, dtype=np.int32).reshape(-1, 1, 2)


def draw_octagon(img, center, r, color=RED):
    cv2.fillPoly(img, [regular_polygon(center[0], center[1], r, 8)], color)
    return img


def draw_square(img, top_left, side, color=RED):
    x, y = top_left
    cv2.rectangle(img, (x, y), (x + side - 1, y + side - 1), color, thickness=-1)
    return img
