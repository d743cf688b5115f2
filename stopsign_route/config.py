from typing import Dict, List, Tuple

# Each entry: [ ((Hmin,Hmax),(Smin,Smax),(Vmin,Vmax)), ... ]
# Red wraps around the OpenCV hue circle (0..180), hence two ranges.
HSV_RANGES: Dict[str, List[Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]]] = {
    "red": [
        ((0, 10), (70, 255), (50, 255)),
        ((170, 180), (70, 255), (50, 255)),
    ],
}

MORPH = {
    "kernel_size": 3,     # square structuring element
    "iterations": 2,      # erode x2 then dilate x2
}

SHAPE_THRESH = {
    "min_area": 1000,     # strict: area must be greater than this
    "poly_eps_ratio": 0.02,
    "n_vertices": 8,
}

# Distance between a node and a sign's bbox origin, in route units (exclusive).
ROUTE_THRESH = {
    "near_dist": 50.0,
}

DEFAULT_ROUTE: List[Tuple[float, float]] = [
    (100.0, 150.0),
    (200.0, 250.0),
    (300.0, 350.0),
]

DEFAULT_IMAGE = "stop_sign_sample.jpg"
WINDOW_TITLE = "Stop Sign Detection"

# BGR
BOX_COLOR = (0, 255, 0)
POLY_COLOR = (255, 0, 0)
BOX_THICKNESS = 3
POLY_THICKNESS = 2
