from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np


@dataclass
class Candidate:
    bbox: Tuple[int, int, int, int]          # x,y,w,h
    contour: np.ndarray                      # approximated polygon, (N,1,2) int32
    area: float = 0.0

    center: Optional[Tuple[float, float]] = None  # cx,cy

    @property
    def n_vertices(self) -> int:
        return len(self.contour)


@dataclass
class RouteNode:
    x: float
    y: float
    has_stop: bool = False
