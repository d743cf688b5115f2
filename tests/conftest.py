import os
import sys

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

sys.path.insert(0, os.path.dirname(__file__))

from helpers import draw_octagon  # noqa: E402


@pytest.fixture
def blank():
    return np.zeros((400, 400, 3), dtype=np.uint8)


@pytest.fixture
def octagon_image(blank):
    return draw_octagon(blank, (190, 240), 80)
