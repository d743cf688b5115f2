import numpy as np

from stopsign_route import detect_stop_signs
from stopsign_route.detect import detect_octagons_from_mask
from stopsign_route.preprocess import build_red_mask, erode_dilate

from helpers import BLUE, DEEP_RED, WHITE, draw_octagon, draw_square


def test_no_red_pixels_gives_empty_result(blank):
    assert detect_stop_signs(blank) == []


def test_blue_octagon_is_ignored(blank):
    draw_octagon(blank, (200, 200), 80, color=BLUE)
    assert detect_stop_signs(blank) == []


def test_red_octagon_is_detected(octagon_image):
    signs = detect_stop_signs(octagon_image)

    assert len(signs) == 1
    s = signs[0]
    assert s.n_vertices == 8
    assert s.contour.reshape(-1, 2).shape == (8, 2)
    assert s.area > 1000

    x, y, w, h = s.bbox
    assert w > 0 and h > 0
    assert x < 190 < x + w
    assert y < 240 < y + h
    assert abs(s.center[0] - 190) < 3
    assert abs(s.center[1] - 240) < 3


def test_upper_red_hue_range_is_detected(blank):
    draw_octagon(blank, (200, 200), 80, color=DEEP_RED)
    signs = detect_stop_signs(blank)
    assert len(signs) == 1
    assert signs[0].n_vertices == 8


def test_red_square_is_rejected(blank):
    draw_square(blank, (100, 100), 150)
    assert detect_stop_signs(blank) == []


def test_small_octagon_is_rejected(blank):
    # area ~ 2.83 * r^2 ~ 640 px
    draw_octagon(blank, (200, 200), 15)
    assert detect_stop_signs(blank) == []


def test_min_area_is_configurable(blank):
    draw_octagon(blank, (200, 200), 80)
    assert detect_stop_signs(blank, min_area=10 ** 6) == []


def test_vertex_count_is_configurable(blank):
    draw_square(blank, (100, 100), 150)
    signs = detect_stop_signs(blank, n_vertices=4)
    assert len(signs) == 1
    assert signs[0].n_vertices == 4


def test_only_octagons_among_mixed_shapes(blank):
    draw_octagon(blank, (100, 100), 70)
    draw_square(blank, (220, 220), 120)
    signs = detect_stop_signs(blank)
    assert len(signs) == 1
    x, y, _, _ = signs[0].bbox
    assert x < 100 and y < 100


def test_erode_dilate_removes_speckles():
    mask = np.zeros((50, 50), dtype=np.uint8)
    mask[10, 10] = 255
    mask[20:40, 20:40] = 255
    out = erode_dilate(mask)
    assert out[10, 10] == 0
    assert out[30, 30] == 255


def test_debug_masks_are_collected(octagon_image):
    masks = {}
    build_red_mask(octagon_image, debug_masks=masks)
    assert set(masks) == {"raw", "clean"}
    assert masks["raw"].shape == octagon_image.shape[:2]


def test_empty_mask_gives_no_candidates():
    assert detect_octagons_from_mask(np.zeros((20, 20), dtype=np.uint8)) == []


def test_white_octagon_is_not_red(blank):
    # saturation is zero, so neither red range matches
    draw_octagon(blank, (200, 200), 80, color=WHITE)
    assert detect_stop_signs(blank) == []


def test_min_area_bound_is_exclusive(octagon_image):
    mask = build_red_mask(octagon_image)
    area = detect_octagons_from_mask(mask)[0].area

    assert detect_octagons_from_mask(mask, min_area=area) == []
    assert len(detect_octagons_from_mask(mask, min_area=area - 0.5)) == 1
