import pytest

from solong.pixels import get_good_color, rgb_shifts

WIN_SIZE = 242


def _color_map(x, y, w=WIN_SIZE, h=WIN_SIZE):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_shifts_for_24_bit_visual():
    assert rgb_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_565_visual():
    assert rgb_shifts(0xF800, 0x7E0, 0x1F) == (11, 5, 5, 6, 0, 5)


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)


@pytest.mark.parametrize("x,y", [(0, 0), (241, 241), (120, 60), (20, 200)])
def test_deep_visual_keeps_color(x, y):
    color = _color_map(x, y)
    assert get_good_color(color, 24, (16, 8, 8, 8, 0, 8)) == color


def test_color_map_corner_is_red():
    assert get_good_color(_color_map(0, 0), 32, ()) == 0xFF0000


@pytest.mark.parametrize("x,y", [(0, 0), (241, 241), (120, 60), (33, 7)])
def test_shallow_visual_with_full_masks_is_identity(x, y):
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    color = _color_map(x, y)
    assert get_good_color(color, 16, shifts) == color


def test_565_red_and_white():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    assert get_good_color(0xFF0000, 16, shifts) == 0xF800
    assert get_good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert get_good_color(0x000000, 16, shifts) == 0


def test_565_result_fits_mask():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    for color in (_color_map(x, y) for x in range(0, 242, 40) for y in range(0, 242, 40)):
        assert get_good_color(color, 16, shifts) & ~0xFFFF == 0


def test_bad_shift_count_rejected():
    with pytest.raises(ValueError):
        get_good_color(0x123456, 16, (1, 2, 3))