import pytest

from wirefdf.pixel import RgbShifts, convert_color, rgb_shifts

MASKS_888 = (0xFF0000, 0x00FF00, 0x0000FF)
MASKS_565 = (0xF800, 0x07E0, 0x001F)


def test_shifts_for_true_colour_layout():
    assert rgb_shifts(*MASKS_888) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_565_layout():
    shifts = rgb_shifts(*MASKS_565)
    assert shifts == (11, 5, 5, 6, 0, 5)
    assert shifts.green_bits == 6


def test_shifts_rebuild_masks():
    for masks in (MASKS_888, MASKS_565):
        shifts = rgb_shifts(*masks)
        rebuilt = (
            ((1 << shifts.red_bits) - 1) << shifts.red_shift,
            ((1 << shifts.green_bits) - 1) << shifts.green_shift,
            ((1 << shifts.blue_bits) - 1) << shifts.blue_shift,
        )
        assert rebuilt == masks


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, 0)])
def test_zero_mask_is_rejected(masks):
    with pytest.raises(ValueError):
        rgb_shifts(*masks)


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFFFFFF, 0xFF0000])
def test_deep_visual_keeps_colour(color):
    shifts = rgb_shifts(*MASKS_565)
    assert convert_color(color, 24, shifts) == color
    assert convert_color(color, 32, shifts) == color


def test_primary_colours_fill_their_masks():
    shifts = rgb_shifts(*MASKS_565)
    red_mask, green_mask, blue_mask = MASKS_565
    assert convert_color(0xFF0000, 16, shifts) == red_mask
    assert convert_color(0x00FF00, 16, shifts) == green_mask
    assert convert_color(0x0000FF, 16, shifts) == blue_mask


def test_white_and_black_on_shallow_visual():
    shifts = rgb_shifts(*MASKS_565)
    red_mask, green_mask, blue_mask = MASKS_565
    assert convert_color(0xFFFFFF, 16, shifts) == red_mask | green_mask | blue_mask
    assert convert_color(0x000000, 16, shifts) == 0


def test_shallow_result_stays_inside_masks():
    shifts = rgb_shifts(*MASKS_565)
    all_bits = MASKS_565[0] | MASKS_565[1] | MASKS_565[2]
    for color in (0x123456, 0xABCDEF, 0x7F7F7F):
        assert convert_color(color, 16, shifts) & ~all_bits == 0


def test_oversized_channel_is_rejected():
    shifts = RgbShifts(0, 17, 17, 8, 25, 8)
    with pytest.raises(ValueError):
        convert_color(0x123456, 16, shifts)