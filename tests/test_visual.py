import pytest

from solong.visual import good_color, rgb_shifts

RGB565 = (0xF800, 0x07E0, 0x001F)


def test_shifts_of_24_bit_masks():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_shifts_of_565_masks():
    assert rgb_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


def test_shift_and_width_rebuild_the_mask():
    masks = (0x7C00, 0x03E0, 0x001F)
    shifts = rgb_shifts(*masks)
    rebuilt = tuple(
        ((1 << shifts[i + 1]) - 1) << shifts[i] for i in range(0, 6, 2)
    )
    assert rebuilt == masks


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, -1, 0xFF)])
def test_empty_mask_is_rejected(masks):
    with pytest.raises(ValueError):
        rgb_shifts(*masks)


@pytest.mark.parametrize("color", [0, 0x123456, 0xFFFFFF, 0xFF99FF])
def test_deep_visual_keeps_colour(color):
    assert good_color(color, 24, rgb_shifts(0xFF0000, 0xFF00, 0xFF)) == color
    assert good_color(color, 32, rgb_shifts(0xFF0000, 0xFF00, 0xFF)) == color


def test_white_fills_every_channel_of_shallow_visual():
    shifts = rgb_shifts(*RGB565)
    assert good_color(0xFFFFFF, 16, shifts) == RGB565[0] | RGB565[1] | RGB565[2]


def test_black_is_zero_on_shallow_visual():
    assert good_color(0, 16, rgb_shifts(*RGB565)) == 0


@pytest.mark.parametrize(
    "color, mask",
    [(0xFF0000, RGB565[0]), (0x00FF00, RGB565[1]), (0x0000FF, RGB565[2])],
)
def test_pure_channel_maps_to_its_mask(color, mask):
    assert good_color(color, 16, rgb_shifts(*RGB565)) == mask