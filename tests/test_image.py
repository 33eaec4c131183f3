import pytest

from solong.image import Image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("big_endian", [False, True])
@pytest.mark.parametrize("size, kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 2)])
def test_colour_map_round_trips(size, kind, big_endian):
    w, h = size
    image = Image(w, h, 32, big_endian)
    for y in range(h):
        for x in range(w):
            image.put_pixel(x, y, _color_map(x, y, w, h, kind))
    for y in range(0, h, 7):
        for x in range(0, w, 5):
            assert image.get_pixel(x, y) == _color_map(x, y, w, h, kind)


def test_new_image_is_zeroed():
    image = Image(IM1_SX, IM1_SY, 32, False)
    for y in range(IM1_SY):
        assert image.row(y) == bytes(image.size_line)
    assert image.get_pixel(IM1_SX - 1, IM1_SY - 1) == 0


def test_row_size_is_padded_to_32_bits():
    image = Image(3, 2, 24, False)
    assert image.size_line % 4 == 0
    assert image.size_line >= 9
    assert len(image.row(1)) == image.size_line


def test_little_endian_byte_layout():
    image = Image(1, 1, 32, False)
    image.put_pixel(0, 0, 0x11223344)
    assert image.row(0)[:4] == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_byte_layout():
    image = Image(1, 1, 32, True)
    image.put_pixel(0, 0, 0x11223344)
    assert image.row(0)[:4] == bytes([0x11, 0x22, 0x33, 0x44])


def test_narrow_pixels_keep_low_bytes():
    image = Image(2, 1, 24, False)
    image.put_pixel(1, 0, 0x11223344)
    assert image.get_pixel(1, 0) == 0x223344
    assert image.get_pixel(0, 0) == 0


def test_pixels_do_not_overlap_neighbours():
    image = Image(4, 4, 32, False)
    image.put_pixel(1, 1, 0xFFFFFFFF)
    assert image.get_pixel(0, 1) == 0
    assert image.get_pixel(2, 1) == 0
    assert image.get_pixel(1, 0) == 0
    assert image.get_pixel(1, 2) == 0
    assert image.get_pixel(1, 1) == 0xFFFFFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_range_pixels_raise(x, y):
    image = Image(IM1_SX, IM1_SY, 32, False)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


def test_out_of_range_row_raises():
    with pytest.raises(IndexError):
        Image(2, 2, 32, False).row(2)


@pytest.mark.parametrize("args", [(0, 1, 32, False), (1, 0, 32, False), (1, 1, 12, False)])
def test_invalid_geometry_raises(args):
    with pytest.raises(ValueError):
        Image(*args)