import pytest

from solong.pixels import PixelFormat

WIN1_SX = 242
WIN1_SY = 242


def _gradient(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.fixture
def rgb565():
    return PixelFormat.from_masks(0xF800, 0x07E0, 0x001F, 16)


@pytest.fixture
def truecolor():
    return PixelFormat.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)


def test_from_masks_565_layout(rgb565):
    assert (rgb565.red_shift, rgb565.red_bits) == (11, 5)
    assert (rgb565.green_shift, rgb565.green_bits) == (5, 6)
    assert (rgb565.blue_shift, rgb565.blue_bits) == (0, 5)
    assert rgb565.depth == 16


def test_from_masks_truecolor_layout(truecolor):
    assert (truecolor.red_shift, truecolor.red_bits) == (16, 8)
    assert (truecolor.green_shift, truecolor.green_bits) == (8, 8)
    assert (truecolor.blue_shift, truecolor.blue_bits) == (0, 8)


@pytest.mark.parametrize("x, y", [(0, 0), (10, 20), (241, 241), (120, 5)])
def test_deep_visual_keeps_gradient_colours(truecolor, x, y):
    color = _gradient(x, y, WIN1_SX, WIN1_SY)
    assert truecolor.encode(color) == color


def test_gradient_corner_is_pure_red(truecolor):
    assert truecolor.encode(_gradient(0, 0, WIN1_SX, WIN1_SY)) == 0xFF0000


def test_string_colours_pass_through(truecolor):
    assert truecolor.encode(0xFF99FF) == 0xFF99FF
    assert truecolor.encode(0x00FFFF) == 0x00FFFF


@pytest.mark.parametrize(
    "color, expected",
    [
        (0xFFFFFF, 0xFFFF),
        (0x000000, 0x0000),
        (0xFF0000, 0xF800),
        (0x00FF00, 0x07E0),
        (0x0000FF, 0x001F),
    ],
)
def test_encode_565(rgb565, color, expected):
    assert rgb565.encode(color) == expected


def test_encode_555_white():
    fmt = PixelFormat.from_masks(0x7C00, 0x03E0, 0x001F, 15)
    assert fmt.encode(0xFFFFFF) == 0x7FFF


@pytest.mark.parametrize("x, y", [(0, 0), (30, 200), (241, 100), (77, 13)])
def test_encoded_value_stays_inside_masks(rgb565, x, y):
    value = rgb565.encode(_gradient(x, y, WIN1_SX, WIN1_SY))
    assert value & ~(0xF800 | 0x07E0 | 0x001F) == 0


@pytest.mark.parametrize("masks", [(0, 0x07E0, 0x001F), (0xF800, 0, 0x001F), (0xF800, 0x07E0, 0)])
def test_empty_mask_is_rejected(masks):
    with pytest.raises(ValueError):
        PixelFormat.from_masks(*masks, 16)