import pytest

from fractol.image import (
    HEIGHT,
    WIDTH,
    Image,
    create_color,
    draw_gradient,
    draw_triangle,
)


def test_default_size_matches_window():
    image = Image()
    assert (image.width, image.height) == (WIDTH, HEIGHT)
    assert len(image.pixels) == WIDTH * HEIGHT


def test_new_image_is_black():
    image = Image(4, 3)
    assert all(value == 0 for row in image.rows() for value in row)


def test_put_get_round_trip():
    image = Image(5, 5)
    image.put_pixel(2, 3, 0x123456)
    assert image.get_pixel(2, 3) == 0x123456
    assert image.get_pixel(3, 2) == 0


def test_put_pixel_masks_to_32_bits():
    image = Image(2, 2)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds_raises(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Image(0, 10)


def test_rows_shape_and_content():
    image = Image(3, 2)
    image.put_pixel(1, 1, 7)
    rows = list(image.rows())
    assert len(rows) == 2
    assert all(len(row) == 3 for row in rows)
    assert rows[1][1] == 7


def test_create_color_red():
    assert create_color(255, 0, 0) == 0xFF0000


def test_create_color_channels_round_trip():
    color = create_color(12, 34, 56)
    assert (color >> 16 & 0xFF, color >> 8 & 0xFF, color & 0xFF) == (12, 34, 56)


def test_gradient_corner_and_monotonic_red():
    image = Image(20, 10)
    draw_gradient(image)
    assert image.get_pixel(0, 0) == create_color(0, 0, 255)
    first_row = next(image.rows())
    reds = [value >> 16 & 0xFF for value in first_row]
    assert reds == sorted(reds)
    greens = [image.get_pixel(0, y) >> 8 & 0xFF for y in range(10)]
    assert greens == sorted(greens)


def test_triangle_on_full_hd():
    image = Image(1920, 1080)
    draw_triangle(image)
    assert image.get_pixel(960, 0) == 0x05FF5500
    assert image.get_pixel(961, 0) == 0x055FF33
    assert image.get_pixel(950, 10) == 0x05FF5500
    assert all(image.get_pixel(x, 960) == 0x087965A for x in range(1920))
    assert image.get_pixel(0, 0) == 0


def test_triangle_requires_tall_enough_image():
    with pytest.raises(ValueError):
        draw_triangle(Image(100, 40))