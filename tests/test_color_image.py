import pytest

from sudoku_image.models.color import Color
from sudoku_image.models.color_image import ColorImage
from sudoku_image.services.rgb_codec import encode_rgb

RED = Color(255, 0, 0)
GREY = Color(200, 200, 200)
DARK = Color(10, 10, 10)


def test_blank_image_dimensions_and_pixels():
    image = ColorImage(4, 3)
    assert (image.width, image.height) == (4, 3)
    assert image.data == [[0] * 4 for _ in range(3)]
    assert image.get_color(3, 2) == Color(0, 0, 0)


def test_filled_image():
    image = ColorImage(5, 2, RED)
    assert all(image.get_color(x, y) == RED for x in range(5) for y in range(2))


def test_set_color_uses_row_for_y():
    image = ColorImage(3, 2)
    image.set_color(2, 1, RED)
    assert image.data[1][2] == encode_rgb(255, 0, 0)
    assert image.data[0][2] == 0


def test_from_grid_shares_data():
    grid = [[encode_rgb(1, 2, 3)] * 2 for _ in range(2)]
    image = ColorImage.from_grid(grid)
    assert (image.width, image.height) == (2, 2)
    image.set_color(0, 0, RED)
    assert grid[0][0] == encode_rgb(255, 0, 0)
    grid[1][1] = encode_rgb(0, 0, 9)
    assert image.get_color(1, 1) == Color(0, 0, 9)


def test_out_of_range_coordinates_fail():
    image = ColorImage(2, 2)
    with pytest.raises(IndexError):
        image.get_color(0, 2)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (-3, -3)])
def test_negative_coordinates_fail(x, y):
    image = ColorImage(3, 1, GREY)
    with pytest.raises(IndexError):
        image.set_color(x, y, RED)
    with pytest.raises(IndexError):
        image.get_color(x, y)
    assert all(image.get_color(i, 0) == GREY for i in range(3))


def test_copy_from_same_size():
    target = ColorImage(3, 3, RED)
    source = ColorImage(3, 3, GREY)
    target.copy_from(source)
    assert all(target.get_color(x, y) == GREY for x in range(3) for y in range(3))


def test_copy_from_smaller_image_keeps_rest():
    target = ColorImage(4, 4, RED)
    target.copy_from(ColorImage(2, 3, GREY))
    assert target.get_color(1, 2) == GREY
    assert target.get_color(2, 2) == RED
    assert target.get_color(0, 3) == RED


def test_to_binary():
    image = ColorImage(2, 1)
    image.set_color(0, 0, Color(255, 255, 255))
    image.set_color(1, 0, Color(40, 40, 40))
    assert image.to_binary() == [[True, False]]


def test_draw_text_copies_only_non_mask_pixels(monkeypatch):
    image = ColorImage(3, 2, GREY)
    mask = encode_rgb(245, 245, 245)
    text = encode_rgb(10, 10, 10)
    calls = []

    def fake_render(width, height, background, *args):
        calls.append((width, height, background) + args)
        return [[mask, text, mask], [text, mask, encode_rgb(1, 2, 3)]]

    monkeypatch.setattr(ColorImage._text_service, "render_text", fake_render)
    image.draw_text(1, 1, "5", 12, DARK)

    assert calls == [(3, 2, Color(245, 245, 245), 1, 1, "5", 12, DARK, False)]
    assert image.data == [
        [encode_rgb(200, 200, 200), text, encode_rgb(200, 200, 200)],
        [text, encode_rgb(200, 200, 200), encode_rgb(1, 2, 3)],
    ]


def test_draw_centered_text_requests_centering(monkeypatch):
    image = ColorImage(2, 2)
    seen = {}

    def fake_render(width, height, background, text_x, text_y, text, text_size, text_color, centered):
        seen["centered"] = centered
        return [[encode_rgb(background.r, background.g, background.b)] * width for _ in range(height)]

    monkeypatch.setattr(ColorImage._text_service, "render_text", fake_render)
    image.draw_centered_text(1, 1, "9", 10, RED)

    assert seen["centered"] is True
    # an all-mask render leaves the image untouched
    assert image.data == [[0, 0], [0, 0]]


def test_draw_text_changes_pixels_to_text_color():
    image = ColorImage(80, 40, GREY)
    image.draw_text(10, 8, "8", 24, DARK)

    colors = {image.get_color(x, y) for x in range(80) for y in range(40)}
    assert DARK in colors
    # without antialiasing only the text color is added
    assert colors <= {GREY, DARK}


def test_draw_centered_text_surrounds_anchor():
    image = ColorImage(100, 60, GREY)
    image.draw_centered_text(50, 30, "8", 24, DARK)

    xs = [x for y in range(60) for x in range(100) if image.get_color(x, y) == DARK]
    ys = [y for y in range(60) for x in range(100) if image.get_color(x, y) == DARK]
    assert xs and ys
    assert min(xs) < 50 < max(xs)
    assert min(ys) < 30 < max(ys)


def test_draw_black_text_on_black_background_is_invisible():
    image = ColorImage(40, 30, Color(0, 0, 0))
    image.draw_text(2, 2, "1", 20, Color(0, 0, 0))
    assert all(value == encode_rgb(0, 0, 0) for row in image.data for value in row)
