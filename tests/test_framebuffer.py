import pytest

from raycube.framebuffer import FrameBuffer, bresenham


def test_put_and_read_pixel():
    frame = FrameBuffer(10, 8)
    frame.put_pixel(3, 4, 0x123456)
    assert frame.pixel(3, 4) == 0x123456
    assert frame.pixel(4, 3) == 0


def test_put_pixel_keeps_only_rgb():
    frame = FrameBuffer(4, 4)
    frame.put_pixel(1, 1, 0xFF123456)
    assert frame.pixel(1, 1) == 0x123456


def test_put_pixel_outside_is_ignored():
    frame = FrameBuffer(4, 4)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4)]:
        frame.put_pixel(x, y, 0xFFFFFF)
    assert sum(frame.pixels) == 0


def test_pixel_outside_raises():
    frame = FrameBuffer(4, 4)
    with pytest.raises(IndexError):
        frame.pixel(4, 0)


def test_invalid_size():
    with pytest.raises(ValueError):
        FrameBuffer(0, 5)


def test_clear_blackens_everything():
    frame = FrameBuffer(5, 5)
    frame.draw_square(0, 0, 5, 0xABCDEF)
    frame.clear()
    assert all(value == 0 for value in frame.pixels)


def test_draw_square_fills_size_squared():
    frame = FrameBuffer(20, 20)
    frame.draw_square(2, 3, 4, 0x010101)
    filled = [value for value in frame.pixels if value]
    assert len(filled) == 4 * 4
    assert frame.pixel(2, 3) == 0x010101
    assert frame.pixel(5, 6) == 0x010101
    assert frame.pixel(6, 6) == 0


def test_draw_square_clipped_at_edge():
    frame = FrameBuffer(5, 5)
    frame.draw_square(3, 3, 4, 0x0F0F0F)
    assert sum(1 for value in frame.pixels if value) == 2 * 2


def test_bresenham_horizontal():
    assert list(bresenham(0, 0, 3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_bresenham_single_point():
    assert list(bresenham(2, 2, 2, 2)) == [(2, 2)]


@pytest.mark.parametrize("end", [(7, 3), (-5, 9), (0, -6), (-4, -4)])
def test_bresenham_is_connected_and_ends_right(end):
    points = list(bresenham(1, 1, *end))
    assert points[0] == (1, 1)
    assert points[-1] == end
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_bresenham_is_reversible_in_length():
    forward = list(bresenham(0, 0, 9, 4))
    backward = list(bresenham(9, 4, 0, 0))
    assert len(forward) == len(backward)


def test_draw_line_marks_endpoints():
    frame = FrameBuffer(10, 10)
    frame.draw_line(1, 2, 8, 6, 0x00FF00)
    assert frame.pixel(1, 2) == 0x00FF00
    assert frame.pixel(8, 6) == 0x00FF00