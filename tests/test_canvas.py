"""
Tests for the Canvas buffer and its blend primitive.
"""
import numpy as np
import pytest

from rendering import Canvas


class TestCanvasBuffer:

    def test_buffer_layout(self):
        c = Canvas((4, 3))
        assert c.size == (4, 3)
        assert c.data.dtype == np.uint8
        assert len(c.data) == 4 * 3 * 3
        assert c.as_array().shape == (3, 4, 3)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Canvas((0, 5))

    def test_flush_zeroes_and_keeps_length(self):
        c = Canvas((4, 3))
        c.set_color((1.0, 1.0, 1.0))
        c.put_pixel(1, 1, 1.0)
        c.flush()
        assert len(c.data) == 36
        assert not c.data.any()

    def test_set_color_requires_rgb(self):
        c = Canvas((2, 2))
        with pytest.raises(ValueError):
            c.set_color((1.0, 0.0))

    def test_row_major_rgb_order(self):
        c = Canvas((4, 3))
        c.set_color((1.0, 0.0, 0.0))
        c.put_pixel(2, 1, 1.0)
        pos = (1 * 4 + 2) * 3
        assert list(c.data[pos:pos + 3]) == [255, 0, 0]
        assert c.as_array()[1, 2].tolist() == [255, 0, 0]

    @pytest.mark.parametrize("x,y", [(-1, 1), (4, 0), (0, 3), (0, -1)])
    def test_pixel_outside_raises(self, x, y):
        c = Canvas((4, 3))
        c.set_color((1.0, 1.0, 1.0))
        c.put_pixel(3, 0, 1.0)
        # (-1, 1) would otherwise alias the lit pixel at the end of row 0
        with pytest.raises(IndexError):
            c.pixel(x, y)


class TestPutPixel:

    def test_alpha_one_sets_exact_color(self, canvas):
        canvas.set_color((1.0, 0.5, 0.0))
        canvas.put_pixel(3, 4, 1.0)
        # 0.5*255 = 127.5 truncates to 127
        assert canvas.pixel(3, 4) == (255, 127, 0)

    def test_alpha_zero_leaves_pixel(self, canvas):
        canvas.set_color((0.2, 0.4, 0.6))
        canvas.put_pixel(3, 4, 1.0)
        before = canvas.pixel(3, 4)
        canvas.set_color((1.0, 1.0, 1.0))
        canvas.put_pixel(3, 4, 0.0)
        assert canvas.pixel(3, 4) == before

    def test_blending_truncates(self, canvas):
        canvas.set_color((1.0, 1.0, 1.0))
        canvas.put_pixel(0, 0, 0.5)
        assert canvas.pixel(0, 0) == (127, 127, 127)
        canvas.put_pixel(0, 0, 0.5)
        # 127*0.5 + 127.5 = 191
        assert canvas.pixel(0, 0) == (191, 191, 191)

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (20, 0), (0, 20), (-100, 500)])
    def test_out_of_bounds_is_ignored(self, canvas, x, y):
        canvas.set_color((1.0, 1.0, 1.0))
        canvas.put_pixel(x, y, 1.0)
        assert not canvas.data.any()


class TestPutSpan:

    def test_matches_put_pixel(self):
        a = Canvas((10, 4))
        b = Canvas((10, 4))
        for color, alpha in [((1.0, 0.3, 0.7), 0.7), ((0.1, 0.9, 0.5), 0.35), ((0.0, 0.0, 1.0), 1.0)]:
            a.set_color(color)
            b.set_color(color)
            a.put_span(2, 1, 8, alpha)
            for x in range(1, 8):
                b.put_pixel(x, 2, alpha)
        np.testing.assert_array_equal(a.data, b.data)

    def test_clipped_to_canvas(self):
        c = Canvas((5, 2))
        c.set_color((1.0, 1.0, 1.0))
        c.put_span(0, -5, 3, 1.0)
        c.put_span(1, 3, 50, 1.0)
        c.put_span(7, 0, 5, 1.0)
        arr = c.as_array()
        assert arr[0, :, 0].tolist() == [255, 255, 255, 0, 0]
        assert arr[1, :, 0].tolist() == [0, 0, 0, 255, 255]

    def test_empty_run(self):
        c = Canvas((5, 2))
        c.set_color((1.0, 1.0, 1.0))
        c.put_span(0, 3, 3, 1.0)
        c.put_span(0, 4, 2, 1.0)
        assert not c.data.any()
