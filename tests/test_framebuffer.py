"""Tests for the framebuffer and sprite drawing."""

import numpy as np
import pytest

from chip8emu.framebuffer import Framebuffer


@pytest.fixture
def fb():
    return Framebuffer()


class TestClear:

    def test_initially_off(self, fb):
        assert fb.pixels.shape == (32, 64)
        assert np.count_nonzero(fb.pixels) == 0

    def test_clear_turns_everything_off(self, fb):
        fb.draw_sprite(10, 10, b"\xFF\xFF\xFF")
        fb.clear()
        assert np.count_nonzero(fb.pixels) == 0
        assert fb.dirty is True


class TestDrawSprite:

    def test_bit_seven_is_leftmost(self, fb):
        fb.draw_sprite(0, 0, b"\x80")
        assert fb.get(0, 0) is True
        assert np.count_nonzero(fb.pixels) == 1

    def test_rows_go_down(self, fb):
        fb.draw_sprite(5, 3, b"\x01\x01")
        assert fb.get(12, 3) and fb.get(12, 4)
        assert np.count_nonzero(fb.pixels) == 2

    def test_xor_self_cancels(self, fb):
        """Same sprite twice: all off again, collision on the second draw."""
        assert fb.draw_sprite(8, 8, b"\xFF") is False
        assert np.count_nonzero(fb.pixels) == 8
        assert fb.draw_sprite(8, 8, b"\xFF") is True
        assert np.count_nonzero(fb.pixels) == 0

    def test_disjoint_bits_do_not_collide(self, fb):
        fb.draw_sprite(0, 0, b"\xF0")
        assert fb.draw_sprite(0, 0, b"\x0F") is False
        assert np.count_nonzero(fb.pixels) == 8

    def test_single_overlap_collides(self, fb):
        fb.draw_sprite(0, 0, b"\x01")
        assert fb.draw_sprite(7, 0, b"\x80") is True
        assert fb.get(7, 0) is False

    def test_wraps_at_bottom_right(self, fb):
        """x=60,y=30, four rows: columns and rows wrap around."""
        fb.draw_sprite(60, 30, b"\xFF" * 4)
        lit = {(x, y) for y, x in zip(*np.nonzero(fb.pixels))}
        expected = {(x, y) for x in (60, 61, 62, 63, 0, 1, 2, 3) for y in (30, 31, 0, 1)}
        assert lit == expected

    def test_coordinates_past_screen_wrap(self, fb):
        fb.draw_sprite(64 + 2, 32 + 1, b"\x80")
        assert fb.get(2, 1) is True

    def test_empty_sprite(self, fb):
        assert fb.draw_sprite(0, 0, b"") is False
        assert np.count_nonzero(fb.pixels) == 0

    def test_pixels_read_only(self, fb):
        with pytest.raises(ValueError):
            fb.pixels[0, 0] = 1


class TestRgba:

    def test_scaled_shape(self, fb):
        assert fb.to_rgba(3).shape == (32 * 3, 64 * 3, 4)

    def test_bottom_up(self, fb):
        """Top left pixel ends up in the last image row."""
        fb.draw_sprite(0, 0, b"\x80")
        img = fb.to_rgba()
        assert list(img[-1, 0]) == [255, 255, 255, 255]
        assert list(img[0, 0]) == [0, 0, 0, 255]

    def test_str(self, fb):
        fb.draw_sprite(0, 0, b"\xC0")
        assert str(fb).splitlines()[0].startswith("##.")
