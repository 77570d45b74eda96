"""Tests for the keypad."""

from types import SimpleNamespace

import pytest

from chip8emu.keypad import KEY_LAYOUT, Keypad, host_keymap


class TestKeypad:

    def test_press_release(self):
        keypad = Keypad()
        assert keypad.is_down(5) is False
        keypad.press(5)
        assert keypad.is_down(5) is True
        keypad.release(5)
        assert keypad.is_down(5) is False

    def test_reset(self):
        keypad = Keypad()
        keypad.press(0)
        keypad.press(0xF)
        keypad.reset()
        assert not any(keypad.is_down(k) for k in range(16))

    @pytest.mark.parametrize("k", [-1, 16, 255])
    def test_no_such_key(self, k):
        with pytest.raises(ValueError):
            Keypad().is_down(k)


class TestHostKeymap:

    def test_layout(self):
        assert len(KEY_LAYOUT) == 16
        assert KEY_LAYOUT[0x0] == "X"
        assert KEY_LAYOUT[0xC] == "4"
        assert KEY_LAYOUT[0xF] == "V"

    def test_keymap_from_key_module(self):
        """Digit keys use the underscore names pyglet gives them."""
        names = ["_" + n if n.isdigit() else n for n in KEY_LAYOUT]
        fake = SimpleNamespace(**{n: "sym" + n for n in names})
        keymap = host_keymap(fake)
        assert keymap["symX"] == 0x0
        assert keymap["sym_1"] == 0x1
        assert keymap["sym_4"] == 0xC
        assert keymap["symR"] == 0xD
        assert sorted(keymap.values()) == list(range(16))
