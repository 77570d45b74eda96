# 16 key hex keypad.
#
#   CHIP-8        Keyboard
#   1 2 3 C       1 2 3 4
#   4 5 6 D       Q W E R
#   7 8 9 E       A S D F
#   A 0 B F       Z X C V

import numpy as np

# host key name for each logical key 0x0..0xF
KEY_LAYOUT = (
    "X", "1", "2", "3",
    "Q", "W", "E", "A",
    "S", "D", "Z", "C",
    "4", "R", "F", "V",
)


def host_keymap(key_module):
    """Map host key symbols to logical keys.

    ``key_module`` is something like ``pyglet.window.key``, where digit keys
    are spelled ``_1``, ``_2`` and so on.
    """
    keymap = {}
    for logical, name in enumerate(KEY_LAYOUT):
        attr = "_" + name if name.isdigit() else name
        keymap[getattr(key_module, attr)] = logical
    return keymap


class Keypad:

    def __init__(self):
        self.keys = np.zeros(16, dtype=np.uint8)

    def _check(self, k):
        if not 0 <= k < len(self.keys):
            raise ValueError(f"No such key: {k}")

    def press(self, k):
        self._check(k)
        self.keys[k] = 1

    def release(self, k):
        self._check(k)
        self.keys[k] = 0

    def is_down(self, k):
        self._check(k)
        return bool(self.keys[k])

    def reset(self):
        self.keys[:] = 0
