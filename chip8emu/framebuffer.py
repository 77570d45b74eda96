# 64x32 monochrome display.
#
# Sprites are 8 pixels wide, one byte per row with bit 7 on the left.
# They are XORed onto the screen and wrap around both edges.

import numpy as np

from .config import HEIGHT, WIDTH


class Framebuffer:

    def __init__(self, width=WIDTH, height=HEIGHT):
        self.width = width
        self.height = height
        # row major: vram[y, x]
        self.vram = np.zeros((height, width), dtype=np.uint8)
        self.dirty = True

    @property
    def pixels(self):
        view = self.vram.view()
        view.flags.writeable = False
        return view

    def get(self, x, y):
        return bool(self.vram[y % self.height, x % self.width])

    def clear(self):
        self.vram[:] = 0
        self.dirty = True

    def draw_sprite(self, x, y, rows):
        """XOR ``rows`` onto the screen at (x, y).

        Returns True if any lit pixel was turned off.
        """
        rows = np.frombuffer(bytes(rows), dtype=np.uint8)
        xs = (x + np.arange(8)) % self.width
        collision = False
        for i, bits in enumerate(np.unpackbits(rows).reshape(-1, 8)):
            line = self.vram[(y + i) % self.height, xs]
            if np.any(line & bits):
                collision = True
            self.vram[(y + i) % self.height, xs] = line ^ bits
        self.dirty = True
        return collision

    def to_rgba(self, scale=1):
        """Bottom-up RGBA image, ``scale`` window pixels per screen pixel."""
        small = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        # pyglet images start at the bottom row
        small[..., :3] = self.vram[::-1, :, None] * 255
        small[..., 3] = 255
        if scale != 1:
            return np.repeat(np.repeat(small, scale, axis=0), scale, axis=1)
        return small

    def __str__(self):
        return "\n".join("".join("#" if p else "." for p in row) for row in self.vram)
