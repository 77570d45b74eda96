# pyglet front end: window, keyboard, and the clock that drives the CPU.
#
# The CPU runs at cpu_hz and the delay timer at timer_hz, each on its own
# pyglet clock schedule. The screen is redrawn only when the framebuffer
# changed.

import sys

import pyglet
from pyglet.window import key

from . import logs
from .errors import Chip8Error
from .keypad import host_keymap
from .logs import log, toggle_logs

keymap = host_keymap(key)


class Chip8Window(pyglet.window.Window):

    def __init__(self, cpu, config):
        self.pixel_scale = config.scale
        fb = cpu.framebuffer
        super().__init__(
            width=fb.width * self.pixel_scale,
            height=fb.height * self.pixel_scale,
            caption="CHIP-8 Emulator - ESC to exit",
            resizable=False,
            vsync=False,
        )
        self.cpu = cpu
        self.failed = False

        self.image = pyglet.image.ImageData(
            self.width,
            self.height,
            'RGBA',
            fb.to_rgba(self.pixel_scale).tobytes()
        )

        # Schedule CPU and timer ticks
        pyglet.clock.schedule_interval(self._cpu_tick, 1.0 / config.cpu_hz)
        pyglet.clock.schedule_interval(self._timer_tick, 1.0 / config.timer_hz)

    # ---- CPU cycle ----
    def _cpu_tick(self, dt):
        try:
            self.cpu.step()
        except Chip8Error as e:
            self.halt(e)

    # ---- timers ----
    def _timer_tick(self, dt):
        self.cpu.tick_timers()

    def halt(self, error):
        # last frame stays on screen until the window is closed
        print("Emulation error:", error, file=sys.stderr)
        self.failed = True
        if logs.logsOn:
            log(self.cpu.dump_registers())
            memory = self.cpu.memory
            start = max(0, min(self.cpu.current_pc & ~0xF, memory.size - 32))
            log(memory.dump(start, 32))
        pyglet.clock.unschedule(self._cpu_tick)
        pyglet.clock.unschedule(self._timer_tick)
        self.set_caption("CHIP-8 Emulator - halted")

    def on_close(self):
        pyglet.clock.unschedule(self._cpu_tick)
        pyglet.clock.unschedule(self._timer_tick)
        super().on_close()

    # ---- Drawing ----
    def on_draw(self):
        fb = self.cpu.framebuffer
        if fb.dirty:
            # updates existing image without creating new object
            self.image.set_data('RGBA', self.width * 4, fb.to_rgba(self.pixel_scale).tobytes())
            fb.dirty = False
        self.clear()
        self.image.blit(0, 0)

    # ---- Input ----
    def on_key_press(self, symbol, modifiers):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol == key.F1:
            toggle_logs()
        elif symbol in keymap:
            self.cpu.keypad.press(keymap[symbol])
            log("Key down:", hex(keymap[symbol]))

    def on_key_release(self, symbol, modifiers):
        if symbol in keymap:
            self.cpu.keypad.release(keymap[symbol])

    def on_deactivate(self):
        # key releases are not delivered without focus
        self.cpu.keypad.reset()


def run(cpu, config):
    """Open the window for ``cpu`` and block until it is closed.

    Returns True if emulation stopped on an error.
    """
    window = Chip8Window(cpu, config)
    pyglet.app.run()
    return window.failed
