# Machine constants and runtime configuration for the emulator.
#
# Screen is 64x32, memory is 4096 bytes, programs start at 0x200 and the
# call stack holds 16 return addresses. Fonts live at 0x000-0x04F.

import argparse
from dataclasses import dataclass

from .errors import ConfigurationError


# ---- Machine ----
WIDTH, HEIGHT = 64, 32
MEMORY_SIZE = 4096
PROGRAM_START = 0x200
STACK_DEPTH = 16
FONT_BYTES_PER_GLYPH = 5

# ---- Host ----
SCALE = 10
CPU_HZ = 60
TIMER_HZ = 60

# Standard CHIP-8 fontset (80 bytes)
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])


class _ArgumentParser(argparse.ArgumentParser):
    # argparse exits on its own; we want a ConfigurationError instead
    def error(self, message):
        raise ConfigurationError(message)


@dataclass
class Config:
    """Options for one emulator run.

    Attributes:
        rom_path: Path of the raw binary program to load at 0x200
        scale: Window pixels per CHIP-8 pixel
        cpu_hz: Instructions executed per second
        timer_hz: Delay timer decrements per second
        logs_on: Start with instruction tracing enabled
    """
    rom_path: str
    scale: int = SCALE
    cpu_hz: int = CPU_HZ
    timer_hz: int = TIMER_HZ
    logs_on: bool = False

    def __post_init__(self):
        for name in ("scale", "cpu_hz", "timer_hz"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_argv(cls, argv):
        parser = _ArgumentParser(
            prog="chip8emu",
            description="CHIP-8 Emulator",
        )
        parser.add_argument("rom", help="Path to a raw CHIP-8 ROM file")
        parser.add_argument("--scale", type=int, default=SCALE,
                            help=f"Window pixels per CHIP-8 pixel. Default: {SCALE}")
        parser.add_argument("--cpu-hz", type=int, default=CPU_HZ,
                            help=f"Instructions per second. Default: {CPU_HZ}")
        parser.add_argument("--timer-hz", type=int, default=TIMER_HZ,
                            help=f"Delay timer rate. Default: {TIMER_HZ}")
        parser.add_argument("--verbose", "-v", action="store_true",
                            help="Log every executed instruction (toggle with F1)")
        args = parser.parse_args(argv)
        return cls(
            rom_path=args.rom,
            scale=args.scale,
            cpu_hz=args.cpu_hz,
            timer_hz=args.timer_hz,
            logs_on=args.verbose,
        )
