"""Command line entry point.

Usage:
    chip8emu roms/pong.ch8
    chip8emu roms/pong.ch8 --cpu-hz 500 --scale 12 --verbose
"""

import sys

from .config import Config
from .cpu import CPU
from .errors import ConfigurationError
from .keypad import Keypad
from .logs import set_logs


def main(argv=None):
    try:
        config = Config.from_argv(sys.argv[1:] if argv is None else argv)
    except ConfigurationError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return 1

    set_logs(config.logs_on)

    try:
        cpu = CPU.from_rom(config.rom_path, keypad=Keypad())
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # pyglet needs a display as soon as it is imported
    from .window import run

    failed = run(cpu, config)
    return 1 if failed else 0
