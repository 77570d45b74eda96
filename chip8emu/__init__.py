"""chip8emu: a CHIP-8 interpreter with a pyglet front end.

Modules:
    config: machine constants, fontset and run options
    memory: 4096 byte address space
    framebuffer: 64x32 XOR sprite display
    keypad: 16 key hex keypad and host key layout
    decode: opcode word -> tagged Instruction
    cpu: registers and the fetch/decode/execute cycle
    window: pyglet window that paces the CPU and draws the screen
"""

__version__ = "0.1.0"

from .cpu import CPU
from .decode import Instruction, decode
from .errors import (
    AddressError,
    Chip8Error,
    ConfigurationError,
    ExecutionError,
    InvalidOpcodeError,
    StackError,
    StackOverflowError,
    StackUnderflowError,
    UnsupportedOpcodeError,
)
from .framebuffer import Framebuffer
from .keypad import Keypad
from .memory import Memory

__all__ = [
    "CPU", "Memory", "Framebuffer", "Keypad", "Instruction", "decode",
    "Chip8Error", "ConfigurationError", "AddressError", "ExecutionError",
    "InvalidOpcodeError", "UnsupportedOpcodeError", "StackError",
    "StackOverflowError", "StackUnderflowError",
]
