# CHIP-8 CPU - Cowgod's technical reference
# http://devernay.free.fr/hacks/chip8/C8TECH10.HTM
#
# The CPU owns memory and the framebuffer and reads a keypad. One call to
# step() fetches, decodes and executes exactly one instruction. The delay
# timer is not touched by step(); the host calls tick_timers() at 60Hz of
# wall clock time.

import numpy as np

from .config import FONT_BYTES_PER_GLYPH, PROGRAM_START, STACK_DEPTH
from .decode import SUPPORTED, UNSUPPORTED, decode
from .errors import (
    ExecutionError,
    InvalidOpcodeError,
    StackOverflowError,
    StackUnderflowError,
    UnsupportedOpcodeError,
)
from .framebuffer import Framebuffer
from .keypad import Keypad
from . import logs
from .logs import log
from .memory import Memory


class CPU:
    """Registers, call stack and delay timer plus the fetch/decode/execute loop.

    Attributes:
        V: 16 general purpose 8-bit registers, VF doubles as a flag
        I: 16-bit address register
        pc: Program counter, starts at 0x200
        sp: Number of return addresses on the stack
        stack: 16 return addresses
        delay: Delay timer
        memory: Memory holding fonts and the program
        framebuffer: 64x32 display
        keypad: Key states read by SKNP
    """

    def __init__(self, memory, framebuffer=None, keypad=None):
        self.memory = memory
        self.framebuffer = framebuffer if framebuffer is not None else Framebuffer()
        self.keypad = keypad if keypad is not None else Keypad()

        # ---- CPU state ----
        self.V = [0] * 16
        self.I = 0
        self.pc = PROGRAM_START
        self.stack = np.zeros(STACK_DEPTH, dtype=np.uint16)
        self.sp = 0
        self.delay = 0
        self.cycle_count = 0

        # address of the instruction being executed
        self.current_pc = PROGRAM_START

        self.setup_funcmap()

    @classmethod
    def from_rom(cls, path, keypad=None):
        return cls(Memory.from_file(path), keypad=keypad)

    # ---- Opcode function map ----
    def setup_funcmap(self):
        self.funcmap = {
            "CLS": self.op_CLS,
            "RET": self.op_RET,
            "JP": self.op_JP,
            "CALL": self.op_CALL,
            "SE_VX_KK": self.op_SE_Vx_kk,
            "SNE_VX_KK": self.op_SNE_Vx_kk,
            "SE_VX_VY": self.op_SE_Vx_Vy,
            "LD_VX_KK": self.op_LD_Vx_kk,
            "ADD_VX_KK": self.op_ADD_Vx_kk,
            "LD_VX_VY": self.op_LD_Vx_Vy,
            "SNE_VX_VY": self.op_SNE_Vx_Vy,
            "LD_I": self.op_LD_I,
            "DRW": self.op_DRW,
            "SKNP": self.op_SKNP,
            "LD_VX_DT": self.op_LD_Vx_DT,
            "LD_DT_VX": self.op_LD_DT_Vx,
            "ADD_I_VX": self.op_ADD_I_Vx,
            "LD_F_VX": self.op_LD_F_Vx,
            "LD_B_VX": self.op_LD_B_Vx,
            "LOAD": self.op_LOAD,
        }
        missing = SUPPORTED - set(self.funcmap)
        if missing:
            raise RuntimeError(f"No handler for {sorted(missing)}")

    # ---- Cycle ----
    def step(self):
        """Execute one instruction and return it."""
        self.current_pc = self.pc
        opcode = self.memory.read_word(self.pc)
        self.pc += 2

        ins = decode(opcode)
        if logs.logsOn:
            log(f"{self.current_pc:03X}: {opcode:04X}  {ins}")

        handler = self.funcmap.get(ins.mnemonic)
        if handler is None:
            if ins.mnemonic in UNSUPPORTED:
                raise UnsupportedOpcodeError(self.current_pc, opcode, ins.mnemonic)
            raise InvalidOpcodeError(self.current_pc, opcode)
        handler(ins)

        self.cycle_count += 1
        if logs.logsOn:
            log(self.dump_registers())
        return ins

    def run(self, cycles):
        for _ in range(cycles):
            self.step()

    # ---- timers ----
    def tick_timers(self):
        if self.delay > 0:
            self.delay -= 1

    def skip(self):
        self.pc += 2

    # ---- Opcode handlers ----
    def op_CLS(self, ins):
        self.framebuffer.clear()
        log("Clear the display")

    def op_RET(self, ins):
        if self.sp == 0:
            raise StackUnderflowError(self.current_pc, ins.opcode)
        self.sp -= 1
        self.pc = int(self.stack[self.sp])
        log("Return to", hex(self.pc))

    def op_JP(self, ins):
        self.pc = ins.nnn

    def op_CALL(self, ins):
        if self.sp >= STACK_DEPTH:
            raise StackOverflowError(self.current_pc, ins.opcode)
        # pc already points past the CALL
        self.stack[self.sp] = self.pc
        self.sp += 1
        self.pc = ins.nnn
        log("Call subroutine at", hex(ins.nnn))

    def op_SE_Vx_kk(self, ins):
        if self.V[ins.x] == ins.kk:
            self.skip()

    def op_SNE_Vx_kk(self, ins):
        if self.V[ins.x] != ins.kk:
            self.skip()

    def op_SE_Vx_Vy(self, ins):
        if self.V[ins.x] == self.V[ins.y]:
            self.skip()

    def op_LD_Vx_kk(self, ins):
        self.V[ins.x] = ins.kk

    def op_ADD_Vx_kk(self, ins):
        # no carry flag for the immediate add
        self.V[ins.x] = (self.V[ins.x] + ins.kk) & 0xFF

    def op_LD_Vx_Vy(self, ins):
        self.V[ins.x] = self.V[ins.y]

    def op_SNE_Vx_Vy(self, ins):
        if self.V[ins.x] != self.V[ins.y]:
            self.skip()

    def op_LD_I(self, ins):
        self.I = ins.nnn

    def op_DRW(self, ins):
        rows = self.memory.read_range(self.I, ins.n)
        collision = self.framebuffer.draw_sprite(self.V[ins.x], self.V[ins.y], rows)
        self.V[0xF] = 1 if collision else 0
        log(f"Drew sprite, collision={self.V[0xF]}")

    def op_SKNP(self, ins):
        k = self.V[ins.x]
        if k > 0xF:
            raise ExecutionError(f"No such key {k}", self.current_pc, ins.opcode)
        if not self.keypad.is_down(k):
            self.skip()

    def op_LD_Vx_DT(self, ins):
        self.V[ins.x] = self.delay

    def op_LD_DT_Vx(self, ins):
        self.delay = self.V[ins.x]

    def op_ADD_I_Vx(self, ins):
        # no overflow flag
        self.I = (self.I + self.V[ins.x]) & 0xFFFF

    def op_LD_F_Vx(self, ins):
        self.I = self.V[ins.x] * FONT_BYTES_PER_GLYPH

    def op_LD_B_Vx(self, ins):
        v = self.V[ins.x]
        self.memory.write(self.I, [v // 100, (v // 10) % 10, v % 10])

    def op_LOAD(self, ins):
        values = self.memory.read_range(self.I, ins.x + 1)
        self.V[:ins.x + 1] = list(values)

    # ---- debug ----
    def dump_registers(self):
        regs = " ".join(f"V{i:X}={v:02X}" for i, v in enumerate(self.V))
        return (f"{regs} I={self.I:03X} PC={self.pc:03X} "
                f"SP={self.sp} DT={self.delay}")

    def __str__(self):
        return self.dump_registers()

