# Opcode decoding.
#
# Each 16-bit word becomes an Instruction tagged with a mnemonic and
# carrying every operand field. Rows are tried top to bottom, first match
# wins, and anything left over is UNKNOWN.
#
#   nnn - lowest 12 bits (address)
#   n   - lowest 4 bits (sprite height)
#   x   - lower 4 bits of the high byte
#   y   - upper 4 bits of the low byte
#   kk  - lowest 8 bits (byte)

from dataclasses import dataclass

UNKNOWN = "UNKNOWN"

OPCODE_TABLE = (
    (0xFFFF, 0x00E0, "CLS"),       # 00E0 - clear the display
    (0xFFFF, 0x00EE, "RET"),       # 00EE - return from subroutine
    (0xF000, 0x1000, "JP"),        # 1nnn - jump to nnn
    (0xF000, 0x2000, "CALL"),      # 2nnn - call subroutine at nnn
    (0xF000, 0x3000, "SE_VX_KK"),  # 3xkk - skip if Vx == kk
    (0xF000, 0x4000, "SNE_VX_KK"), # 4xkk - skip if Vx != kk
    (0xF00F, 0x5000, "SE_VX_VY"),  # 5xy0 - skip if Vx == Vy
    (0xF000, 0x6000, "LD_VX_KK"),  # 6xkk - Vx = kk
    (0xF000, 0x7000, "ADD_VX_KK"), # 7xkk - Vx += kk, no carry
    (0xF00F, 0x8000, "LD_VX_VY"),  # 8xy0 - Vx = Vy
    (0xF00F, 0x8001, "OR"),
    (0xF00F, 0x8002, "AND"),
    (0xF00F, 0x8003, "XOR"),
    (0xF00F, 0x8004, "ADD_VX_VY"),
    (0xF00F, 0x8005, "SUB"),
    (0xF00F, 0x8006, "SHR"),
    (0xF00F, 0x8007, "SUBN"),
    (0xF00F, 0x800E, "SHL"),
    (0xF00F, 0x9000, "SNE_VX_VY"), # 9xy0 - skip if Vx != Vy
    (0xF000, 0xA000, "LD_I"),      # Annn - I = nnn
    (0xF000, 0xB000, "JP_V0"),
    (0xF000, 0xC000, "RND"),
    (0xF000, 0xD000, "DRW"),       # Dxyn - draw n byte sprite at (Vx, Vy)
    (0xF0FF, 0xE09E, "SKP"),
    (0xF0FF, 0xE0A1, "SKNP"),      # ExA1 - skip if key Vx is up
    (0xF0FF, 0xF007, "LD_VX_DT"),  # Fx07 - Vx = DT
    (0xF0FF, 0xF00A, "WAITKEY"),
    (0xF0FF, 0xF015, "LD_DT_VX"),  # Fx15 - DT = Vx
    (0xF0FF, 0xF018, "LD_ST_VX"),
    (0xF0FF, 0xF01E, "ADD_I_VX"),  # Fx1E - I += Vx
    (0xF0FF, 0xF029, "LD_F_VX"),   # Fx29 - I = glyph address of Vx
    (0xF0FF, 0xF033, "LD_B_VX"),   # Fx33 - BCD of Vx at I..I+2
    (0xF0FF, 0xF055, "STORE"),
    (0xF0FF, 0xF065, "LOAD"),      # Fx65 - V0..Vx = memory[I..]
)

# Recognised canonical opcodes this machine does not execute.
UNSUPPORTED = frozenset({
    "OR", "AND", "XOR", "ADD_VX_VY", "SUB", "SHR", "SUBN", "SHL",
    "JP_V0", "RND", "SKP", "WAITKEY", "LD_ST_VX", "STORE",
})

SUPPORTED = frozenset(m for _, _, m in OPCODE_TABLE) - UNSUPPORTED

# assembly operand layout per mnemonic
_SYNTAX = {
    "CLS": "CLS",
    "RET": "RET",
    "JP": "JP {nnn:#05x}",
    "CALL": "CALL {nnn:#05x}",
    "SE_VX_KK": "SE V{x:X}, {kk:#04x}",
    "SNE_VX_KK": "SNE V{x:X}, {kk:#04x}",
    "SE_VX_VY": "SE V{x:X}, V{y:X}",
    "LD_VX_KK": "LD V{x:X}, {kk:#04x}",
    "ADD_VX_KK": "ADD V{x:X}, {kk:#04x}",
    "LD_VX_VY": "LD V{x:X}, V{y:X}",
    "OR": "OR V{x:X}, V{y:X}",
    "AND": "AND V{x:X}, V{y:X}",
    "XOR": "XOR V{x:X}, V{y:X}",
    "ADD_VX_VY": "ADD V{x:X}, V{y:X}",
    "SUB": "SUB V{x:X}, V{y:X}",
    "SHR": "SHR V{x:X}",
    "SUBN": "SUBN V{x:X}, V{y:X}",
    "SHL": "SHL V{x:X}",
    "SNE_VX_VY": "SNE V{x:X}, V{y:X}",
    "LD_I": "LD I, {nnn:#05x}",
    "JP_V0": "JP V0, {nnn:#05x}",
    "RND": "RND V{x:X}, {kk:#04x}",
    "DRW": "DRW V{x:X}, V{y:X}, {n}",
    "SKP": "SKP V{x:X}",
    "SKNP": "SKNP V{x:X}",
    "LD_VX_DT": "LD V{x:X}, DT",
    "WAITKEY": "LD V{x:X}, K",
    "LD_DT_VX": "LD DT, V{x:X}",
    "LD_ST_VX": "LD ST, V{x:X}",
    "ADD_I_VX": "ADD I, V{x:X}",
    "LD_F_VX": "LD F, V{x:X}",
    "LD_B_VX": "LD B, V{x:X}",
    "STORE": "LD [I], V{x:X}",
    "LOAD": "LD V{x:X}, [I]",
    UNKNOWN: "??? {opcode:#06x}",
}


@dataclass(frozen=True)
class Instruction:
    mnemonic: str
    opcode: int
    x: int
    y: int
    n: int
    kk: int
    nnn: int

    @property
    def supported(self):
        return self.mnemonic in SUPPORTED

    @property
    def text(self):
        return _SYNTAX[self.mnemonic].format(
            x=self.x, y=self.y, n=self.n, kk=self.kk, nnn=self.nnn, opcode=self.opcode)

    def __str__(self):
        return self.text


def decode(opcode):
    """Decode a 16-bit word. Never raises; unmatched words are UNKNOWN."""
    opcode &= 0xFFFF
    mnemonic = UNKNOWN
    for mask, pattern, name in OPCODE_TABLE:
        if (opcode & mask) == pattern:
            mnemonic = name
            break
    return Instruction(
        mnemonic=mnemonic,
        opcode=opcode,
        x=(opcode >> 8) & 0xF,
        y=(opcode >> 4) & 0xF,
        n=opcode & 0xF,
        kk=opcode & 0xFF,
        nnn=opcode & 0x0FFF,
    )
