# 4096 bytes of RAM: fonts at 0x000, program at 0x200.
#
# Addresses are checked, never wrapped or clamped. A well formed program
# never touches memory outside [0, 4096), so doing so is a fatal error.

from .config import FONTSET, MEMORY_SIZE, PROGRAM_START
from .errors import AddressError, ConfigurationError
from . import logs
from .logs import log


class Memory:

    def __init__(self, size=MEMORY_SIZE):
        self.size = size
        self.data = bytearray(size)

    @classmethod
    def from_file(cls, path):
        """Read a raw ROM from ``path`` and return memory with it loaded."""
        try:
            with open(path, "rb") as f:
                rom = f.read()
        except OSError as e:
            raise ConfigurationError(f"Error reading ROM {path}: {e}") from e
        log("Loading ROM:", path, f"({len(rom)} bytes)")
        memory = cls()
        memory.load(rom)
        if logs.logsOn and rom:
            log(memory.dump(PROGRAM_START, len(rom)))
        return memory

    def load(self, rom):
        """Burn in the fontset and copy ``rom`` to 0x200.

        Everything else is zeroed, so loading twice leaves no trace of the
        first program.
        """
        rom = bytes(rom)
        if PROGRAM_START + len(rom) > self.size:
            raise ConfigurationError(
                f"ROM too large: {len(rom)} bytes, at most {self.size - PROGRAM_START} fit")
        self.data[:] = bytes(self.size)
        self.data[:len(FONTSET)] = FONTSET
        self.data[PROGRAM_START:PROGRAM_START + len(rom)] = rom

    # ---- bounds ----
    def _check(self, addr, length=1):
        if addr < 0 or length < 0 or addr + length > self.size:
            raise AddressError(addr, length)

    # ---- access ----
    def read_byte(self, addr):
        self._check(addr)
        return self.data[addr]

    def read_word(self, addr):
        # big endian: high byte first
        self._check(addr, 2)
        return (self.data[addr] << 8) | self.data[addr + 1]

    def read_range(self, addr, length):
        self._check(addr, length)
        return bytes(self.data[addr:addr + length])

    def write(self, addr, values):
        values = bytes(values)
        self._check(addr, len(values))
        self.data[addr:addr + len(values)] = values

    def dump(self, start=0, length=None, width=16):
        """Hex dump of ``length`` bytes from ``start``, ``width`` per line."""
        if length is None:
            length = self.size - start
        chunk = self.read_range(start, length)
        lines = []
        for offset in range(0, len(chunk), width):
            row = chunk[offset:offset + width]
            lines.append(f"{start + offset:03X}: {row.hex(' ').upper()}")
        return "\n".join(lines)

    def __len__(self):
        return self.size
