import pytest

from chip8emu.cpu import CPU
from chip8emu.keypad import Keypad
from chip8emu.logs import set_logs
from chip8emu.memory import Memory


def assemble(*words):
    return b"".join(w.to_bytes(2, "big") for w in words)


@pytest.fixture
def make_cpu():
    """Build a CPU with ``words`` loaded at 0x200."""
    def _make(*words, keypad=None):
        memory = Memory()
        memory.load(assemble(*words))
        return CPU(memory, keypad=keypad or Keypad())
    return _make


@pytest.fixture(autouse=True)
def logs_off():
    yield
    set_logs(False)
