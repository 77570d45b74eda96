"""Tests for opcode decoding."""

from dataclasses import FrozenInstanceError

import pytest

from chip8emu.decode import OPCODE_TABLE, SUPPORTED, UNKNOWN, UNSUPPORTED, decode


class TestDecodeFields:

    def test_operand_fields(self):
        ins = decode(0xD125)
        assert ins.mnemonic == "DRW"
        assert (ins.x, ins.y, ins.n) == (1, 2, 5)
        assert ins.kk == 0x25
        assert ins.nnn == 0x125
        assert ins.opcode == 0xD125

    def test_instruction_is_frozen(self):
        ins = decode(0x6012)
        with pytest.raises(FrozenInstanceError):
            ins.x = 3


class TestDecodeMnemonics:

    @pytest.mark.parametrize("opcode, mnemonic", [
        (0x00E0, "CLS"),
        (0x00EE, "RET"),
        (0x1234, "JP"),
        (0x2300, "CALL"),
        (0x3A05, "SE_VX_KK"),
        (0x4A05, "SNE_VX_KK"),
        (0x5120, "SE_VX_VY"),
        (0x6012, "LD_VX_KK"),
        (0x7003, "ADD_VX_KK"),
        (0x8120, "LD_VX_VY"),
        (0x9120, "SNE_VX_VY"),
        (0xA123, "LD_I"),
        (0xD015, "DRW"),
        (0xE3A1, "SKNP"),
        (0xF307, "LD_VX_DT"),
        (0xF315, "LD_DT_VX"),
        (0xF31E, "ADD_I_VX"),
        (0xF329, "LD_F_VX"),
        (0xF333, "LD_B_VX"),
        (0xF365, "LOAD"),
    ])
    def test_supported(self, opcode, mnemonic):
        ins = decode(opcode)
        assert ins.mnemonic == mnemonic
        assert ins.supported is True

    @pytest.mark.parametrize("opcode, mnemonic", [
        (0x8121, "OR"),
        (0x8122, "AND"),
        (0x8123, "XOR"),
        (0x8124, "ADD_VX_VY"),
        (0x8125, "SUB"),
        (0x8126, "SHR"),
        (0x8127, "SUBN"),
        (0x812E, "SHL"),
        (0xB200, "JP_V0"),
        (0xC1FF, "RND"),
        (0xE19E, "SKP"),
        (0xF10A, "WAITKEY"),
        (0xF118, "LD_ST_VX"),
        (0xF155, "STORE"),
    ])
    def test_recognised_but_unsupported(self, opcode, mnemonic):
        ins = decode(opcode)
        assert ins.mnemonic == mnemonic
        assert ins.supported is False

    @pytest.mark.parametrize("opcode", [0x0000, 0x0123, 0x5121, 0x9121, 0x8128, 0xE1FF, 0xF1FF])
    def test_unknown(self, opcode):
        assert decode(opcode).mnemonic == UNKNOWN

    def test_tables_partition(self):
        names = {m for _, _, m in OPCODE_TABLE}
        assert SUPPORTED | UNSUPPORTED == names
        assert not SUPPORTED & UNSUPPORTED
        assert len(SUPPORTED) == 20


class TestInstructionText:

    @pytest.mark.parametrize("opcode, text", [
        (0x6012, "LD V0, 0x12"),
        (0x2300, "CALL 0x300"),
        (0xD125, "DRW V1, V2, 5"),
        (0xF365, "LD V3, [I]"),
        (0x00EE, "RET"),
        (0x5121, "??? 0x5121"),
    ])
    def test_text(self, opcode, text):
        assert str(decode(opcode)) == text
