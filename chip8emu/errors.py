# Every failure stops the run. Nothing here is retried.


class Chip8Error(Exception):
    pass


class ConfigurationError(Chip8Error):
    """ROM missing/unreadable or bad command line."""


class AddressError(Chip8Error):
    """Memory access outside [0, 4096)."""

    def __init__(self, address, length=1):
        self.address = address
        self.length = length
        if length == 1:
            msg = f"Address out of bounds: 0x{address:X}"
        else:
            msg = f"Address range out of bounds: 0x{address:X} (+{length})"
        super().__init__(msg)


class ExecutionError(Chip8Error):
    """Fatal error while executing the instruction at ``pc``."""

    def __init__(self, message, pc, opcode):
        self.pc = pc
        self.opcode = opcode
        super().__init__(f"{message} at PC=0x{pc:03X} (opcode 0x{opcode:04X})")


class InvalidOpcodeError(ExecutionError):
    def __init__(self, pc, opcode, message="Unknown opcode"):
        super().__init__(message, pc, opcode)


class UnsupportedOpcodeError(InvalidOpcodeError):
    def __init__(self, pc, opcode, mnemonic):
        self.mnemonic = mnemonic
        super().__init__(pc, opcode, f"Unsupported opcode {mnemonic}")


class StackError(ExecutionError):
    pass


class StackOverflowError(StackError):
    def __init__(self, pc, opcode):
        super().__init__("Stack overflow on CALL", pc, opcode)


class StackUnderflowError(StackError):
    def __init__(self, pc, opcode):
        super().__init__("Stack underflow on RET", pc, opcode)
