"""Fatal emulator faults.

Every fault aborts the current ``step`` and leaves the state that was passed
in untouched, so the caller decides whether to stop, reset or reload.
"""

from typing import Optional


class EmulatorError(Exception):
    """Base class for all engine faults."""

    def __init__(self, message: str, address: Optional[int] = None):
        super().__init__(message)
        self.message = message
        # Address of the instruction being executed, filled in by ``step``.
        self.address = address

    def __str__(self) -> str:
        if self.address is None:
            return self.message
        return f"{self.message} (at 0x{self.address:03X})"


class InvalidOpcodeError(EmulatorError):
    """Instruction word matches no known pattern."""

    def __init__(self, instruction: int, address: Optional[int] = None):
        self.instruction = instruction
        super().__init__(f"Invalid opcode 0x{instruction:04X}", address)


class UnsupportedNativeCallError(EmulatorError):
    """0NNN machine code routine call, which is not emulated."""

    def __init__(self, instruction: int, address: Optional[int] = None):
        self.instruction = instruction
        super().__init__(
            f"Unsupported native call 0x{instruction:04X} to 0x{instruction & 0xFFF:03X}", address
        )


class StackOverflowError(EmulatorError):
    """Subroutine call with every stack slot in use."""

    def __init__(self, depth: int, address: Optional[int] = None):
        self.depth = depth
        super().__init__(f"Stack overflow: call depth exceeds {depth}", address)


class StackUnderflowError(EmulatorError):
    """Return with an empty stack."""

    def __init__(self, address: Optional[int] = None):
        super().__init__("Stack underflow: return with empty stack", address)


class AddressOutOfBoundsError(EmulatorError):
    """Memory access outside 0x000-0xFFF."""

    def __init__(self, start: int, length: int = 1, address: Optional[int] = None):
        self.start = start
        self.length = length
        super().__init__(
            f"Memory access out of bounds: 0x{start:X} (+{length} bytes)", address
        )
