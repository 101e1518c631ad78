"""Main CHIP-8 emulator execution engine."""

import os

from chip8core.state import EmulatorState, check_memory_range, set_register, write_memory
from chip8core.decode import decode, disassemble
from chip8core.constants import MAX_PROGRAM_SIZE, PROGRAM_START
from chip8core.errors import AddressOutOfBoundsError, EmulatorError
from chip8core.keypad import first_pressed_key
from chip8core.logging import get_logger
from chip8core.instructions.system import execute_system_instruction
from chip8core.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key
)
from chip8core.instructions.alu import execute_alu_operation
from chip8core.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8core.instructions.display import execute_display
from chip8core.instructions.misc import execute_misc_instruction

logger = get_logger("chip8.cpu")

# Indexed by the first nibble of the instruction word
OPCODE_HANDLERS = (
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
)


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction."""
    decoded_instruction = decode(instruction)
    return OPCODE_HANDLERS[decoded_instruction.opcode](state, decoded_instruction)


def _pack_u16(high: int, low: int) -> int:
    """Pack two bytes into a big-endian instruction word."""
    return (high << 8) | low


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction from memory and advance PC."""
    check_memory_range(state.pc, 2)
    high, low = (int(byte) for byte in state.memory[state.pc:state.pc + 2])
    return state.replace(pc=state.pc + 2), _pack_u16(high, low)


def step(state: EmulatorState) -> EmulatorState:
    """Advance the machine by one instruction, or poll a pending key wait.

    While an FX0A wait is pending no instruction is fetched: the lowest
    pressed key is stored in the target register and the wait ends, or,
    with no key down, the state is returned unchanged.
    """
    if state.key_wait is not None:
        key = first_pressed_key(state)
        if key is None:
            return state
        logger.debug(f"Key 0x{key:X} resolved wait into V{state.key_wait:X}")
        return set_register(state, state.key_wait, key).replace(key_wait=None)

    address = state.pc
    try:
        state, instruction = fetch(state)
        if logger.is_enabled_for("TRACE"):
            logger.trace(f"0x{address:03X}: {instruction:04X}  {disassemble(instruction)}")
        return execute(state, instruction)
    except EmulatorError as error:
        if error.address is None:
            error.address = address
        raise


def load_program(state: EmulatorState, data: bytes) -> EmulatorState:
    """Copy a raw program image into memory starting at 0x200."""
    if len(data) > MAX_PROGRAM_SIZE:
        raise AddressOutOfBoundsError(PROGRAM_START, len(data))
    return write_memory(state, PROGRAM_START, list(data))


def load_rom(state: EmulatorState, filename: str | os.PathLike) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    logger.info(f"Loaded {len(rom_data)} bytes from {filename}")
    return load_program(state, rom_data)
