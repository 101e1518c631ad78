"""CHIP-8 miscellaneous instructions (Fxxx)."""

from chip8core.state import EmulatorState, get_register, read_memory, set_register, write_memory
from chip8core.decode import DecodedInstruction
from chip8core.constants import FONT_START, FONT_GLYPH_SIZE
from chip8core.errors import InvalidOpcodeError


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return set_register(state, instruction.x, state.delay_timer)


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=get_register(state, instruction.x))


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=get_register(state, instruction.x))


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX1E - Add VX to I register. VF is not affected."""
    return state.replace(I=(state.I + get_register(state, instruction.x)) & 0xFFFF)


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX0A - Wait for key press.

    Only records the target register; ``step`` resolves the wait once a key
    is down.
    """
    return state.replace(key_wait=instruction.x)


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    font_address = FONT_START + get_register(state, instruction.x) * FONT_GLYPH_SIZE
    return state.replace(I=font_address)


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = get_register(state, instruction.x)
    digits = [value // 100, (value // 10) % 10, value % 10]
    return write_memory(state, state.I, digits)


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I. I is unchanged."""
    return write_memory(state, state.I, state.V[:instruction.x + 1])


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I. I is unchanged."""
    values = read_memory(state, state.I, instruction.x + 1)
    return state.replace(V=state.V.at[:instruction.x + 1].set(values))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch misc instructions on the low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn)
    if handler is None:
        raise InvalidOpcodeError(instruction.raw)
    return handler(state, instruction)
