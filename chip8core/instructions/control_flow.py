"""CHIP-8 control flow instructions."""

from chip8core.state import EmulatorState, get_register
from chip8core.decode import DecodedInstruction
from chip8core.errors import InvalidOpcodeError
from chip8core.stack import push


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=instruction.nnn)


def execute_call(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, state.pc))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn, register_form: bool = False):
    """Factory for skip instructions.

    Register-compare forms (5XY0, 9XY0) only exist with a zero low nibble.
    """
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
        if register_form and instruction.n != 0:
            raise InvalidOpcodeError(instruction.raw)
        if condition_fn(state, instruction):
            return state.replace(pc=state.pc + 2)
        return state
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) == get_register(state, inst.y),
    register_form=True,
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: get_register(state, inst.x) != get_register(state, inst.y),
    register_form=True,
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """BNNN - Jump to address NNN + V0.

    The target is not wrapped; a jump past the end of memory faults on the
    next fetch.
    """
    return state.replace(pc=instruction.nnn + get_register(state, 0))


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    if instruction.nn not in (0x9E, 0xA1):
        raise InvalidOpcodeError(instruction.raw)

    key_index = get_register(state, instruction.x) & 0xF
    key_pressed = bool(state.keypad[key_index])
    is_not_instruction = instruction.nn == 0xA1

    if key_pressed ^ is_not_instruction:
        return state.replace(pc=state.pc + 2)
    return state
