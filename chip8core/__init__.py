"""CHIP-8 emulator package."""

from chip8core.state import EmulatorState, StackState, create_state, reset
from chip8core.emulator import execute, fetch, step, load_program, load_rom
from chip8core.decode import DecodedInstruction, decode, disassemble
from chip8core.timers import tick, sound_state
from chip8core.keypad import set_keys, press_key, release_key, clear_keys, is_waiting_for_key
from chip8core.errors import (
    EmulatorError,
    InvalidOpcodeError,
    UnsupportedNativeCallError,
    StackOverflowError,
    StackUnderflowError,
    AddressOutOfBoundsError,
)
from chip8core.constants import *
from chip8core.rendering import display_to_rgb, create_color_scheme, consume_frame
from chip8core.runner import run_frame, run_frames

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "reset",
    "fetch",
    "execute",
    "step",
    "load_program",
    "load_rom",
    "DecodedInstruction",
    "decode",
    "disassemble",
    "tick",
    "sound_state",
    "set_keys",
    "press_key",
    "release_key",
    "clear_keys",
    "is_waiting_for_key",
    "EmulatorError",
    "InvalidOpcodeError",
    "UnsupportedNativeCallError",
    "StackOverflowError",
    "StackUnderflowError",
    "AddressOutOfBoundsError",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "display_to_rgb",
    "create_color_scheme",
    "consume_frame",
    "run_frame",
    "run_frames",
]
