"""CHIP-8 emulator state structures."""

from typing import Optional, Sequence

import jax
import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode, field

from chip8core.constants import (
    FONT_DATA,
    FONT_START,
    MEMORY_SIZE,
    NUM_KEYS,
    NUM_REGISTERS,
    PROGRAM_START,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STACK_SIZE,
)
from chip8core.errors import AddressOutOfBoundsError


@dataclass
class StackState:
    """Return-address stack for subroutine calls.

    ``pointer`` is the number of occupied slots: 0 for an empty stack,
    ``STACK_SIZE`` for a full one.
    """
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    Scalar registers are plain Python ints so the engine can range-check
    them before touching memory. ``key_wait`` is ``None`` while running and
    holds the target register index while an FX0A wait is pending.
    """
    rng: jax.Array
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: int = PROGRAM_START
    display: jnp.ndarray = field(
        default_factory=lambda: jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_)
    )
    display_dirty: bool = False
    stack: StackState = field(default_factory=StackState)
    delay_timer: int = 0
    sound_timer: int = 0
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_KEYS, dtype=jnp.bool_))
    key_wait: Optional[int] = None
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: int = 0


def create_state(rng: jax.Array = jax.random.PRNGKey(0)) -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    state = EmulatorState(rng)
    font = jnp.array(FONT_DATA, dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(font))


def reset(state: EmulatorState) -> EmulatorState:
    """Return a powered-on machine, keeping only the random key.

    The cleared display is flagged dirty so the renderer repaints it.
    """
    return create_state(state.rng).replace(display_dirty=True)


def check_memory_range(start: int, length: int = 1) -> None:
    """Raise if ``length`` bytes starting at ``start`` leave addressable memory."""
    if length == 0:
        return
    if start < 0 or length < 0 or start + length > MEMORY_SIZE:
        raise AddressOutOfBoundsError(start, length)


def read_memory(state: EmulatorState, start: int, length: int) -> jnp.ndarray:
    """Read a range-checked slice of memory."""
    check_memory_range(start, length)
    return state.memory[start:start + length]


def write_memory(state: EmulatorState, start: int, values: Sequence[int] | jnp.ndarray) -> EmulatorState:
    """Write bytes to memory after range-checking the whole span."""
    values = jnp.asarray(values, dtype=jnp.uint8)
    length = values.shape[0]
    check_memory_range(start, length)
    return state.replace(memory=state.memory.at[start:start + length].set(values))


def get_register(state: EmulatorState, index: int) -> int:
    return int(state.V[index])


def set_register(state: EmulatorState, index: int, value: int) -> EmulatorState:
    """Store the low byte of ``value`` in register ``index``."""
    return state.replace(V=state.V.at[index].set(value & 0xFF))
