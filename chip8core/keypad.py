"""Keypad set interface and FX0A wait state helpers.

The input collaborator writes the 16 key states between ``step`` calls,
usually by clearing everything and then pressing whatever is held.
"""

from typing import Optional, Sequence

import jax.numpy as jnp

from chip8core.constants import NUM_KEYS
from chip8core.state import EmulatorState


def _check_key(key: int):
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"Key index must be in 0x0-0x{NUM_KEYS - 1:X}, got {key}")


def set_keys(state: EmulatorState, keys: Sequence[bool] | jnp.ndarray) -> EmulatorState:
    """Overwrite all 16 key states."""
    keys = jnp.asarray(keys, dtype=jnp.bool_)
    if keys.shape != (NUM_KEYS,):
        raise ValueError(f"Expected {NUM_KEYS} key states, got shape {keys.shape}")
    return state.replace(keypad=keys)


def press_key(state: EmulatorState, key: int) -> EmulatorState:
    _check_key(key)
    return state.replace(keypad=state.keypad.at[key].set(True))


def release_key(state: EmulatorState, key: int) -> EmulatorState:
    _check_key(key)
    return state.replace(keypad=state.keypad.at[key].set(False))


def clear_keys(state: EmulatorState) -> EmulatorState:
    """Release every key."""
    return state.replace(keypad=jnp.zeros(NUM_KEYS, dtype=jnp.bool_))


def first_pressed_key(state: EmulatorState) -> Optional[int]:
    """Lowest pressed key index, or None when no key is down."""
    if not bool(jnp.any(state.keypad)):
        return None
    return int(jnp.argmax(state.keypad))


def is_waiting_for_key(state: EmulatorState) -> bool:
    return state.key_wait is not None
