"""CHIP-8 display operations."""

import jax.numpy as jnp

from chip8core.state import EmulatorState, get_register, read_memory, set_register
from chip8core.decode import DecodedInstruction
from chip8core.constants import FLAG_REGISTER, SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH

# Pre-computed coordinate grids, indexed [x, y] like the display
xx, yy = jnp.meshgrid(jnp.arange(SCREEN_WIDTH), jnp.arange(SCREEN_HEIGHT), indexing='ij')


def sprite_mask(sprite_rows: jnp.ndarray, origin_x: int, origin_y: int) -> jnp.ndarray:
    """Expand sprite bytes into a full-screen boolean mask.

    Bit 7 of each row is the leftmost pixel. Rows and columns that run off
    an edge wrap around to the opposite side.
    """
    height = sprite_rows.shape[0]
    col_offset = (xx - origin_x) % SCREEN_WIDTH
    row_offset = (yy - origin_y) % SCREEN_HEIGHT
    covered = (col_offset < SPRITE_WIDTH) & (row_offset < height)

    rows = jnp.zeros(SCREEN_HEIGHT, dtype=jnp.uint8).at[:height].set(sprite_rows)
    shift = jnp.clip(SPRITE_WIDTH - 1 - col_offset, 0, SPRITE_WIDTH - 1)
    bits = (rows[row_offset].astype(jnp.int32) >> shift) & 1
    return (bits == 1) & covered


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N.

    Pixels are XORed in; VF is set to 1 if any lit pixel was turned off.
    """
    sprite_rows = read_memory(state, state.I, instruction.n)
    origin_x = get_register(state, instruction.x) % SCREEN_WIDTH
    origin_y = get_register(state, instruction.y) % SCREEN_HEIGHT

    sprite = sprite_mask(sprite_rows, origin_x, origin_y)
    collision = bool(jnp.any(state.display & sprite))

    state = set_register(state, FLAG_REGISTER, int(collision))
    return state.replace(display=state.display ^ sprite, display_dirty=True)
