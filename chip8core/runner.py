"""Outer-loop helpers: N instructions per 60 Hz timer tick.

No wall-clock pacing happens here; interactive frontends sleep between
frames themselves.
"""

from typing import Optional, Sequence

import jax.numpy as jnp

from chip8core.constants import DEFAULT_INSTRUCTIONS_PER_FRAME
from chip8core.emulator import step
from chip8core.keypad import set_keys
from chip8core.logging import frame_progress, get_logger
from chip8core.state import EmulatorState
from chip8core.timers import tick

logger = get_logger("chip8.runner")


def run_frame(
    state: EmulatorState,
    keys: Optional[Sequence[bool] | jnp.ndarray] = None,
    instructions_per_frame: int = DEFAULT_INSTRUCTIONS_PER_FRAME,
) -> EmulatorState:
    """Apply key states, execute a frame's worth of steps, then tick timers."""
    if instructions_per_frame < 1:
        raise ValueError(f"instructions_per_frame must be positive, got {instructions_per_frame}")
    if keys is not None:
        state = set_keys(state, keys)
    for _ in range(instructions_per_frame):
        state = step(state)
    return tick(state)


def run_frames(
    state: EmulatorState,
    num_frames: int,
    instructions_per_frame: int = DEFAULT_INSTRUCTIONS_PER_FRAME,
    show_progress: bool = False,
) -> EmulatorState:
    """Run ``num_frames`` frames headless with the current key states."""
    progress = frame_progress(num_frames) if show_progress else None
    try:
        for _ in range(num_frames):
            state = run_frame(state, instructions_per_frame=instructions_per_frame)
            if progress is not None:
                progress.update(1)
    finally:
        if progress is not None:
            progress.close()
    logger.debug(f"Ran {num_frames} frames, PC=0x{state.pc:03X}")
    return state
