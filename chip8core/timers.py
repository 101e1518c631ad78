"""CHIP-8 delay and sound timers.

Both timers count down once per ``tick``, which the caller drives at 60 Hz
independently of how many instructions it executes in between.
"""

from chip8core.state import EmulatorState


def tick(state: EmulatorState) -> EmulatorState:
    """Decrement both timers, stopping at zero."""
    return state.replace(
        delay_timer=max(0, state.delay_timer - 1),
        sound_timer=max(0, state.sound_timer - 1),
    )


def sound_state(state: EmulatorState) -> bool:
    """True while the buzzer should sound."""
    return state.sound_timer > 0
