"""Tests for the outer-loop helpers."""

import pytest
from chip8core import run_frame, run_frames
from conftest import program_state


def test_run_frame_steps_then_ticks(fresh_state):
    # ADD V0, 1; JP 0x200
    state = program_state(fresh_state, [0x7001, 0x1200]).replace(delay_timer=5)
    state = run_frame(state, instructions_per_frame=10)
    assert state.V[0] == 5
    assert state.delay_timer == 4


def test_run_frame_applies_keys(fresh_state):
    state = program_state(fresh_state, [0xF10A, 0x1202])
    keys = [False] * 16
    keys[6] = True
    state = run_frame(state, keys=keys, instructions_per_frame=3)
    assert state.V[1] == 6
    assert state.keypad[6]


def test_run_frame_rejects_zero_instructions(fresh_state):
    with pytest.raises(ValueError):
        run_frame(fresh_state, instructions_per_frame=0)


def test_run_frames(fresh_state):
    state = program_state(fresh_state, [0x7001, 0x1200]).replace(sound_timer=2)
    state = run_frames(state, 3, instructions_per_frame=4, show_progress=True)
    assert state.V[0] == 6
    assert state.sound_timer == 0
