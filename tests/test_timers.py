"""Tests for the delay and sound timers."""

from chip8core import tick, sound_state, execute


def test_tick_decrements_both(fresh_state):
    state = fresh_state.replace(delay_timer=10, sound_timer=3)
    state = tick(state)
    assert state.delay_timer == 9
    assert state.sound_timer == 2


def test_tick_saturates_at_zero(fresh_state):
    state = fresh_state.replace(delay_timer=1, sound_timer=0)
    state = tick(tick(tick(state)))
    assert state.delay_timer == 0
    assert state.sound_timer == 0


def test_timers_are_independent(fresh_state):
    state = fresh_state.replace(delay_timer=2, sound_timer=5)
    for _ in range(3):
        state = tick(state)
    assert state.delay_timer == 0
    assert state.sound_timer == 2


def test_sound_state_follows_timer(fresh_state):
    assert not sound_state(fresh_state)
    state = execute(fresh_state, 0x6002)
    state = execute(state, 0xF018)  # ST = 2
    assert sound_state(state)
    state = tick(state)
    assert sound_state(state)
    state = tick(state)
    assert not sound_state(state)


def test_delay_timer_readback_after_ticks(fresh_state):
    state = execute(fresh_state, 0x603C)
    state = execute(state, 0xF015)  # DT = 60
    for _ in range(15):
        state = tick(state)
    state = execute(state, 0xF107)
    assert state.V[1] == 45
