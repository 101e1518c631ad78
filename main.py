"""
pygame frontend for the CHIP-8 emulator: window, keyboard, buzzer and ROM drag-and-drop
"""

import sys

import jax
import numpy as np
import pygame

from chip8core import (
    EmulatorError,
    clear_keys,
    consume_frame,
    create_state,
    load_rom,
    press_key,
    reset,
    sound_state,
    step,
    tick,
)
from chip8core.config import EmulatorConfig, parse_args
from chip8core.constants import SCREEN_HEIGHT, SCREEN_WIDTH, TIMER_FREQUENCY
from chip8core.logging import get_logger, set_log_level

logger = get_logger("chip8")

# COSMAC VIP layout on the left side of a QWERTY keyboard
KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}

SAMPLE_RATE = 44_100
TONE_FREQUENCY = 440.0
VOLUME = 0.03


def make_beep() -> pygame.mixer.Sound:
    """One second of a 440 Hz square wave, looped while the sound timer runs."""
    t = np.arange(SAMPLE_RATE) * TONE_FREQUENCY / SAMPLE_RATE
    wave = np.where((t % 1.0) <= 0.5, VOLUME, -VOLUME)
    samples = (wave * np.iinfo(np.int16).max).astype(np.int16)
    return pygame.sndarray.make_sound(samples)


def poll_keys(state):
    """Reset the keypad, then press every mapped key currently held."""
    pressed = pygame.key.get_pressed()
    state = clear_keys(state)
    for host_key, chip8_key in KEY_MAP.items():
        if pressed[host_key]:
            state = press_key(state, chip8_key)
    return state


def run_emulator(config: EmulatorConfig):
    """Main emulator loop: one frame per 60 Hz tick."""
    set_log_level(config.log_level)

    pygame.init()
    pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
    screen = pygame.display.set_mode((SCREEN_WIDTH * config.scale, SCREEN_HEIGHT * config.scale))
    pygame.display.set_caption("Chip-8")
    clock = pygame.time.Clock()
    beep = make_beep()
    beeping = False
    logger.info("pygame video, input and audio initialized")

    state = create_state(jax.random.PRNGKey(config.seed))
    try:
        state = load_rom(state, config.rom_path)
    except (OSError, EmulatorError) as e:
        logger.error(f"Could not load {config.rom_path}: {e}")
        pygame.quit()
        return 1

    running = True
    halted = False

    while running:
        clock.tick(TIMER_FREQUENCY)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Exiting")
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.DROPFILE:
                logger.info(f"File dropped: {event.file}")
                try:
                    state = load_rom(reset(state), event.file)
                    halted = False
                except (OSError, EmulatorError) as e:
                    logger.error(f"Could not load {event.file}: {e}")

        if not halted:
            state = poll_keys(state)
            try:
                for _ in range(config.instructions_per_frame):
                    state = step(state)
            except EmulatorError as e:
                logger.error(f"Emulation halted: {e}")
                halted = True
            state = tick(state)

        state, frame = consume_frame(state, config.scale, config.color_scheme)
        if frame is not None:
            # surfarray expects (width, height, 3)
            pygame.surfarray.blit_array(screen, np.ascontiguousarray(np.transpose(frame, (1, 0, 2))))
            pygame.display.flip()

        if sound_state(state) and not beeping:
            beep.play(loops=-1)
            beeping = True
        elif not sound_state(state) and beeping:
            beep.stop()
            beeping = False

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(run_emulator(parse_args()))
