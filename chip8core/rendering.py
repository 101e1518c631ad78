"""Framebuffer read interface: converts the display into RGB images."""

from typing import Optional, Tuple

import jax.numpy as jnp
import numpy as np

from chip8core.state import EmulatorState

COLOR_SCHEMES = {
    "white": ((255, 255, 255), (0, 0, 0)),  # White on black
    "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
    "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
    "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
    "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
}


def create_color_scheme(
    scheme: str = "white",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name, one of ``COLOR_SCHEMES``

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    if scheme not in COLOR_SCHEMES:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(COLOR_SCHEMES.keys())}"
        )
    return COLOR_SCHEMES[scheme]


def display_to_rgb(
    display: jnp.ndarray,
    scale: int = 8,
    on_color: Tuple[int, int, int] = (255, 255, 255),
    off_color: Tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Convert the boolean display into an upscaled RGB image.

    Args:
        display: Boolean array of shape (64, 32), indexed [x, y]
        scale: Nearest-neighbour upscaling factor
        on_color: RGB color for lit pixels
        off_color: RGB color for dark pixels

    Returns:
        uint8 array of shape (32*scale, 64*scale, 3), row-major for image use
    """
    if scale < 1:
        raise ValueError(f"scale must be at least 1, got {scale}")

    pixels = np.asarray(display, dtype=np.bool_).T
    height, width = pixels.shape

    rgb_frame = np.empty((height, width, 3), dtype=np.uint8)
    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)
    return rgb_frame


def consume_frame(
    state: EmulatorState, scale: int = 8, color_scheme: str = "white"
) -> Tuple[EmulatorState, Optional[np.ndarray]]:
    """Render the display if it changed since the last frame.

    Returns the state with the dirty flag cleared together with the image,
    or the unchanged state and None when nothing was drawn.
    """
    if not state.display_dirty:
        return state, None
    on_color, off_color = create_color_scheme(color_scheme)
    frame = display_to_rgb(state.display, scale, on_color, off_color)
    return state.replace(display_dirty=False), frame
