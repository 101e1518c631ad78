"""Runtime configuration for the emulator frontend."""

import argparse
from typing import Optional, Sequence

from flax.struct import dataclass

from chip8core.constants import DEFAULT_INSTRUCTIONS_PER_FRAME
from chip8core.rendering import COLOR_SCHEMES

_LOG_LEVELS = {
    "trace": "TRACE", "5": "TRACE",
    "debug": "DEBUG", "4": "DEBUG",
    "info": "INFO", "3": "INFO",
    "warn": "WARNING", "warning": "WARNING", "2": "WARNING",
    "error": "ERROR", "1": "ERROR",
}


def parse_log_level(value: str) -> str:
    """Map a CLI log level (name or 1-5) to a logger level; unknown means OFF."""
    return _LOG_LEVELS.get(value.strip().lower(), "OFF")


@dataclass
class EmulatorConfig:
    """Frontend settings.

    Attributes:
        rom_path: Path to a raw CHIP-8 program image
        log_level: Logger level name ("OFF" silences everything)
        speed: Clock multiplier; 1.0 runs 600 instructions per second
        scale: Window pixels per CHIP-8 pixel
        color_scheme: Name from ``rendering.COLOR_SCHEMES``
        seed: PRNG seed for the CXNN instruction
    """
    rom_path: str
    log_level: str = "OFF"
    speed: float = 1.0
    scale: int = 8
    color_scheme: str = "white"
    seed: int = 0

    def __post_init__(self):
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.scale < 1:
            raise ValueError(f"scale must be at least 1, got {self.scale}")
        if self.color_scheme not in COLOR_SCHEMES:
            raise ValueError(
                f"Unknown color scheme '{self.color_scheme}'. Available: {list(COLOR_SCHEMES.keys())}"
            )

    @property
    def instructions_per_frame(self) -> int:
        return max(1, round(DEFAULT_INSTRUCTIONS_PER_FRAME * self.speed))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chip8", description="A simple CHIP-8 emulator"
    )
    parser.add_argument("rom_path", help="Path to a CHIP-8 ROM (.ch8)")
    parser.add_argument(
        "-l",
        "--log-level",
        default="off",
        help="Log level: trace, debug, info, warn, error or 5-1 (default: off)",
    )
    parser.add_argument(
        "-s",
        "--speed",
        type=float,
        default=1.0,
        help="Clock speed multiplier (default: 1.0 = 600 Hz)",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=8,
        help="Window scale factor (default: 8)",
    )
    parser.add_argument(
        "--color-scheme",
        default="white",
        choices=sorted(COLOR_SCHEMES),
        help="Display colors (default: white)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed (default: 0)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> EmulatorConfig:
    """Build an EmulatorConfig from command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return EmulatorConfig(
            rom_path=args.rom_path,
            log_level=parse_log_level(args.log_level),
            speed=args.speed,
            scale=args.scale,
            color_scheme=args.color_scheme,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))
