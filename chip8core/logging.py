"""Console logging utilities for the emulator and its frontends.

Loggers are shared by name so the frontend can set one level for the whole
process. Long headless runs get a tqdm progress bar.
"""

import time
import sys
from typing import Dict, Optional

from tqdm import tqdm


LEVEL_ORDER = {
    "TRACE": 0,
    "DEBUG": 1,
    "INFO": 2,
    "WARNING": 3,
    "ERROR": 4,
    "CRITICAL": 5,
    "OFF": 6,
}


class ConsoleLogger:
    """Levelled console logger with optional colors and timestamps."""

    def __init__(
        self,
        name: str = "chip8",
        log_level: str = "OFF",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        self.name = name
        self.log_level = "OFF"
        self.set_level(log_level)
        self.use_colors = (
            use_colors and hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

        self.colors = (
            {
                "TRACE": "\033[90m",
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "CRITICAL": "\033[35m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {
                k: ""
                for k in ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "RESET"]
            }
        )

    def set_level(self, log_level: str):
        """Change the minimum level; raises ValueError for unknown names."""
        level = log_level.upper()
        if level not in LEVEL_ORDER:
            raise ValueError(
                f"Unknown log level '{log_level}'. Available: {list(LEVEL_ORDER.keys())}"
            )
        self.log_level = level

    def is_enabled_for(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        level = level.upper()
        if level == "OFF":
            return False
        return LEVEL_ORDER.get(level, 2) >= LEVEL_ORDER[self.log_level]

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = self.colors.get(level.upper(), "")
            reset = self.colors["RESET"]
            level_str = f"{color}{level_str}{reset}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self.is_enabled_for(level):
            formatted = self._format_message(level.upper(), message)
            print(formatted, flush=True)

    def trace(self, message: str):
        self.log("TRACE", message)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


_loggers: Dict[str, ConsoleLogger] = {}
_global_level = "OFF"


def get_logger(name: str = "chip8") -> ConsoleLogger:
    """Return the shared logger for ``name``, creating it on first use."""
    if name not in _loggers:
        _loggers[name] = ConsoleLogger(name, log_level=_global_level)
    return _loggers[name]


def set_log_level(log_level: str):
    """Set the level of every existing and future logger."""
    global _global_level
    level = log_level.upper()
    if level not in LEVEL_ORDER:
        raise ValueError(
            f"Unknown log level '{log_level}'. Available: {list(LEVEL_ORDER.keys())}"
        )
    _global_level = level
    for logger in _loggers.values():
        logger.set_level(level)


def frame_progress(total: int, desc: Optional[str] = None, **kwargs) -> tqdm:
    """Build a tqdm bar counting emulated frames."""
    if desc is None:
        desc = f"Emulating ({total:,} frames)"
    for kwarg in ("total", "unit"):
        kwargs.pop(kwarg, None)
    return tqdm(total=total, desc=desc, unit="frame", **kwargs)
