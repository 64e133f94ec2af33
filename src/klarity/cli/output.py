"""Colorful CLI output helpers."""

import sys

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
BOLD = "\033[1m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗
WARN = "!"

# Task card markers by priority name
PRIORITY_COLORS = {
    "HIGH": RED,
    "MEDIUM": YELLOW,
    "LOW": BLUE,
    "NONE": DIM,
}


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    print(f"{colorize(CHECK, GREEN)} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    print(f"{colorize(BULLET, YELLOW)} {message}")


def warning(message: str) -> None:
    """Print warning message with a yellow marker."""
    print(f"{colorize(WARN, YELLOW)} {message}")


def header(message: str) -> None:
    """Print header message in bold blue."""
    print(colorize(message, BOLD + BLUE))


def error(message: str) -> None:
    """Print error message with red cross."""
    print(f"{colorize(CROSS, RED)} {message}")
