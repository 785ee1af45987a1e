"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _emit(emoji: str, sign: str, color: str, message: str) -> None:
    prefix = sign if "NO_EMOJI" in os.environ else emoji
    console = Console(emoji=False, highlight=False)
    console.print(Text(f"{prefix} {message}", style=color), soft_wrap=True)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ ", "!", "red", message)


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅ ", "✓", "green", message)