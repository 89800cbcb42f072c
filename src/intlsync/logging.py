# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console logger writing progress to stdout and problems to stderr.

Informational and success lines go to stdout. Warnings and errors go to
stderr, so ``intlsync sync > report.txt`` still surfaces removed keys and
failures on the terminal. Colour is decided per stream.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Final, Literal, TextIO

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

from .constants import LOG_PREFIX

LevelName = Literal["info", "ok", "warn", "error"]


@dataclass(frozen=True, slots=True)
class _Level:
    symbol: str
    style: str
    stderr: bool


_LEVELS: Final[dict[LevelName, _Level]] = {
    "info": _Level(symbol="ℹ️ ", style="cyan", stderr=False),
    "ok": _Level(symbol="✅ ", style="green", stderr=False),
    "warn": _Level(symbol="⚠️ ", style="yellow", stderr=True),
    "error": _Level(symbol="❌ ", style="red", stderr=True),
}


def stream_is_tty(stream: TextIO) -> bool:
    """Return ``True`` when ``stream`` is attached to a terminal."""

    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(slots=True)
class ConsoleLogger:
    """Render pipeline messages through Rich with an ``[intlsync]`` prefix.

    Attributes:
        use_emoji: Whether each line starts with a level glyph.
        use_color: Explicit colour override; ``None`` enables colour only for
            streams attached to a terminal.
        prefix: Text prepended to every message.
    """

    use_emoji: bool = True
    use_color: bool | None = None
    prefix: str = LOG_PREFIX
    _consoles: dict[bool, Console] = field(default_factory=dict, init=False, repr=False)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def ok(self, message: str) -> None:
        self._emit("ok", message)

    def warn(self, message: str) -> None:
        self._emit("warn", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def section(self, title: str) -> None:
        """Print a header separating the output of consecutive passes."""

        console = self._console(stderr=False)
        if self._color_enabled(stderr=False):
            console.print()
            console.print(Rule(title))
        else:
            console.print(Text(f"\n--- {title} ---"))

    def _emit(self, level_name: LevelName, message: str) -> None:
        level = _LEVELS[level_name]
        symbol = level.symbol if self.use_emoji else ""
        body = f"{self.prefix}: {message}" if self.prefix else message
        text = Text(f"{symbol}{body}")
        if self._color_enabled(stderr=level.stderr):
            text.stylize(level.style)
        self._console(stderr=level.stderr).print(text)

    def _color_enabled(self, *, stderr: bool) -> bool:
        if self.use_color is not None:
            return self.use_color
        return stream_is_tty(sys.stderr if stderr else sys.stdout)

    def _console(self, *, stderr: bool) -> Console:
        console = self._consoles.get(stderr)
        if console is None:
            color = self._color_enabled(stderr=stderr)
            console = Console(
                stderr=stderr,
                color_system="auto" if color else None,
                no_color=not color,
                emoji=self.use_emoji,
                highlight=False,
                soft_wrap=True,
            )
            self._consoles[stderr] = console
        return console


__all__ = ["ConsoleLogger", "LevelName", "stream_is_tty"]
