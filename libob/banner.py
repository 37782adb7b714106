"""Console banners and separator lines."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = [
    "LIB_OB_BANNER",
    "DEBUG_BANNER",
    "print_lib_ob_banner",
    "print_debug_banner",
    "print_line_separator",
]

_GLYPHS: dict[str, tuple[str, ...]] = {
    "L": ("#    ", "#    ", "#    ", "#    ", "#####"),
    "I": ("###", " # ", " # ", " # ", "###"),
    "B": ("#### ", "#   #", "#### ", "#   #", "#### "),
    "O": (" ### ", "#   #", "#   #", "#   #", " ### "),
    "D": ("#### ", "#   #", "#   #", "#   #", "#### "),
    "E": ("#####", "#    ", "#### ", "#    ", "#####"),
    "U": ("#   #", "#   #", "#   #", "#   #", " ### "),
    "G": (" ####", "#    ", "#  ##", "#   #", " ### "),
}

_INDENT = " " * 4
_EDGE = "||||"


def _render(word: str) -> list[str]:
    """Render ``word`` in the block font, one string per row."""
    glyphs = [_GLYPHS[letter] for letter in word]
    return ["  ".join(rows).rstrip() for rows in zip(*glyphs)]


def _framed(word: str) -> str:
    """Build a boxed banner around ``word`` drawn in block letters."""
    art = _render(word)
    width = max(map(len, art))
    body = [f"{_EDGE}  {row.ljust(width)}  {_EDGE}" for row in ["", *art, ""]]
    rule = "=" * len(body[0])
    lines = [rule, rule, *body, rule, rule]
    return "\n" + "".join(f"{_INDENT}{line}\n" for line in lines)


LIB_OB_BANNER = _framed("LIBOB")
DEBUG_BANNER = _framed("DEBUG")


def print_lib_ob_banner(out: TextIO | None = None) -> None:
    """Write the library banner followed by a blank line."""
    (out or sys.stdout).write(LIB_OB_BANNER + "\n")


def print_debug_banner(out: TextIO | None = None) -> None:
    """Write the debug banner followed by a blank line."""
    (out or sys.stdout).write(DEBUG_BANNER + "\n")


def print_line_separator(
    out: TextIO | None = None, lines: int = 1, length: int = 80, line: str = "="
) -> None:
    """Write ``lines`` rows of ``length`` copies of the first character of ``line``."""
    if not line:
        raise ValueError("separator character must not be empty")
    stream = out or sys.stdout
    for _ in range(lines):
        stream.write(line[0] * length + "\n")