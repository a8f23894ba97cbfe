"""Block-glyph rendering of `MM:SS` countdown values."""

from __future__ import annotations

GLYPH_HEIGHT = 5

_GLYPHS: dict[str, tuple[str, ...]] = {
    "0": ("██████", "█    █", "█    █", "█    █", "██████"),
    "1": ("  ██  ", "  ██  ", "  ██  ", "  ██  ", "  ██  "),
    "2": ("██████", "     █", "██████", "█     ", "██████"),
    "3": ("██████", "     █", "██████", "     █", "██████"),
    "4": ("█    █", "█    █", "██████", "     █", "     █"),
    "5": ("██████", "█     ", "██████", "     █", "██████"),
    "6": ("██████", "█     ", "██████", "█    █", "██████"),
    "7": ("██████", "     █", "     █", "     █", "     █"),
    "8": ("██████", "█    █", "██████", "█    █", "██████"),
    "9": ("██████", "█    █", "██████", "     █", "██████"),
    ":": ("      ", "  ██  ", "      ", "  ██  ", "      "),
}


def format_duration(seconds: int) -> str:
    """Format a duration in seconds as `MM:SS`."""
    minutes, remainder = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{remainder:02d}"


def render_big_time(seconds: int) -> list[str]:
    lines = [""] * GLYPH_HEIGHT
    for char in format_duration(seconds):
        glyph = _GLYPHS.get(char, _GLYPHS["0"])
        for row, segment in enumerate(glyph):
            lines[row] += segment + " "
    return lines
