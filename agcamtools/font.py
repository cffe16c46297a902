"""Minimal 5x7 bitmap font for drawing overlay text onto image arrays.

Covers digits, letters (upper case is drawn as lower case), space and
the punctuation ``. : ; ' - = [ ]``.  Each glyph is five pixels wide and
seven tall, stored as seven row bytes with the columns in bits 7..3.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7
GLYPH_ADVANCE = 6

_GLYPHS: tuple[tuple[int, ...], ...] = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # ' '
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x60, 0x60),  # '.'
    (0x00, 0x60, 0x60, 0x00, 0x60, 0x60, 0x00),  # ':'
    (0x00, 0x60, 0x60, 0x00, 0x60, 0x20, 0x40),  # ';'
    (0x60, 0x60, 0x20, 0x00, 0x00, 0x00, 0x00),  # "'"
    (0x00, 0x00, 0x00, 0xF8, 0x00, 0x00, 0x00),  # '-'
    (0x00, 0x00, 0xF8, 0x00, 0xF8, 0x00, 0x00),  # '='
    (0x70, 0x40, 0x40, 0x40, 0x40, 0x40, 0x70),  # '['
    (0x70, 0x10, 0x10, 0x10, 0x10, 0x10, 0x70),  # ']'
    (0x70, 0x88, 0x98, 0xA8, 0xC8, 0x88, 0x70),  # '0'
    (0x20, 0x60, 0x20, 0x20, 0x20, 0x20, 0x70),  # '1'
    (0x70, 0x88, 0x08, 0x10, 0x20, 0x40, 0xF8),  # '2'
    (0xF8, 0x10, 0x20, 0x10, 0x08, 0x88, 0x70),  # '3'
    (0x10, 0x30, 0x50, 0x90, 0xF8, 0x10, 0x10),  # '4'
    (0xF8, 0x80, 0xF0, 0x08, 0x08, 0x88, 0x70),  # '5'
    (0x30, 0x40, 0x80, 0xF0, 0x88, 0x88, 0x70),  # '6'
    (0xF8, 0x08, 0x10, 0x20, 0x40, 0x40, 0x40),  # '7'
    (0x70, 0x88, 0x88, 0x70, 0x88, 0x88, 0x70),  # '8'
    (0x70, 0x88, 0x88, 0x78, 0x08, 0x10, 0x60),  # '9'
    (0x00, 0x00, 0x70, 0x08, 0x78, 0x88, 0x78),  # 'a'
    (0x80, 0x80, 0xB0, 0xC8, 0x88, 0x88, 0xF0),  # 'b'
    (0x00, 0x00, 0x70, 0x80, 0x80, 0x88, 0x70),  # 'c'
    (0x08, 0x08, 0x68, 0x98, 0x88, 0x88, 0x78),  # 'd'
    (0x00, 0x00, 0x70, 0x88, 0xF8, 0x80, 0x70),  # 'e'
    (0x30, 0x48, 0x40, 0xE0, 0x40, 0x40, 0x40),  # 'f'
    (0x00, 0x78, 0x88, 0x88, 0x78, 0x08, 0x70),  # 'g'
    (0x80, 0x80, 0xB0, 0xC8, 0x88, 0x88, 0x88),  # 'h'
    (0x20, 0x00, 0x60, 0x20, 0x20, 0x20, 0x70),  # 'i'
    (0x10, 0x00, 0x30, 0x10, 0x10, 0x90, 0x60),  # 'j'
    (0x80, 0x80, 0x90, 0xA0, 0xC0, 0xA0, 0x90),  # 'k'
    (0x60, 0x20, 0x20, 0x20, 0x20, 0x20, 0x70),  # 'l'
    (0x00, 0x00, 0xD0, 0xA8, 0xA8, 0x88, 0x88),  # 'm'
    (0x00, 0x00, 0xB0, 0xC8, 0x88, 0x88, 0x88),  # 'n'
    (0x00, 0x00, 0x70, 0x88, 0x88, 0x88, 0x70),  # 'o'
    (0x00, 0x00, 0xF0, 0x88, 0xF0, 0x80, 0x80),  # 'p'
    (0x00, 0x00, 0x68, 0x98, 0x78, 0x08, 0x08),  # 'q'
    (0x00, 0x00, 0xB0, 0xC8, 0x80, 0x80, 0x80),  # 'r'
    (0x00, 0x00, 0x78, 0x80, 0x70, 0x08, 0xF0),  # 's'
    (0x40, 0x40, 0xE0, 0x40, 0x40, 0x48, 0x30),  # 't'
    (0x00, 0x00, 0x88, 0x88, 0x88, 0x98, 0x68),  # 'u'
    (0x00, 0x00, 0x88, 0x88, 0x88, 0x50, 0x20),  # 'v'
    (0x00, 0x00, 0x88, 0x88, 0xA8, 0xA8, 0x50),  # 'w'
    (0x00, 0x00, 0x88, 0x50, 0x20, 0x50, 0x88),  # 'x'
    (0x00, 0x00, 0x88, 0x88, 0x78, 0x08, 0x70),  # 'y'
    (0x00, 0x00, 0xF8, 0x10, 0x20, 0x40, 0xF8),  # 'z'
)

_PUNCTUATION = " .:;'-=[]"
_DIGIT_BASE = len(_PUNCTUATION)
_LETTER_BASE = _DIGIT_BASE + 10


def font_index(char: str) -> int | None:
    """Return the glyph index for a character, or None if it has no glyph."""
    if len(char) != 1:
        return None
    pos = _PUNCTUATION.find(char)
    if pos >= 0:
        return pos
    if "0" <= char <= "9":
        return _DIGIT_BASE + ord(char) - ord("0")
    if "a" <= char <= "z":
        return _LETTER_BASE + ord(char) - ord("a")
    if "A" <= char <= "Z":
        return _LETTER_BASE + ord(char) - ord("A")
    return None


def glyph_rows(char: str) -> tuple[int, ...] | None:
    """Return the seven row bytes of a character's glyph, or None."""
    index = font_index(char)
    return None if index is None else _GLYPHS[index]


def iter_glyph_rects(text: str, x: int, y: int, scale: int) -> Iterator[tuple[int, int, int, int]]:
    """Yield ``(x, y, width, height)`` for every lit pixel block of ``text``.

    Each font pixel becomes a ``scale`` x ``scale`` square; characters
    advance by six font pixels, unsupported ones leaving a blank cell.
    """
    cursor = x
    for char in text:
        rows = glyph_rows(char)
        if rows is not None:
            for row, bits in enumerate(rows):
                for col in range(GLYPH_WIDTH):
                    if bits & (0x80 >> col):
                        yield (cursor + col * scale, y + row * scale, scale, scale)
        cursor += GLYPH_ADVANCE * scale


def render_text(canvas: np.ndarray, text: str, x: int, y: int, scale: int, color) -> np.ndarray:
    """Draw ``text`` onto a ``(H, W[, C])`` array in place and return it.

    Blocks falling partly or wholly outside the canvas are clipped.
    """
    height, width = canvas.shape[:2]
    for rx, ry, rw, rh in iter_glyph_rects(text, x, y, scale):
        x0, y0 = max(rx, 0), max(ry, 0)
        x1, y1 = min(rx + rw, width), min(ry + rh, height)
        if x0 < x1 and y0 < y1:
            canvas[y0:y1, x0:x1] = color
    return canvas