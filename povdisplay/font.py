"""5x7 bitmap font for ASCII and Cyrillic text, with UTF-8 decoding."""

from __future__ import annotations

from dataclasses import dataclass

BASE_WIDTH = 5
MAX_GLYPH_WIDTH = 7
HEIGHT = 7
GAP = 1
MAX_RUN_GLYPHS = 64

ASCII_FIRST = 32
ASCII_LAST = 126
CYRILLIC_FIRST = 0x0410
CYRILLIC_LAST = 0x044F
CYRILLIC_UPPER_YO = 0x0401
CYRILLIC_LOWER_YO = 0x0451

# Columns, LSB = top row.
_ASCII = (
    (0x00, 0x00, 0x00, 0x00, 0x00), (0x00, 0x00, 0x5F, 0x00, 0x00),
    (0x00, 0x07, 0x00, 0x07, 0x00), (0x14, 0x7F, 0x14, 0x7F, 0x14),
    (0x24, 0x2A, 0x7F, 0x2A, 0x12), (0x23, 0x13, 0x08, 0x64, 0x62),
    (0x36, 0x49, 0x55, 0x22, 0x50), (0x00, 0x05, 0x03, 0x00, 0x00),
    (0x00, 0x1C, 0x22, 0x41, 0x00), (0x00, 0x41, 0x22, 0x1C, 0x00),
    (0x08, 0x2A, 0x1C, 0x2A, 0x08), (0x08, 0x08, 0x3E, 0x08, 0x08),
    (0x00, 0x50, 0x30, 0x00, 0x00), (0x08, 0x08, 0x08, 0x08, 0x08),
    (0x00, 0x60, 0x60, 0x00, 0x00), (0x20, 0x10, 0x08, 0x04, 0x02),
    (0x3E, 0x51, 0x49, 0x45, 0x3E), (0x00, 0x42, 0x7F, 0x40, 0x00),
    (0x42, 0x61, 0x51, 0x49, 0x46), (0x21, 0x41, 0x45, 0x4B, 0x31),
    (0x18, 0x14, 0x12, 0x7F, 0x10), (0x27, 0x45, 0x45, 0x45, 0x39),
    (0x3C, 0x4A, 0x49, 0x49, 0x30), (0x01, 0x71, 0x09, 0x05, 0x03),
    (0x36, 0x49, 0x49, 0x49, 0x36), (0x06, 0x49, 0x49, 0x29, 0x1E),
    (0x00, 0x36, 0x36, 0x00, 0x00), (0x00, 0x56, 0x36, 0x00, 0x00),
    (0x00, 0x08, 0x14, 0x22, 0x41), (0x14, 0x14, 0x14, 0x14, 0x14),
    (0x41, 0x22, 0x14, 0x08, 0x00), (0x02, 0x01, 0x51, 0x09, 0x06),
    (0x32, 0x49, 0x79, 0x41, 0x3E), (0x7E, 0x11, 0x11, 0x11, 0x7E),
    (0x7F, 0x49, 0x49, 0x49, 0x36), (0x3E, 0x41, 0x41, 0x41, 0x22),
    (0x7F, 0x41, 0x41, 0x22, 0x1C), (0x7F, 0x49, 0x49, 0x49, 0x41),
    (0x7F, 0x09, 0x09, 0x01, 0x01), (0x3E, 0x41, 0x41, 0x51, 0x32),
    (0x7F, 0x08, 0x08, 0x08, 0x7F), (0x00, 0x41, 0x7F, 0x41, 0x00),
    (0x20, 0x40, 0x41, 0x3F, 0x01), (0x7F, 0x08, 0x14, 0x22, 0x41),
    (0x7F, 0x40, 0x40, 0x40, 0x40), (0x7F, 0x02, 0x04, 0x02, 0x7F),
    (0x7F, 0x04, 0x08, 0x10, 0x7F), (0x3E, 0x41, 0x41, 0x41, 0x3E),
    (0x7F, 0x09, 0x09, 0x09, 0x06), (0x3E, 0x41, 0x51, 0x21, 0x5E),
    (0x7F, 0x09, 0x19, 0x29, 0x46), (0x46, 0x49, 0x49, 0x49, 0x31),
    (0x01, 0x01, 0x7F, 0x01, 0x01), (0x3F, 0x40, 0x40, 0x40, 0x3F),
    (0x1F, 0x20, 0x40, 0x20, 0x1F), (0x7F, 0x20, 0x18, 0x20, 0x7F),
    (0x63, 0x14, 0x08, 0x14, 0x63), (0x03, 0x04, 0x78, 0x04, 0x03),
    (0x61, 0x51, 0x49, 0x45, 0x43), (0x00, 0x00, 0x7F, 0x41, 0x41),
    (0x02, 0x04, 0x08, 0x10, 0x20), (0x41, 0x41, 0x7F, 0x00, 0x00),
    (0x04, 0x02, 0x01, 0x02, 0x04), (0x40, 0x40, 0x40, 0x40, 0x40),
    (0x00, 0x01, 0x02, 0x04, 0x00), (0x20, 0x54, 0x54, 0x54, 0x78),
    (0x7F, 0x48, 0x44, 0x44, 0x38), (0x38, 0x44, 0x44, 0x44, 0x20),
    (0x38, 0x44, 0x44, 0x48, 0x7F), (0x38, 0x54, 0x54, 0x54, 0x18),
    (0x08, 0x7E, 0x09, 0x01, 0x02), (0x08, 0x14, 0x54, 0x54, 0x3C),
    (0x7F, 0x08, 0x04, 0x04, 0x78), (0x00, 0x44, 0x7D, 0x40, 0x00),
    (0x20, 0x40, 0x44, 0x3D, 0x00), (0x00, 0x7F, 0x10, 0x28, 0x44),
    (0x00, 0x41, 0x7F, 0x40, 0x00), (0x7C, 0x04, 0x18, 0x04, 0x78),
    (0x7C, 0x08, 0x04, 0x04, 0x78), (0x38, 0x44, 0x44, 0x44, 0x38),
    (0x7C, 0x14, 0x14, 0x14, 0x08), (0x08, 0x14, 0x14, 0x18, 0x7C),
    (0x7C, 0x08, 0x04, 0x04, 0x08), (0x48, 0x54, 0x54, 0x54, 0x20),
    (0x04, 0x3F, 0x44, 0x40, 0x20), (0x3C, 0x40, 0x40, 0x20, 0x7C),
    (0x1C, 0x20, 0x40, 0x20, 0x1C), (0x3C, 0x40, 0x30, 0x40, 0x3C),
    (0x44, 0x28, 0x10, 0x28, 0x44), (0x0C, 0x50, 0x50, 0x50, 0x3C),
    (0x44, 0x64, 0x54, 0x4C, 0x44), (0x00, 0x08, 0x36, 0x41, 0x00),
    (0x00, 0x00, 0x7F, 0x00, 0x00), (0x00, 0x41, 0x36, 0x08, 0x00),
    (0x08, 0x08, 0x2A, 0x1C, 0x08),
)

# U+0410..U+042F; lower case U+0430..U+044F uses the same shapes.
_CYRILLIC = (
    (0x7E, 0x11, 0x11, 0x11, 0x7E), (0x7F, 0x49, 0x49, 0x49, 0x31),
    (0x7F, 0x49, 0x49, 0x49, 0x36), (0x7F, 0x01, 0x01, 0x01, 0x01),
    (0x60, 0x3E, 0x21, 0x21, 0x7F), (0x7F, 0x49, 0x49, 0x49, 0x41),
    (0x63, 0x14, 0x7F, 0x14, 0x63), (0x22, 0x41, 0x49, 0x49, 0x36),
    (0x7F, 0x20, 0x10, 0x08, 0x7F), (0x7D, 0x22, 0x12, 0x0A, 0x7D),
    (0x7F, 0x08, 0x14, 0x22, 0x41), (0x40, 0x3E, 0x01, 0x01, 0x7F),
    (0x7F, 0x02, 0x04, 0x02, 0x7F), (0x7F, 0x08, 0x08, 0x08, 0x7F),
    (0x3E, 0x41, 0x41, 0x41, 0x3E), (0x7F, 0x01, 0x01, 0x01, 0x7F),
    (0x7F, 0x09, 0x09, 0x09, 0x06), (0x3E, 0x41, 0x41, 0x41, 0x22),
    (0x01, 0x01, 0x7F, 0x01, 0x01), (0x03, 0x04, 0x78, 0x04, 0x03),
    (0x1C, 0x22, 0x7F, 0x22, 0x1C), (0x63, 0x14, 0x08, 0x14, 0x63),
    (0x7F, 0x40, 0x40, 0x7F, 0x60), (0x0F, 0x08, 0x08, 0x08, 0x7F),
    (0x7F, 0x40, 0x7F, 0x40, 0x7F), (0x7F, 0x40, 0x7F, 0x48, 0x7F),
    (0x01, 0x7F, 0x48, 0x48, 0x30), (0x7F, 0x48, 0x48, 0x30, 0x7F),
    (0x7F, 0x48, 0x48, 0x48, 0x30), (0x22, 0x41, 0x49, 0x49, 0x3E),
    (0x7F, 0x08, 0x3E, 0x41, 0x3E), (0x46, 0x29, 0x19, 0x09, 0x7F),
)

_CYRILLIC_YO = (0x7D, 0x54, 0x54, 0x54, 0x45)

# (width, columns) for letters that need more than the base width.
_WIDE_SHAPES = (
    (7, (0x63, 0x14, 0x08, 0x7F, 0x08, 0x14, 0x63)),  # Ж
    (6, (0x7F, 0x40, 0x40, 0x7F, 0x40, 0x60, 0x00)),  # Ц
    (6, (0x0F, 0x08, 0x08, 0x08, 0x08, 0x7F, 0x00)),  # Ч
    (7, (0x7F, 0x40, 0x7F, 0x40, 0x7F, 0x40, 0x7F)),  # Ш
    (7, (0x7F, 0x40, 0x7F, 0x40, 0x7F, 0x40, 0x60)),  # Щ
    (6, (0x7F, 0x48, 0x48, 0x30, 0x00, 0x7F, 0x00)),  # Ы
)

_WIDE_INDEX = {
    0x0416: 0, 0x0436: 0,
    0x0426: 1, 0x0446: 1,
    0x0427: 2, 0x0447: 2,
    0x0428: 3, 0x0448: 3,
    0x0429: 4, 0x0449: 4,
    0x042B: 5, 0x044B: 5,
}

_REPLACEMENT = ord("?")


@dataclass(frozen=True)
class Glyph:
    """A glyph bitmap: ``width`` used columns out of ``cols`` (always 7 entries)."""

    width: int
    cols: tuple[int, ...]


@dataclass(frozen=True)
class RunGlyph:
    glyph: Glyph
    is_space: bool


@dataclass(frozen=True)
class Run:
    """A decoded line of glyphs and its total pixel width."""

    glyphs: tuple[RunGlyph, ...]
    width: int

    @property
    def count(self) -> int:
        return len(self.glyphs)


def _base_glyph(columns: tuple[int, ...]) -> Glyph:
    return Glyph(BASE_WIDTH, tuple(columns) + (0,) * (MAX_GLYPH_WIDTH - len(columns)))


def cyrillic_wide_glyph(codepoint: int) -> Glyph | None:
    """Return the wide variant of a Cyrillic letter, or None if it has none."""
    index = _WIDE_INDEX.get(codepoint)
    if index is None:
        return None
    width, cols = _WIDE_SHAPES[index]
    return Glyph(width, cols)


def glyph_for(codepoint: int) -> Glyph | None:
    """Return the glyph for a codepoint, or None if the font lacks it."""
    wide = cyrillic_wide_glyph(codepoint)
    if wide is not None:
        return wide
    if ASCII_FIRST <= codepoint <= ASCII_LAST:
        return _base_glyph(_ASCII[codepoint - ASCII_FIRST])
    if CYRILLIC_FIRST <= codepoint <= CYRILLIC_LAST:
        return _base_glyph(_CYRILLIC[(codepoint - CYRILLIC_FIRST) % len(_CYRILLIC)])
    if codepoint in (CYRILLIC_UPPER_YO, CYRILLIC_LOWER_YO):
        return _base_glyph(_CYRILLIC_YO)
    return None


def next_codepoint(data: bytes, offset: int) -> tuple[int, int]:
    """Decode one UTF-8 codepoint at ``offset``.

    Returns ``(codepoint, new_offset)``. Malformed input yields ``'?'``;
    a bad lead byte, truncated sequence or bad continuation byte consumes
    only the lead byte.
    """
    b0 = data[offset]
    offset += 1
    if b0 < 0x80:
        return b0, offset

    if b0 & 0xE0 == 0xC0:
        extra, codepoint, minimum = 1, b0 & 0x1F, 0x80
    elif b0 & 0xF0 == 0xE0:
        extra, codepoint, minimum = 2, b0 & 0x0F, 0x800
    elif b0 & 0xF8 == 0xF0:
        extra, codepoint, minimum = 3, b0 & 0x07, 0x10000
    else:
        return _REPLACEMENT, offset

    if offset + extra > len(data):
        return _REPLACEMENT, offset

    for b in data[offset:offset + extra]:
        if b & 0xC0 != 0x80:
            return _REPLACEMENT, offset
        codepoint = (codepoint << 6) | (b & 0x3F)
    offset += extra

    if codepoint < minimum or 0xD800 <= codepoint <= 0xDFFF or codepoint > 0x10FFFF:
        return _REPLACEMENT, offset
    return codepoint, offset


def measure_glyphs(glyphs) -> int:
    """Total width of glyphs laid out with the inter-glyph gap."""
    widths = [g.glyph.width for g in glyphs]
    return sum(widths) + GAP * max(len(widths) - 1, 0)


def decode_run(data: str | bytes) -> Run:
    """Decode UTF-8 text into at most MAX_RUN_GLYPHS glyphs."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    glyphs: list[RunGlyph] = []
    offset = 0
    while offset < len(raw) and len(glyphs) < MAX_RUN_GLYPHS:
        codepoint, offset = next_codepoint(raw, offset)
        glyph = glyph_for(codepoint) or glyph_for(_REPLACEMENT)
        glyphs.append(RunGlyph(glyph, codepoint == ord(" ")))
    return Run(tuple(glyphs), measure_glyphs(glyphs))