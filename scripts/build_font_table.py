"""Regenerate src/badgen/lato.py from a Lato Regular TrueType file.

Usage: python scripts/build_font_table.py Lato-Regular.ttf [-o src/badgen/lato.py]

Only the printable ASCII and Latin-1 Supplement ranges are extracted.
Composite glyphs are flattened into plain contours.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from fontTools.misc.roundTools import otRound
from fontTools.ttLib import TTFont

CODES = [*range(0x20, 0x7F), *range(0xA0, 0x100)]
OUTPUT = Path(__file__).resolve().parent.parent / "src" / "badgen" / "lato.py"

HEADER = '''"""Glyph table for Lato Regular, ASCII and Latin-1 Supplement subset.

Lato is copyright (c) 2010-2015 by tyPoland Lukasz Dziedzic and is
licensed under the SIL Open Font License, Version 1.1.

Every entry maps a character code to ``(advance, outline)`` in font design
units. An outline is a list of TrueType contours separated by ``;``. Points
are separated by spaces: ``x,y`` is an on-curve point and ``x:y`` is an
off-curve quadratic control point. Glyphs without ink have an empty outline.
"""

from __future__ import annotations

FAMILY = "Lato"
LICENSE = "SIL Open Font License, Version 1.1"
'''


def encode_outline(font: TTFont, glyph_name: str) -> str:
    glyf = font["glyf"]
    coords, end_pts, flags = glyf[glyph_name].getCoordinates(glyf)
    contours = []
    start = 0
    for end in end_pts:
        points = []
        for i in range(start, end + 1):
            x, y = (otRound(v) for v in coords[i])
            points.append(f"{x},{y}" if flags[i] & 1 else f"{x}:{y}")
        contours.append(" ".join(points))
        start = end + 1
    return ";".join(contours)


def _comment(code: int) -> str:
    printable = 0x20 < code < 0x7F or (code > 0xA0 and code != 0xAD)
    return f"U+{code:04X} {chr(code)}" if printable else f"U+{code:04X}"


def build_table(font: TTFont) -> str:
    cmap = font.getBestCmap()
    hmtx = font["hmtx"].metrics
    hhea = font["hhea"]
    notdef = font.getGlyphOrder()[0]

    lines = [
        HEADER.rstrip("\n"),
        f"UNITS_PER_EM = {font['head'].unitsPerEm}",
        f"ASCENDER = {hhea.ascent}",
        f"DESCENDER = {hhea.descent}",
        "",
        "# Drawn for any character outside GLYPHS.",
        f'NOTDEF: tuple[int, str] = ({hmtx[notdef][0]}, "{encode_outline(font, notdef)}")',
        "",
        "GLYPHS: dict[int, tuple[int, str]] = {",
    ]
    for code in CODES:
        name = cmap.get(code)
        if name is None:
            continue
        advance = hmtx[name][0]
        lines.append(
            f'    0x{code:02x}: ({advance}, "{encode_outline(font, name)}"),  # {_comment(code)}'
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract the embedded Lato glyph table.")
    parser.add_argument("font", type=Path, help="path to Lato-Regular.ttf")
    parser.add_argument("-o", "--output", type=Path, default=OUTPUT)
    args = parser.parse_args()

    table = build_table(TTFont(str(args.font)))
    args.output.write_text(table, encoding="utf-8")
    print(f"Wrote {args.output}")


if __name__ == "__main__":
    main()
