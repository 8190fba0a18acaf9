#!/usr/bin/env python3
"""Apply Tracy or Sousa spacing with estimated defaults to a font file."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from saame_spacing_lib import (
    apply_sousa_method,
    apply_tracy_method,
    average_side_bearing,
    create_sousa_settings,
    create_tracy_settings,
    font_io,
    read_side_bearings,
)

REPORT_CHARS = "HOnoAVavx"


def apply_spacing(font_path: str, method: str = "sousa") -> Path:
    """Space a font with default settings and save a copy next to it."""
    path = Path(font_path)
    print(f"Loading font: {path}")
    font = font_io.decode(path.read_bytes())
    print(f"Font loaded: {len(font)} glyphs")
    print(f"Average side bearing before: {average_side_bearing(font)}")

    if method == "tracy":
        settings = create_tracy_settings(font)
        count = apply_tracy_method(font, settings)
    else:
        settings = create_sousa_settings(font)
        count = apply_sousa_method(font, settings)

    print(f"\nMasters ({method}):")
    for char, pair in settings.masters.items():
        print(f"  {char}: {pair.left} / {pair.right}")

    print(f"\nGlyph updates: {count}")
    print(f"Average side bearing after: {average_side_bearing(font)}")

    print("\n" + "-" * 40)
    for char in REPORT_CHARS:
        lsb, rsb = read_side_bearings(font, char)
        print(f"  {char}: {lsb:>5} {rsb:>5}")

    out_path = path.with_name(f"{path.stem}_{method}{path.suffix}")
    out_path.write_bytes(font_io.encode(font))
    print(f"\nSaved: {out_path}")
    return out_path


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: apply_spacing.py FONT [tracy|sousa]")
        sys.exit(1)
    method = sys.argv[2] if len(sys.argv) > 2 else "sousa"
    if method not in ("tracy", "sousa"):
        print(f"Unknown method: {method}")
        sys.exit(1)
    apply_spacing(sys.argv[1], method)
