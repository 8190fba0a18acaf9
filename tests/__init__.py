"""
Tests package for saame_spacing_lib.

Tests build in-memory fonts with simple rectangular and elliptical
outlines (see mocks.py); the font_io tests build real binary and UFO
fonts with fontTools and defcon.

Run all tests:
    python -m pytest tests/ -v
"""
