"""Chord chart text parser.

This module extracts a capo position and the chords used from free-form text
pasted from tab sites or lyric sheets, skipping tablature, chord diagrams and
instruction lines.
"""

from chord_engine.chart_parser.line_filter import LineKind, classify_line, filter_lines
from chord_engine.chart_parser.models import ParsedChart
from chord_engine.chart_parser.parser import extract_capo, extract_chords, parse_chart

__all__ = [
    "LineKind",
    "ParsedChart",
    "classify_line",
    "extract_capo",
    "extract_chords",
    "filter_lines",
    "parse_chart",
]
