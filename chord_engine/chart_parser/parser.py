"""Capo and chord extraction for pasted chord charts."""

from __future__ import annotations

import re

from chord_engine.chart_parser.line_filter import filter_lines
from chord_engine.chart_parser.models import ParsedChart

CAPO_RE = re.compile(r"capo:?\s*(\d{1,4})", re.IGNORECASE)
MIN_CAPO = 0
MAX_CAPO = 7

# Root, accidental, quality, extension, sus, add, slash bass. The token must
# not run straight into another accidental or word character ("Cmajor").
CHORD_TOKEN_RE = re.compile(
    r"\b("
    r"[A-G][#♯b♭]?"
    r"(?:m|maj|min|dim|aug)?"
    r"(?:\d+)?"
    r"(?:sus\d?)?"
    r"(?:add\d+)?"
    r"(?:/[A-G][#♯b♭]?)?"
    r")(?![#♯b♭\w])"
)

# Words that match the chord pattern but are almost always lyrics
FALSE_POSITIVES: frozenset[str] = frozenset({"I", "Oh", "All"})


def extract_capo(text: str) -> int:
    """Find the first ``Capo N`` mention.

    Returns
    -------
    int
        The capo fret, or 0 when there is none or it is outside ``0..7``.

    Examples
    --------
    >>> extract_capo("Capo: 3rd fret")
    3
    >>> extract_capo("capo 9")
    0
    """
    match = CAPO_RE.search(text)
    if match is None:
        return MIN_CAPO
    capo = int(match.group(1))
    if not MIN_CAPO <= capo <= MAX_CAPO:
        return MIN_CAPO
    return capo


def extract_chords(text: str) -> list[str]:
    """Chord tokens from chart text, first occurrence order, no duplicates.

    Examples
    --------
    >>> extract_chords("G  D/F#  Em\\nG  C")
    ['G', 'D/F#', 'Em', 'C']
    """
    seen: set[str] = set()
    chords: list[str] = []
    for match in CHORD_TOKEN_RE.finditer(filter_lines(text)):
        chord = match.group(1)
        if chord in FALSE_POSITIVES or chord in seen:
            continue
        seen.add(chord)
        chords.append(chord)
    return chords


def parse_chart(text: str) -> ParsedChart:
    """Parse pasted chart text into a capo position and chord list.

    This is the main entry point for chart parsing. It never raises on text
    input; unrecognised content simply yields no chords.

    Parameters
    ----------
    text : str
        Raw pasted text.

    Returns
    -------
    ParsedChart
        Capo position, chords and the original text.

    Examples
    --------
    >>> chart = parse_chart("Capo: 2\\nVerse\\nG  D  Em  C\\n")
    >>> chart.capo_position, chart.chords
    (2, ('G', 'D', 'Em', 'C'))
    """
    return ParsedChart(
        capo_position=extract_capo(text),
        chords=tuple(extract_chords(text)),
        full_text=text,
    )
