"""Chord symbol parsing from pychord notation into Harte qualities.

Catalog names use lead-sheet symbols ("Am7", "D/F#"). This module maps them
onto the structured ``Chord`` model through pychord so callers can read a
fingering's root, quality and bass without re-parsing strings.
"""

from __future__ import annotations

from chord_engine.models import Chord

MAX_CHORD_LENGTH = 15

# Mapping from pychord quality names to Harte shorthand
PYCHORD_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "m": "min",
    "m7": "min7",
    "7": "7",
    "maj7": "maj7",
    "M7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "aug": "aug",
    "m7-5": "hdim7",
    "m7b5": "hdim7",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "add9": "maj(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "6": "maj6",
    "m6": "min6",
    "5": "5",
    "7+5": "7(#5)",
    "7#5": "7(#5)",
    "7-5": "7(b5)",
    "7b5": "7(b5)",
    "7+9": "7(#9)",
    "7#9": "7(#9)",
    "7-9": "7(b9)",
    "7b9": "7(b9)",
}


def pychord_quality_to_harte(pychord_quality: str) -> str:
    """Convert a pychord quality string to Harte shorthand.

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> pychord_quality_to_harte("m7")
    'min7'
    >>> pychord_quality_to_harte("")
    'maj'
    """
    if pychord_quality in PYCHORD_TO_HARTE_QUALITY:
        return PYCHORD_TO_HARTE_QUALITY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ValueError(msg)


def from_pychord(chord_str: str) -> Chord:
    """Parse a pychord notation string into a Chord object.

    Raises
    ------
    ValueError
        If pychord rejects the symbol or its quality has no Harte mapping.

    Examples
    --------
    >>> chord = from_pychord("D/F#")
    >>> chord.root, chord.quality, chord.bass
    ('D', 'maj', 'F#')
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    return Chord(
        root=pc.root,
        quality=pychord_quality_to_harte(str(pc.quality)),
        bass=pc.on or None,
    )


def parse_chord_name(name: str) -> Chord | None:
    """Parse a chord name, returning None instead of raising.

    Examples
    --------
    >>> parse_chord_name("Am7").to_harte()
    'A:min7'
    >>> parse_chord_name("Sweet Home") is None
    True
    """
    if not name or len(name) > MAX_CHORD_LENGTH:
        return None
    try:
        return from_pychord(name)
    except Exception:  # pychord raises ValueError and friends on bad input
        return None


def is_chord_name(name: str) -> bool:
    """Check whether pychord understands ``name`` as a chord symbol."""
    return parse_chord_name(name) is not None
