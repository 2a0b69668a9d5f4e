"""Suggest starter chords for a song from its key.

Keys are pitch classes (0 = C ... 11 = B) and modes follow the usual
audio-feature convention (1 = major, 0 = minor). With a capo the key is shifted
down so the suggested shapes are the ones actually fingered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_engine.resolver import ChordResolver

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
MAJOR_MODE = 1
DEFAULT_CHORDS = ["C", "G", "Am", "F", "D", "Em"]

# (semitones above the tonic, chord suffix) in scale-degree order
MAJOR_SCALE_CHORDS = [(0, ""), (2, "m"), (4, "m"), (5, ""), (7, ""), (9, "m"), (11, "dim")]
MINOR_SCALE_CHORDS = [(0, "m"), (2, "dim"), (3, ""), (5, "m"), (7, "m"), (8, ""), (10, "")]

# I-V-vi-IV-ii-iii and i-VI-III-VII-iv-v as zero-based scale degrees
MAJOR_PROGRESSION = [0, 4, 5, 3, 1, 2]
MINOR_PROGRESSION = [0, 5, 2, 6, 3, 4]


def scale_chords(key: int, mode: int) -> list[str]:
    """Diatonic triads of a key, tonic first.

    Examples
    --------
    >>> scale_chords(0, 1)
    ['C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim']
    >>> scale_chords(9, 0)[:3]
    ['Am', 'Bdim', 'C']
    """
    degrees = MAJOR_SCALE_CHORDS if mode == MAJOR_MODE else MINOR_SCALE_CHORDS
    return [f"{NOTE_NAMES[(key + semitones) % 12]}{suffix}" for semitones, suffix in degrees]


def is_known_key(key: int) -> bool:
    return 0 <= key < len(NOTE_NAMES)


def progression_for_key(key: int, mode: int, capo: int = 0) -> list[str]:
    """Common progression for a key, or the default chords if the key is unknown.

    The key is checked before the capo shift, so the "no key" value -1 never
    wraps round to B.

    Examples
    --------
    >>> progression_for_key(0, 1)
    ['C', 'G', 'Am', 'F', 'Dm', 'Em']
    >>> progression_for_key(6, 1, capo=2)[:4]
    ['E', 'B', 'C#m', 'A']
    """
    if not is_known_key(key):
        return list(DEFAULT_CHORDS)

    adjusted = (key - capo) % 12
    chords = scale_chords(adjusted, mode)
    order = MAJOR_PROGRESSION if mode == MAJOR_MODE else MINOR_PROGRESSION
    return [chords[degree] for degree in order]


def suggest_chords(resolver: ChordResolver, key: int, mode: int, capo: int = 0) -> list[str]:
    """Progression for a key, keeping only chords the resolver can find.

    An unknown key gives ``DEFAULT_CHORDS`` unfiltered.
    """
    if not is_known_key(key):
        return list(DEFAULT_CHORDS)
    return [name for name in progression_for_key(key, mode, capo) if resolver.resolve(name) is not None]
