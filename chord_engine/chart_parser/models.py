"""Data models for chord chart parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedChart:
    """Capo position and chord names pulled out of pasted chart text.

    Parameters
    ----------
    capo_position : int
        Capo fret, ``0`` when none was found or it was outside ``0..7``.
    chords : tuple[str, ...]
        Chord tokens in order of first appearance, without duplicates.
    full_text : str
        The original input text.
    """

    capo_position: int
    chords: tuple[str, ...]
    full_text: str
