"""Identify chords from finger positions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from chord_engine.models import STRING_COUNT

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_engine.catalog import ChordCatalog
    from chord_engine.models import CustomChord, Fingering

ChordMatch = tuple[str, "Fingering"]


def _sort_key(match: ChordMatch, barre: int | None) -> tuple[bool, str]:
    name, fingering = match
    if barre is None:
        return False, name
    return fingering.barre != barre, name


def find_matches(
    catalog: ChordCatalog,
    positions: Iterable[int],
    barre: int | None = None,
    custom_chords: Iterable[CustomChord] = (),
) -> list[ChordMatch]:
    """Find every entry whose six positions equal ``positions`` exactly.

    Parameters
    ----------
    catalog : ChordCatalog
        Catalog to scan.
    positions : Iterable[int]
        Six frets, low-E to high-e.
    barre : int | None
        Barre hint. It never filters; entries with the same barre sort first.
    custom_chords : Iterable[CustomChord]
        Custom chords to scan as well. Their matches follow the catalog's.

    Returns
    -------
    list[tuple[str, Fingering]]
        ``(name, fingering)`` pairs ordered by barre agreement, then name.
        Empty when nothing matches or ``positions`` is not six strings long.

    Examples
    --------
    >>> from chord_engine.catalog import ChordCatalog
    >>> [name for name, _ in find_matches(ChordCatalog(), [3, 2, 0, 0, 0, 3])]
    ['G']
    """
    query = tuple(positions)
    if len(query) != STRING_COUNT:
        return []

    rows = np.flatnonzero((catalog.positions == np.asarray(query)).all(axis=1))
    matches = [(catalog[int(row)].name, catalog[int(row)]) for row in rows]
    matches.sort(key=lambda match: _sort_key(match, barre))

    custom_matches = [
        (chord.display_name, chord.as_fingering()) for chord in custom_chords if chord.positions == query
    ]
    custom_matches.sort(key=lambda match: _sort_key(match, barre))

    return matches + custom_matches
