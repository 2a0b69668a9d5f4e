"""Caller-facing chord engine.

``ChordEngine`` wires one catalog and one custom chord store into a resolver
and exposes the operations the app calls: resolve, transpose, identify,
validate, list and suggest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_engine.catalog import ChordCatalog
from chord_engine.custom import CustomChordStore
from chord_engine.matcher import find_matches
from chord_engine.notation import TRANSPOSE_SEPARATOR, notation_for
from chord_engine.resolver import ChordResolver
from chord_engine.suggestions import suggest_chords
from chord_engine.transposer import can_transpose, transpose

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_engine.matcher import ChordMatch
    from chord_engine.models import Fingering


class ChordEngine:
    """Chord lookup, transposition and identification over injected data.

    Parameters
    ----------
    catalog : ChordCatalog | None
        Built-in fingerings. A catalog of the built-in table is created when
        omitted.
    custom_chords : CustomChordStore | None
        User-defined fingerings. An empty store is created when omitted.

    Examples
    --------
    >>> engine = ChordEngine()
    >>> engine.resolve("G").positions
    (3, 2, 0, 0, 0, 3)
    >>> [name for name, _ in engine.find_matches([3, 2, 0, 0, 0, 3])]
    ['G']
    """

    def __init__(
        self,
        catalog: ChordCatalog | None = None,
        custom_chords: CustomChordStore | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else ChordCatalog()
        self.custom_chords = custom_chords if custom_chords is not None else CustomChordStore()
        self.resolver = ChordResolver(self.catalog, self.custom_chords)

    def resolve(self, notation: str) -> Fingering | None:
        """Resolve ``"G"``, ``"G#320033"`` or ``"Am@7"`` style names."""
        return self.resolver.resolve(notation)

    def transpose(self, fingering: Fingering, target_fret: int) -> Fingering | None:
        return transpose(fingering, target_fret)

    def can_transpose(self, fingering: Fingering) -> bool:
        return can_transpose(fingering)

    def find_matches(
        self,
        positions: Iterable[int],
        barre: int | None = None,
        include_custom: bool = False,
    ) -> list[ChordMatch]:
        """Identify a chord from finger positions.

        Custom chords are only scanned when ``include_custom`` is set.
        """
        custom = self.custom_chords.list() if include_custom else ()
        return find_matches(self.catalog, positions, barre=barre, custom_chords=custom)

    def validate_chord_name(self, notation: str) -> tuple[bool, str | None]:
        return self.resolver.validate_chord_name(notation)

    def notation_for(self, fingering: Fingering) -> str:
        """Name a fingering so that ``resolve`` returns it again.

        Catalog and custom fingerings use ``notation_for``. A shape moved with
        ``transpose`` is named ``name@fret``, or ``label@fret`` for a moved
        alternate voicing. When nothing resolves back the catalog notation is
        returned as is.

        Examples
        --------
        >>> engine = ChordEngine()
        >>> engine.notation_for(engine.transpose(engine.resolve("F"), 5))
        'F@5'
        """
        notation = notation_for(fingering)
        if not fingering.fretted or self.resolve(notation) == fingering:
            return notation

        fret = min(fingering.fretted)
        for base_name in (fingering.name, fingering.label):
            moved = f"{base_name}{TRANSPOSE_SEPARATOR}{fret}"
            if self.resolve(moved) == fingering:
                return moved
        return notation

    def is_custom_chord(self, name: str) -> bool:
        return name in self.custom_chords

    def all_chord_names(self, include_custom: bool = False) -> list[str]:
        """Sorted catalog names, plus custom display names when asked."""
        names = self.catalog.names()
        if include_custom:
            names = sorted({*names, *self.custom_chords.display_names()})
        return names

    def suggest_chords(self, key: int, mode: int, capo: int = 0) -> list[str]:
        return suggest_chords(self.resolver, key, mode, capo)
