"""Resolve chord notation strings to fingerings.

Resolution order for a notation string:

1. A custom chord whose display name equals the whole trimmed input.
2. ``name#fingerprint``: the catalog entry with that name and exactly those
   positions, with no further fallback.
3. ``name@fret`` or a plain name: a custom chord with that display name, else
   the catalog (exact name, exact label, then name variations), then the
   transposer when a fret was requested.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chord_engine.converter import is_chord_name
from chord_engine.models import MAX_FRET, MIN_FRET
from chord_engine.notation import parse_notation
from chord_engine.transposer import transpose

if TYPE_CHECKING:
    from chord_engine.catalog import ChordCatalog
    from chord_engine.custom import CustomChordStore
    from chord_engine.models import Fingering

logger = logging.getLogger(__name__)


class ChordResolver:
    """Look up chords by name across custom chords and the catalog.

    Parameters
    ----------
    catalog : ChordCatalog
        The built-in fingerings.
    custom_chords : CustomChordStore
        User-defined fingerings, consulted before the catalog.
    """

    def __init__(self, catalog: ChordCatalog, custom_chords: CustomChordStore) -> None:
        self.catalog = catalog
        self.custom_chords = custom_chords

    def find_base_chord(self, name: str) -> Fingering | None:
        """Resolve a bare name: custom display name first, then the catalog."""
        custom = self.custom_chords.find_by_display_name(name)
        if custom is not None:
            return custom.as_fingering()
        return self.catalog.find(name)

    def resolve(self, notation: str) -> Fingering | None:
        """Resolve a chord notation string.

        Parameters
        ----------
        notation : str
            A chord name, optionally with ``#fingerprint`` or ``@fret``.

        Returns
        -------
        Fingering | None
            The fingering to render, or None when nothing matches.

        Examples
        --------
        >>> from chord_engine.catalog import ChordCatalog
        >>> from chord_engine.custom import CustomChordStore
        >>> resolver = ChordResolver(ChordCatalog(), CustomChordStore())
        >>> resolver.resolve("F@3").positions
        (3, 5, 5, 4, 3, 3)
        >>> resolver.resolve("Am@7") is None
        True
        """
        request = parse_notation(notation)

        custom = self.custom_chords.find_by_display_name(request.raw)
        if custom is not None:
            return custom.as_fingering()

        if request.kind == "voiced":
            entry = self.catalog.find_voicing(request.base_name, request.positions)
            if entry is None:
                logger.debug("No %r voicing matches %r", request.base_name, request.raw)
            return entry

        source = self.find_base_chord(request.base_name)
        if source is None:
            logger.debug("Chord %r not found", request.base_name)
            return None

        if request.target_fret is None:
            return source
        return transpose(source, request.target_fret)

    def validate_chord_name(self, notation: str) -> tuple[bool, str | None]:
        """Check a notation string and explain why it would not resolve.

        Returns
        -------
        tuple[bool, str | None]
            ``(True, None)`` when the name resolves, else ``(False, message)``.

        Examples
        --------
        >>> from chord_engine.catalog import ChordCatalog
        >>> from chord_engine.custom import CustomChordStore
        >>> resolver = ChordResolver(ChordCatalog(), CustomChordStore())
        >>> resolver.validate_chord_name("G@20")
        (False, 'Fret position must be between 1 and 15')
        """
        request = parse_notation(notation)

        if request.raw in self.custom_chords:
            return True, None

        if request.kind == "voiced":
            if self.catalog.find_voicing(request.base_name, request.positions) is None:
                return False, f"Voicing '{request.raw}' not found"
            return True, None

        base_chord = self.find_base_chord(request.base_name)
        if base_chord is None:
            if not is_chord_name(request.base_name):
                return False, f"'{request.base_name}' is not a chord name"
            return False, f"Chord '{request.base_name}' not found"

        target_fret = request.target_fret
        if target_fret is None:
            return True, None

        if not MIN_FRET <= target_fret <= MAX_FRET:
            return False, f"Fret position must be between {MIN_FRET} and {MAX_FRET}"

        if base_chord.has_open_strings:
            return False, (
                f"Cannot transpose '{request.base_name}' - it has open strings. Try a barre chord version."
            )

        if transpose(base_chord, target_fret) is None:
            return False, f"Transposition to fret {target_fret} is out of range"

        return True, None
