"""Read-only chord catalog and base-name lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from chord_engine.catalog.data import ALTERNATE_VOICINGS, DEFAULT_VOICINGS
from chord_engine.models import STRING_COUNT, Fingering

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def name_variations(name: str) -> list[str]:
    """Rewrites tried when a name has no exact match, in order.

    Examples
    --------
    >>> name_variations("Amin")[0]
    'Am'
    >>> "C" in name_variations("C Major")
    True
    """
    candidates = [
        name.replace("min", "m"),
        name.replace("m", "min"),
        name.replace("maj", ""),
        name.replace("M", ""),
        name.replace("minor", "m"),
        name.replace("major", ""),
        name.replace(" Minor", "m"),
        name.replace(" Major", ""),
        f"{name} Major",
        f"{name} Minor",
        f"{name}m",
    ]
    variations: list[str] = []
    for candidate in candidates:
        candidate = candidate.strip()
        if candidate and candidate != name and candidate not in variations:
            variations.append(candidate)
    return variations


def preferred(voicings: list[Fingering]) -> Fingering | None:
    """Pick the first default voicing, else the first voicing."""
    for voicing in voicings:
        if voicing.is_default:
            return voicing
    return voicings[0] if voicings else None


def load_builtin_entries() -> list[Fingering]:
    """Build fingerings from the literal tables, defaults first."""
    entries = [
        Fingering(name=name, label=label, positions=positions, barre=barre, is_default=True)
        for name, label, positions, barre in DEFAULT_VOICINGS
    ]
    entries.extend(
        Fingering(name=name, label=label, positions=positions, barre=barre, is_default=False)
        for name, label, positions, barre in ALTERNATE_VOICINGS
    )
    return entries


class ChordCatalog:
    """Ordered, immutable collection of chord fingerings.

    Several entries may share a name; lookups prefer the entry flagged
    ``is_default`` and otherwise the first one in table order.

    Parameters
    ----------
    entries : Iterable[Fingering] | None
        Catalog contents. Defaults to the built-in table.

    Examples
    --------
    >>> catalog = ChordCatalog()
    >>> catalog.find("G").positions
    (3, 2, 0, 0, 0, 3)
    >>> catalog.find("A Minor").name
    'Am'
    """

    def __init__(self, entries: Iterable[Fingering] | None = None) -> None:
        self._entries: tuple[Fingering, ...] = tuple(load_builtin_entries() if entries is None else entries)
        self._positions: NDArray[np.int8] = np.array(
            [entry.positions for entry in self._entries], dtype=np.int8
        ).reshape(-1, STRING_COUNT)
        self._positions.setflags(write=False)

        self._by_name: dict[str, list[Fingering]] = {}
        self._by_label: dict[str, list[Fingering]] = {}
        for entry in self._entries:
            self._by_name.setdefault(entry.name, []).append(entry)
            self._by_label.setdefault(entry.label, []).append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Fingering]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> Fingering:
        return self._entries[index]

    @property
    def entries(self) -> tuple[Fingering, ...]:
        return self._entries

    @property
    def positions(self) -> NDArray[np.int8]:
        """Read-only ``(len(self), 6)`` matrix of entry positions."""
        return self._positions

    def voicings(self, name: str) -> list[Fingering]:
        """All entries named ``name``, in table order."""
        return list(self._by_name.get(name, ()))

    def names(self) -> list[str]:
        """Sorted, unique entry names."""
        return sorted(self._by_name)

    def find_exact(self, name: str) -> Fingering | None:
        """Preferred entry whose name, or failing that label, equals ``name``."""
        voicings = self._by_name.get(name) or self._by_label.get(name) or []
        return preferred(voicings)

    def find(self, name: str) -> Fingering | None:
        """Resolve a bare chord name, falling back to name variations.

        Parameters
        ----------
        name : str
            Chord name without voicing or transposition notation.

        Returns
        -------
        Fingering | None
            The preferred voicing, or None when no variation matches.
        """
        entry = self.find_exact(name)
        if entry is not None:
            return entry

        for variation in name_variations(name):
            entry = self.find_exact(variation)
            if entry is not None:
                logger.debug("Resolved %r through variation %r", name, variation)
                return entry
        return None

    def find_voicing(self, name: str, positions: tuple[int, ...]) -> Fingering | None:
        """Entry named ``name`` with exactly these positions."""
        for entry in self._by_name.get(name, ()):
            if entry.positions == tuple(positions):
                return entry
        return None
