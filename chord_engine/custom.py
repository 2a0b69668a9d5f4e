"""User-defined chord fingerings.

The store holds an immutable snapshot of custom chords. Mutations build a new
snapshot under a lock and swap it in, so readers never see a half-applied
change and never need to lock.
"""

from __future__ import annotations

import json
import logging
import threading
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any

from chord_engine.models import CustomChord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class DuplicateChordNameError(ValueError):
    """Raised when two custom chords would share a display name."""


def chord_to_record(chord: CustomChord) -> dict[str, Any]:
    """Serialise a custom chord to a JSON-compatible record.

    The keys follow the app's record shape, but ``dateCreated`` is an ISO 8601
    string, so records only round-trip through this module.

    Examples
    --------
    >>> chord = CustomChord.create("G (Sweet Home)", [3, 2, 0, 0, 3, 3])
    >>> sorted(chord_to_record(chord))
    ['barre', 'dateCreated', 'displayName', 'fingers', 'id', 'name']
    """
    return {
        "id": str(chord.id),
        "fingers": list(chord.positions),
        "name": chord.base_name,
        "displayName": chord.display_name,
        "barre": chord.barre,
        "dateCreated": chord.created_at.isoformat(),
    }


def chord_from_record(record: dict[str, Any]) -> CustomChord:
    """Deserialise a record produced by ``chord_to_record``.

    Raises
    ------
    ValueError
        If a field is missing or invalid (wrong string count, empty name).
    """
    try:
        barre = record.get("barre")
        return CustomChord(
            id=uuid.UUID(str(record["id"])),
            base_name=str(record.get("name") or ""),
            display_name=str(record["displayName"]),
            positions=tuple(int(fret) for fret in record["fingers"]),
            barre=int(barre) if barre is not None else None,
            created_at=datetime.fromisoformat(str(record["dateCreated"])),
        )
    except (KeyError, TypeError, AttributeError, OverflowError) as e:
        msg = f"Malformed custom chord record: {e}"
        raise ValueError(msg) from e


class CustomChordStore:
    """Thread-safe collection of custom chords keyed by id.

    Display names are unique within the store.

    Parameters
    ----------
    chords : Iterable[CustomChord]
        Initial contents.

    Examples
    --------
    >>> store = CustomChordStore()
    >>> chord = CustomChord.create("G (Sweet Home)", [3, 2, 0, 0, 3, 3])
    >>> store.add(chord)
    >>> store.find_by_display_name("G (Sweet Home)") == chord
    True
    """

    def __init__(self, chords: Iterable[CustomChord] = ()) -> None:
        self._lock = threading.Lock()
        self._chords: tuple[CustomChord, ...] = ()
        for chord in chords:
            self.add(chord)

    def __len__(self) -> int:
        return len(self._chords)

    def __iter__(self) -> Iterator[CustomChord]:
        return iter(self._chords)

    def __contains__(self, display_name: object) -> bool:
        return any(chord.display_name == display_name for chord in self._chords)

    def list(self) -> list[CustomChord]:
        """Snapshot of all custom chords in insertion order."""
        return list(self._chords)

    def display_names(self) -> list[str]:
        return [chord.display_name for chord in self._chords]

    def find_by_display_name(self, name: str) -> CustomChord | None:
        for chord in self._chords:
            if chord.display_name == name:
                return chord
        return None

    def find_by_id(self, chord_id: uuid.UUID) -> CustomChord | None:
        for chord in self._chords:
            if chord.id == chord_id:
                return chord
        return None

    def _check_name_free(self, chords: tuple[CustomChord, ...], candidate: CustomChord) -> None:
        for chord in chords:
            if chord.display_name == candidate.display_name and chord.id != candidate.id:
                msg = f"A custom chord named {candidate.display_name!r} already exists"
                raise DuplicateChordNameError(msg)

    def add(self, chord: CustomChord) -> None:
        """Add a new chord.

        Raises
        ------
        DuplicateChordNameError
            If another chord already uses the display name.
        ValueError
            If a chord with the same id is already stored.
        """
        with self._lock:
            chords = self._chords
            if any(existing.id == chord.id for existing in chords):
                msg = f"Custom chord {chord.id} already exists"
                raise ValueError(msg)
            self._check_name_free(chords, chord)
            self._chords = (*chords, chord)
        logger.debug("Added custom chord %r", chord.display_name)

    def update(self, chord: CustomChord) -> CustomChord | None:
        """Replace the chord with the same id, keeping its position.

        Returns
        -------
        CustomChord | None
            The replaced chord, or None if no chord has that id (nothing changes).

        Raises
        ------
        DuplicateChordNameError
            If a different chord already uses the new display name.
        """
        with self._lock:
            chords = self._chords
            for index, existing in enumerate(chords):
                if existing.id == chord.id:
                    break
            else:
                return None
            self._check_name_free(chords, chord)
            self._chords = (*chords[:index], chord, *chords[index + 1 :])
        logger.debug("Updated custom chord %r", chord.display_name)
        return existing

    def delete(self, chord_id: uuid.UUID) -> CustomChord | None:
        """Remove a chord by id, returning it, or None if it was not stored."""
        with self._lock:
            chords = self._chords
            removed = next((chord for chord in chords if chord.id == chord_id), None)
            if removed is None:
                return None
            self._chords = tuple(chord for chord in chords if chord.id != chord_id)
        logger.debug("Deleted custom chord %r", removed.display_name)
        return removed

    def to_records(self) -> list[dict[str, Any]]:
        return [chord_to_record(chord) for chord in self._chords]

    def dumps(self) -> str:
        """Serialise the store to a JSON array."""
        return json.dumps(self.to_records())

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> CustomChordStore:
        """Build a store from records, dropping malformed or colliding ones.

        Records with the wrong number of strings, an empty display name or
        unreadable fields are skipped with a warning; the rest still load.
        """
        store = cls()
        for record in records:
            try:
                chord = chord_from_record(record)
                store.add(chord)
            except ValueError as e:
                logger.warning("Dropping custom chord record: %s", e)
        return store

    @classmethod
    def loads(cls, text: str) -> CustomChordStore:
        """Build a store from a JSON array; undecodable input gives an empty store."""
        try:
            records = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("Failed to decode custom chords: %s", e)
            return cls()
        if not isinstance(records, list):
            logger.warning("Custom chords must be a JSON array, got %s", type(records).__name__)
            return cls()
        return cls.from_records(records)
