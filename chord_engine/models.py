"""Data models for the chord engine.

This module provides the value types shared by the catalog, the custom chord
store, the resolver and the matcher: a structured ``Chord`` symbol, the
six-string ``Fingering``, user-created ``CustomChord`` records and the parsed
``NotationRequest``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

STRING_COUNT = 6
MUTED = -1
OPEN = 0
MIN_FRET = 1
MAX_FRET = 15

# Diagram window constants
NUT_START_MAX_FRET = 3
NUT_START_MAX_FRET_WITH_OPEN = 4
MIN_VISIBLE_FRETS = 5


@dataclass(frozen=True)
class Chord:
    """Structured chord symbol.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    quality : str
        The chord quality in Harte notation (e.g., "maj", "min7", "dim").
    bass : str | None
        The bass note if different from root (for slash chords).

    Examples
    --------
    >>> chord = Chord(root="G", quality="min7")
    >>> chord.to_harte()
    'G:min7'
    """

    root: str
    quality: str
    bass: str | None = None

    def to_harte(self) -> str:
        """Render as Harte notation (e.g., "G:min7", "C:maj/E")."""
        result = f"{self.root}:{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def __str__(self) -> str:
        return self.to_harte()


def validate_positions(positions: tuple[int, ...]) -> None:
    """Raise ``ValueError`` unless ``positions`` is a playable six-string shape."""
    if len(positions) != STRING_COUNT:
        msg = f"Expected {STRING_COUNT} string positions, got {len(positions)}"
        raise ValueError(msg)
    for fret in positions:
        if fret != MUTED and not OPEN <= fret <= MAX_FRET:
            msg = f"Fret {fret} is outside {MUTED}..{MAX_FRET}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Fingering:
    """A six-string fret pattern for one chord voicing.

    Parameters
    ----------
    name : str
        Lookup name (e.g., "G", "Am7", "D/F#"). Alternate voicings share the
        name of their default voicing.
    positions : tuple[int, ...]
        Six frets ordered low-E to high-e. ``-1`` mutes a string, ``0`` plays
        it open, ``1..15`` frets it.
    barre : int | None
        Fret covered by a barre, if any. Descriptive only.
    label : str
        Display label (e.g., "G Major", "G (barre 3)"). Defaults to ``name``.
    is_default : bool
        Whether this is the preferred voicing for ``name``.

    Examples
    --------
    >>> g = Fingering(name="G", positions=(3, 2, 0, 0, 0, 3), label="G Major")
    >>> g.fretted
    (3, 2, 3)
    >>> g.position_marker is None
    True
    """

    name: str
    positions: tuple[int, ...]
    barre: int | None = None
    label: str = ""
    is_default: bool = True

    def __post_init__(self) -> None:
        positions = tuple(int(fret) for fret in self.positions)
        validate_positions(positions)
        object.__setattr__(self, "positions", positions)
        if not self.label:
            object.__setattr__(self, "label", self.name)

    @property
    def fretted(self) -> tuple[int, ...]:
        """Frets of the strings pressed down, low to high."""
        return tuple(fret for fret in self.positions if fret > OPEN)

    @property
    def has_open_strings(self) -> bool:
        return OPEN in self.positions

    @property
    def fret_range(self) -> tuple[int, int]:
        """Window of frets a diagram needs, as ``(start_fret, num_frets)``.

        Low shapes (and shapes with open strings reaching fret 4) are drawn
        from the nut, i.e. ``start_fret == 0``. At least five frets are shown.
        """
        fretted = self.fretted
        if not fretted:
            return 0, MIN_VISIBLE_FRETS

        min_fret = min(fretted)
        max_fret = max(fretted)
        from_nut = min_fret <= NUT_START_MAX_FRET or (
            self.has_open_strings and min_fret <= NUT_START_MAX_FRET_WITH_OPEN
        )
        start_fret = 0 if from_nut else min_fret
        return start_fret, max(MIN_VISIBLE_FRETS, max_fret - start_fret + 1)

    @property
    def position_marker(self) -> str | None:
        """Position text such as ``"7fr"``, or None when drawn from the nut."""
        start_fret, _ = self.fret_range
        return f"{start_fret}fr" if start_fret > 0 else None

    @property
    def chord(self) -> Chord | None:
        """The structured chord named by ``name``, or None if pychord rejects it."""
        from chord_engine.converter import parse_chord_name

        return parse_chord_name(self.name)


@dataclass(frozen=True)
class CustomChord:
    """A user-created fingering.

    Parameters
    ----------
    id : uuid.UUID
        Stable identity, kept across edits.
    base_name : str
        Chord family (e.g., "G" for "G (Sweet Home)").
    display_name : str
        Full user-facing name. Lookups by name use this field.
    positions : tuple[int, ...]
        Six frets, same encoding as ``Fingering.positions``.
    barre : int | None
        Barre fret, if any.
    created_at : datetime
        Creation time, preserved across edits.
    """

    id: uuid.UUID
    base_name: str
    display_name: str
    positions: tuple[int, ...]
    barre: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        positions = tuple(int(fret) for fret in self.positions)
        validate_positions(positions)
        object.__setattr__(self, "positions", positions)
        if not self.display_name:
            msg = "Custom chord display name must not be empty"
            raise ValueError(msg)

    @classmethod
    def create(
        cls,
        display_name: str,
        positions: tuple[int, ...] | list[int],
        barre: int | None = None,
    ) -> CustomChord:
        """Build a new custom chord the way the save action does.

        The display name is trimmed, the base name is derived from it, a new id
        and creation time are assigned and the barre is detected when not given.

        Examples
        --------
        >>> chord = CustomChord.create("G (Sweet Home)", [3, 2, 0, 0, 3, 3])
        >>> chord.base_name
        'G'
        """
        display_name = display_name.strip()
        positions = tuple(positions)
        return cls(
            id=uuid.uuid4(),
            base_name=extract_base_name(display_name),
            display_name=display_name,
            positions=positions,
            barre=barre if barre is not None else detect_barre(positions),
        )

    def edited(
        self,
        display_name: str,
        positions: tuple[int, ...] | list[int],
        barre: int | None = None,
    ) -> CustomChord:
        """Return a replacement record with the same id and creation time."""
        display_name = display_name.strip()
        positions = tuple(positions)
        return CustomChord(
            id=self.id,
            base_name=extract_base_name(display_name),
            display_name=display_name,
            positions=positions,
            barre=barre if barre is not None else detect_barre(positions),
            created_at=self.created_at,
        )

    def as_fingering(self) -> Fingering:
        """Render as a ``Fingering`` named by the display name."""
        return Fingering(
            name=self.display_name,
            positions=self.positions,
            barre=self.barre,
            label=self.display_name,
        )


def extract_base_name(display_name: str) -> str:
    """Strip a parenthetical suffix from a display name.

    Examples
    --------
    >>> extract_base_name("G (Sweet Home)")
    'G'
    >>> extract_base_name("Cadd9")
    'Cadd9'
    """
    head, paren, _ = display_name.partition("(")
    if paren:
        return head.strip()
    return display_name


def detect_barre(positions: tuple[int, ...] | list[int]) -> int | None:
    """Guess the barre fret: three or more fretted notes on the lowest fret.

    Examples
    --------
    >>> detect_barre([1, 3, 3, 2, 1, 1])
    1
    >>> detect_barre([3, 2, 0, 0, 0, 3]) is None
    True
    """
    fretted = [fret for fret in positions if fret > OPEN]
    if len(fretted) < 3:
        return None
    lowest = min(fretted)
    return lowest if fretted.count(lowest) >= 3 else None


NotationKind = Literal["plain", "voiced", "transposed"]


@dataclass(frozen=True)
class NotationRequest:
    """A chord notation string split into its parts.

    Parameters
    ----------
    kind : NotationKind
        "plain" for a bare name, "voiced" for ``name#fingerprint``,
        "transposed" for ``name@fret``.
    raw : str
        The trimmed input.
    base_name : str
        The chord name to look up.
    positions : tuple[int, ...] | None
        Decoded fingerprint when ``kind == "voiced"``.
    target_fret : int | None
        Requested fret when ``kind == "transposed"``.
    """

    kind: NotationKind
    raw: str
    base_name: str
    positions: tuple[int, ...] | None = None
    target_fret: int | None = None
