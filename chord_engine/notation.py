"""Chord notation codec.

Chord names in a song may carry two optional suffixes:

- ``#fingerprint`` pins an exact voicing, e.g. ``"G#320033"``. Each string is
  ``X``/``x`` (muted) or a single digit; frets of 10 and above are written in
  parentheses, e.g. ``"X(10)(12)(12)(12)(10)"``.
- ``@fret`` moves a movable shape to a fret, e.g. ``"Am@7"``.

Only the first ``#`` counts. Sharp roots such as ``"C#"`` are kept intact
because the text after the ``#`` is not a valid fingerprint, in which case the
whole string is treated as a plain name.
"""

from __future__ import annotations

import re

from chord_engine.models import MUTED, STRING_COUNT, Fingering, NotationRequest

VOICING_SEPARATOR = "#"
TRANSPOSE_SEPARATOR = "@"

FINGERPRINT_RE = re.compile(r"(?:[Xx0-9]|\([0-9]{1,2}\))+")
FINGERPRINT_TOKEN_RE = re.compile(r"[Xx]|[0-9]|\(([0-9]{1,2})\)")
FRET_NUMBER_RE = re.compile(r"[+-]?[0-9]{1,4}")

MAX_FINGERPRINT_FRET = 15


def encode_fingerprint(positions: tuple[int, ...] | list[int]) -> str:
    """Encode string positions as a fingerprint.

    Examples
    --------
    >>> encode_fingerprint([-1, 0, 2, 2, 1, 0])
    'X02210'
    >>> encode_fingerprint([-1, 10, 12, 12, 12, 10])
    'X(10)(12)(12)(12)(10)'
    """
    parts = []
    for fret in positions:
        if fret == MUTED:
            parts.append("X")
        elif fret >= 10:
            parts.append(f"({fret})")
        else:
            parts.append(str(fret))
    return "".join(parts)


def decode_fingerprint(fingerprint: str) -> tuple[int, ...] | None:
    """Decode a fingerprint into six positions, or None if it is malformed.

    Examples
    --------
    >>> decode_fingerprint("320033")
    (3, 2, 0, 0, 3, 3)
    >>> decode_fingerprint("x02210")
    (-1, 0, 2, 2, 1, 0)
    >>> decode_fingerprint("m7") is None
    True
    """
    if not FINGERPRINT_RE.fullmatch(fingerprint):
        return None

    positions: list[int] = []
    for match in FINGERPRINT_TOKEN_RE.finditer(fingerprint):
        token = match.group(0)
        if token in ("X", "x"):
            positions.append(MUTED)
        elif match.group(1) is not None:
            fret = int(match.group(1))
            if fret > MAX_FINGERPRINT_FRET:
                return None
            positions.append(fret)
        else:
            positions.append(int(token))

    if len(positions) != STRING_COUNT:
        return None
    return tuple(positions)


def split_voicing(name: str) -> tuple[str, tuple[int, ...] | None]:
    """Split ``name#fingerprint`` on the first ``#``.

    Returns the full name and None when there is no ``#`` or the remainder
    does not decode.

    Examples
    --------
    >>> split_voicing("G#320033")
    ('G', (3, 2, 0, 0, 3, 3))
    >>> split_voicing("F#m")
    ('F#m', None)
    """
    base, separator, fingerprint = name.partition(VOICING_SEPARATOR)
    if not separator:
        return name, None
    positions = decode_fingerprint(fingerprint)
    if positions is None:
        return name, None
    return base, positions


def split_transposition(name: str) -> tuple[str, int | None]:
    """Split ``name@fret`` on the first ``@``.

    The fret is an integer of at most four digits; anything else leaves the
    whole string as the name.

    Examples
    --------
    >>> split_transposition("Am@7")
    ('Am', 7)
    >>> split_transposition("Am@seven")
    ('Am@seven', None)
    """
    base, separator, target = name.partition(TRANSPOSE_SEPARATOR)
    base = base.strip()
    target = target.strip()
    if not separator or not base or not FRET_NUMBER_RE.fullmatch(target):
        return name, None
    return base, int(target)


def parse_notation(text: str) -> NotationRequest:
    """Parse a chord notation string into a tagged request.

    The voicing split runs first; the transposition split only applies when no
    valid fingerprint was found.

    Examples
    --------
    >>> parse_notation("Am@7")
    NotationRequest(kind='transposed', raw='Am@7', base_name='Am', positions=None, target_fret=7)
    >>> parse_notation("C#").kind
    'plain'
    """
    raw = text.strip()

    base, positions = split_voicing(raw)
    if positions is not None:
        return NotationRequest(kind="voiced", raw=raw, base_name=base, positions=positions)

    base, target_fret = split_transposition(raw)
    if target_fret is not None:
        return NotationRequest(kind="transposed", raw=raw, base_name=base, target_fret=target_fret)

    return NotationRequest(kind="plain", raw=raw, base_name=raw)


def notation_for(fingering: Fingering) -> str:
    """Name a catalog fingering so that resolving the result finds it again.

    Default voicings use their plain name; alternates get a fingerprint. Shapes
    moved by ``transpose`` keep their name, so ``ChordEngine.notation_for``
    handles those.

    Examples
    --------
    >>> g_barre = Fingering(name="G", positions=(3, 5, 5, 4, 3, 3), barre=3, is_default=False)
    >>> notation_for(g_barre)
    'G#355433'
    """
    if fingering.is_default:
        return fingering.name
    return f"{fingering.name}{VOICING_SEPARATOR}{encode_fingerprint(fingering.positions)}"
