"""Shape transposition for movable fingerings."""

from __future__ import annotations

import dataclasses
import logging

from chord_engine.models import MAX_FRET, MIN_FRET, MUTED, OPEN, Fingering

logger = logging.getLogger(__name__)


def can_transpose(fingering: Fingering) -> bool:
    """Check whether a fingering is movable: no open strings, some fretted notes.

    Examples
    --------
    >>> can_transpose(Fingering(name="Am", positions=(-1, 0, 2, 2, 1, 0)))
    False
    >>> can_transpose(Fingering(name="F", positions=(1, 3, 3, 2, 1, 1), barre=1))
    True
    """
    return not fingering.has_open_strings and bool(fingering.fretted)


def _in_range(fret: int) -> bool:
    return MIN_FRET <= fret <= MAX_FRET


def transpose(fingering: Fingering, target_fret: int) -> Fingering | None:
    """Move a fingering so its lowest fretted note lands on ``target_fret``.

    Muted strings stay muted and every fretted note (and the barre) moves by
    the same offset. The name and label are kept.

    Parameters
    ----------
    fingering : Fingering
        The shape to move.
    target_fret : int
        Fret for the lowest fretted note, ``1..15``.

    Returns
    -------
    Fingering | None
        The moved shape, or None when the target is out of range, the shape
        has open strings or no fretted notes, or any note or the barre would
        leave ``1..15``.

    Examples
    --------
    >>> f = Fingering(name="F", positions=(1, 3, 3, 2, 1, 1), barre=1)
    >>> g = transpose(f, 3)
    >>> g.positions, g.barre
    ((3, 5, 5, 4, 3, 3), 3)
    """
    if not _in_range(target_fret):
        logger.debug("Target fret %d outside %d..%d", target_fret, MIN_FRET, MAX_FRET)
        return None

    if not can_transpose(fingering):
        logger.debug("%s cannot be transposed", fingering.label)
        return None

    offset = target_fret - min(fingering.fretted)

    positions = []
    for fret in fingering.positions:
        if fret == MUTED:
            positions.append(MUTED)
            continue
        moved = fret + offset
        if fret == OPEN or not _in_range(moved):
            logger.debug("%s does not fit at fret %d", fingering.label, target_fret)
            return None
        positions.append(moved)

    barre = fingering.barre
    if barre is not None:
        barre += offset
        if not _in_range(barre):
            logger.debug("Barre of %s does not fit at fret %d", fingering.label, target_fret)
            return None

    return dataclasses.replace(fingering, positions=tuple(positions), barre=barre)
