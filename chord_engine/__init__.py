"""Guitar chord knowledge engine.

This library resolves chord names to guitar fingerings, moves movable shapes
up the neck, identifies chords from finger positions and pulls capo and chord
lists out of pasted chord charts.

Examples
--------
>>> from chord_engine import ChordEngine, parse_chart

>>> engine = ChordEngine()
>>> engine.resolve("F@3").positions
(3, 5, 5, 4, 3, 3)
>>> engine.resolve("Am@7") is None
True

>>> chart = parse_chart("Capo 2\\nG  D  Em  C\\n")
>>> chart.capo_position, chart.chords
(2, ('G', 'D', 'Em', 'C'))
"""

import logging

from chord_engine.catalog import ChordCatalog
from chord_engine.chart_parser import ParsedChart, parse_chart
from chord_engine.custom import CustomChordStore, DuplicateChordNameError
from chord_engine.engine import ChordEngine
from chord_engine.models import Chord, CustomChord, Fingering, NotationRequest, detect_barre, extract_base_name
from chord_engine.notation import decode_fingerprint, encode_fingerprint, notation_for, parse_notation
from chord_engine.resolver import ChordResolver
from chord_engine.transposer import can_transpose, transpose

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Chord",
    "ChordCatalog",
    "ChordEngine",
    "ChordResolver",
    "CustomChord",
    "CustomChordStore",
    "DuplicateChordNameError",
    "Fingering",
    "NotationRequest",
    "ParsedChart",
    "can_transpose",
    "decode_fingerprint",
    "detect_barre",
    "encode_fingerprint",
    "extract_base_name",
    "notation_for",
    "parse_chart",
    "parse_notation",
    "transpose",
]
