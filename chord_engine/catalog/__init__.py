"""Built-in chord fingering catalog.

The catalog is an ordered table rather than a name-keyed mapping so that one
chord name can carry several voicings.
"""

from chord_engine.catalog.catalog import ChordCatalog, load_builtin_entries, name_variations, preferred

__all__ = [
    "ChordCatalog",
    "load_builtin_entries",
    "name_variations",
    "preferred",
]
