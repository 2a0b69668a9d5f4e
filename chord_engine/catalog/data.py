"""Built-in chord fingerings.

Each row is ``(name, label, positions, barre)`` with positions ordered low-E to
high-e (``-1`` muted, ``0`` open). ``DEFAULT_VOICINGS`` holds the preferred
shape per name; ``ALTERNATE_VOICINGS`` holds extra shapes sharing those names.
"""

from __future__ import annotations

CatalogRow = tuple[str, str, tuple[int, int, int, int, int, int], int | None]

DEFAULT_VOICINGS: list[CatalogRow] = [
    # Major
    ("C", "C Major", (-1, 3, 2, 0, 1, 0), None),
    ("C#", "C# Major", (-1, 4, 6, 6, 6, 4), 4),
    ("Db", "Db Major", (-1, 4, 6, 6, 6, 4), 4),
    ("D", "D Major", (-1, -1, 0, 2, 3, 2), None),
    ("D#", "D# Major", (-1, -1, 1, 3, 4, 3), None),
    ("Eb", "Eb Major", (-1, -1, 1, 3, 4, 3), None),
    ("E", "E Major", (0, 2, 2, 1, 0, 0), None),
    ("F", "F Major", (1, 3, 3, 2, 1, 1), 1),
    ("F#", "F# Major", (2, 4, 4, 3, 2, 2), 2),
    ("Gb", "Gb Major", (2, 4, 4, 3, 2, 2), 2),
    ("G", "G Major", (3, 2, 0, 0, 0, 3), None),
    ("G#", "G# Major", (4, 6, 6, 5, 4, 4), 4),
    ("Ab", "Ab Major", (4, 6, 6, 5, 4, 4), 4),
    ("A", "A Major", (-1, 0, 2, 2, 2, 0), None),
    ("A#", "A# Major", (-1, 1, 3, 3, 3, 1), 1),
    ("Bb", "Bb Major", (-1, 1, 3, 3, 3, 1), 1),
    ("B", "B Major", (-1, 2, 4, 4, 4, 2), 2),
    # Minor
    ("Am", "A Minor", (-1, 0, 2, 2, 1, 0), None),
    ("A#m", "A# Minor", (-1, 1, 3, 3, 2, 1), 1),
    ("Bbm", "Bb Minor", (-1, 1, 3, 3, 2, 1), 1),
    ("Bm", "B Minor", (-1, 2, 4, 4, 3, 2), 2),
    ("Cm", "C Minor", (-1, 3, 5, 5, 4, 3), 3),
    ("C#m", "C# Minor", (-1, 4, 6, 6, 5, 4), 4),
    ("Dbm", "Db Minor", (-1, 4, 6, 6, 5, 4), 4),
    ("Dm", "D Minor", (-1, -1, 0, 2, 3, 1), None),
    ("D#m", "D# Minor", (-1, -1, 1, 3, 4, 2), None),
    ("Ebm", "Eb Minor", (-1, -1, 1, 3, 4, 2), None),
    ("Em", "E Minor", (0, 2, 2, 0, 0, 0), None),
    ("Fm", "F Minor", (1, 3, 3, 1, 1, 1), 1),
    ("F#m", "F# Minor", (2, 4, 4, 2, 2, 2), 2),
    ("Gbm", "Gb Minor", (2, 4, 4, 2, 2, 2), 2),
    ("Gm", "G Minor", (3, 5, 5, 3, 3, 3), 3),
    ("G#m", "G# Minor", (4, 6, 6, 4, 4, 4), 4),
    ("Abm", "Ab Minor", (4, 6, 6, 4, 4, 4), 4),
    # Dominant seventh
    ("A7", "A Seventh", (-1, 0, 2, 0, 2, 0), None),
    ("A#7", "A# Seventh", (-1, 1, 3, 1, 3, 1), 1),
    ("Bb7", "Bb Seventh", (-1, 1, 3, 1, 3, 1), 1),
    ("B7", "B Seventh", (-1, 2, 1, 2, 0, 2), None),
    ("C7", "C Seventh", (-1, 3, 2, 3, 1, 0), None),
    ("C#7", "C# Seventh", (-1, 4, 6, 4, 6, 4), 4),
    ("Db7", "Db Seventh", (-1, 4, 6, 4, 6, 4), 4),
    ("D7", "D Seventh", (-1, -1, 0, 2, 1, 2), None),
    ("D#7", "D# Seventh", (-1, -1, 1, 3, 2, 3), None),
    ("Eb7", "Eb Seventh", (-1, -1, 1, 3, 2, 3), None),
    ("E7", "E Seventh", (0, 2, 0, 1, 0, 0), None),
    ("F7", "F Seventh", (1, 3, 1, 2, 1, 1), 1),
    ("F#7", "F# Seventh", (2, 4, 2, 3, 2, 2), 2),
    ("Gb7", "Gb Seventh", (2, 4, 2, 3, 2, 2), 2),
    ("G7", "G Seventh", (3, 2, 0, 0, 0, 1), None),
    ("G#7", "G# Seventh", (4, 6, 4, 5, 4, 4), 4),
    ("Ab7", "Ab Seventh", (4, 6, 4, 5, 4, 4), 4),
    # Major seventh
    ("Amaj7", "A Major 7", (-1, 0, 2, 1, 2, 0), None),
    ("A#maj7", "A# Major 7", (-1, 1, 3, 2, 3, 1), 1),
    ("Bbmaj7", "Bb Major 7", (-1, 1, 3, 2, 3, 1), 1),
    ("Bmaj7", "B Major 7", (-1, 2, 4, 3, 4, 2), 2),
    ("Cmaj7", "C Major 7", (-1, 3, 2, 0, 0, 0), None),
    ("C#maj7", "C# Major 7", (-1, 4, 6, 5, 6, 4), 4),
    ("Dbmaj7", "Db Major 7", (-1, 4, 6, 5, 6, 4), 4),
    ("Dmaj7", "D Major 7", (-1, -1, 0, 2, 2, 2), None),
    ("D#maj7", "D# Major 7", (-1, -1, 1, 3, 3, 3), None),
    ("Ebmaj7", "Eb Major 7", (-1, -1, 1, 3, 3, 3), None),
    ("Emaj7", "E Major 7", (0, 2, 1, 1, 0, 0), None),
    ("Fmaj7", "F Major 7", (1, 3, 2, 2, 1, 1), 1),
    ("F#maj7", "F# Major 7", (2, 4, 3, 3, 2, 2), 2),
    ("Gbmaj7", "Gb Major 7", (2, 4, 3, 3, 2, 2), 2),
    ("Gmaj7", "G Major 7", (3, 2, 0, 0, 0, 2), None),
    ("G#maj7", "G# Major 7", (4, 6, 5, 5, 4, 4), 4),
    ("Abmaj7", "Ab Major 7", (4, 6, 5, 5, 4, 4), 4),
    # Minor seventh
    ("Am7", "A Minor 7", (-1, 0, 2, 0, 1, 0), None),
    ("A#m7", "A# Minor 7", (-1, 1, 3, 1, 2, 1), 1),
    ("Bbm7", "Bb Minor 7", (-1, 1, 3, 1, 2, 1), 1),
    ("Bm7", "B Minor 7", (-1, 2, 4, 2, 3, 2), 2),
    ("Cm7", "C Minor 7", (-1, 3, 5, 3, 4, 3), 3),
    ("C#m7", "C# Minor 7", (-1, 4, 6, 4, 5, 4), 4),
    ("Dbm7", "Db Minor 7", (-1, 4, 6, 4, 5, 4), 4),
    ("Dm7", "D Minor 7", (-1, -1, 0, 2, 1, 1), None),
    ("D#m7", "D# Minor 7", (-1, -1, 1, 3, 2, 2), None),
    ("Ebm7", "Eb Minor 7", (-1, -1, 1, 3, 2, 2), None),
    ("Em7", "E Minor 7", (0, 2, 0, 0, 0, 0), None),
    ("Fm7", "F Minor 7", (1, 3, 1, 1, 1, 1), 1),
    ("F#m7", "F# Minor 7", (2, 4, 2, 2, 2, 2), 2),
    ("Gbm7", "Gb Minor 7", (2, 4, 2, 2, 2, 2), 2),
    ("Gm7", "G Minor 7", (3, 5, 3, 3, 3, 3), 3),
    ("G#m7", "G# Minor 7", (4, 6, 4, 4, 4, 4), 4),
    ("Abm7", "Ab Minor 7", (4, 6, 4, 4, 4, 4), 4),
    # Suspended
    ("Asus4", "A Suspended 4", (-1, 0, 2, 2, 3, 0), None),
    ("Bsus4", "B Suspended 4", (-1, 2, 4, 4, 5, 2), 2),
    ("Csus4", "C Suspended 4", (-1, 3, 3, 0, 1, 1), None),
    ("Dsus4", "D Suspended 4", (-1, -1, 0, 2, 3, 3), None),
    ("Esus4", "E Suspended 4", (0, 2, 2, 2, 0, 0), None),
    ("Fsus4", "F Suspended 4", (1, 3, 3, 3, 1, 1), 1),
    ("Gsus4", "G Suspended 4", (3, 3, 0, 0, 1, 3), None),
    ("Asus2", "A Suspended 2", (-1, 0, 2, 2, 0, 0), None),
    ("Bsus2", "B Suspended 2", (-1, 2, 4, 4, 2, 2), 2),
    ("Csus2", "C Suspended 2", (-1, 3, 0, 0, 3, 3), None),
    ("Dsus2", "D Suspended 2", (-1, -1, 0, 2, 3, 0), None),
    ("Esus2", "E Suspended 2", (0, 2, 2, 4, 0, 0), None),
    ("Fsus2", "F Suspended 2", (1, 3, 3, 0, 1, 1), 1),
    ("Gsus2", "G Suspended 2", (3, 0, 0, 0, 3, 3), None),
    # Dominant seventh suspended
    ("A7sus4", "A Seventh Suspended 4", (-1, 0, 2, 0, 3, 0), None),
    ("B7sus4", "B Seventh Suspended 4", (-1, 2, 4, 2, 5, 2), 2),
    ("C7sus4", "C Seventh Suspended 4", (-1, 3, 3, 3, 1, 1), None),
    ("D7sus4", "D Seventh Suspended 4", (-1, -1, 0, 2, 1, 3), None),
    ("E7sus4", "E Seventh Suspended 4", (0, 2, 0, 2, 0, 0), None),
    ("G7sus4", "G Seventh Suspended 4", (3, 3, 0, 0, 1, 1), None),
    # Power chords
    ("A5", "A Power Chord", (-1, 0, 2, 2, -1, -1), None),
    ("B5", "B Power Chord", (-1, 2, 4, 4, -1, -1), None),
    ("C5", "C Power Chord", (-1, 3, 5, 5, -1, -1), None),
    ("D5", "D Power Chord", (-1, -1, 0, 2, 3, -1), None),
    ("E5", "E Power Chord", (0, 2, 2, -1, -1, -1), None),
    ("F5", "F Power Chord", (1, 3, 3, -1, -1, -1), None),
    ("F#5", "F# Power Chord", (2, 4, 4, -1, -1, -1), None),
    ("G5", "G Power Chord", (3, 5, 5, -1, -1, -1), None),
    # Sixth
    ("A6", "A Sixth", (-1, 0, 2, 2, 2, 2), None),
    ("C6", "C Sixth", (-1, 3, 2, 2, 1, 0), None),
    ("D6", "D Sixth", (-1, -1, 0, 2, 0, 2), None),
    ("E6", "E Sixth", (0, 2, 2, 1, 2, 0), None),
    ("F6", "F Sixth", (1, 3, 3, 2, 3, 1), 1),
    ("G6", "G Sixth", (3, 2, 0, 0, 0, 0), None),
    ("Am6", "A Minor 6", (-1, 0, 2, 2, 1, 2), None),
    ("Dm6", "D Minor 6", (-1, -1, 0, 2, 0, 1), None),
    ("Em6", "E Minor 6", (0, 2, 2, 0, 2, 0), None),
    # Add nine
    ("Cadd9", "C Add 9", (-1, 3, 2, 0, 3, 0), None),
    ("Dadd9", "D Add 9", (-1, -1, 0, 2, 3, 0), None),
    ("Eadd9", "E Add 9", (0, 2, 2, 1, 0, 2), None),
    ("Gadd9", "G Add 9", (3, 0, 0, 0, 0, 3), None),
    ("Aadd9", "A Add 9", (-1, 0, 2, 4, 2, 0), None),
    # Dominant ninth
    ("A9", "A Ninth", (-1, 0, 2, 4, 2, 3), None),
    ("C9", "C Ninth", (-1, 3, 2, 3, 3, 3), None),
    ("D9", "D Ninth", (-1, -1, 0, 2, 1, 0), None),
    ("E9", "E Ninth", (0, 2, 0, 1, 0, 2), None),
    ("G9", "G Ninth", (3, 2, 0, 2, 0, 1), None),
    # Major ninth
    ("Amaj9", "A Major 9", (-1, 0, 2, 1, 0, 0), None),
    ("Cmaj9", "C Major 9", (-1, 3, 2, 4, 3, 0), None),
    ("Dmaj9", "D Major 9", (-1, -1, 0, 2, 2, 0), None),
    ("Emaj9", "E Major 9", (0, 2, 1, 1, 0, 2), None),
    ("Gmaj9", "G Major 9", (3, 0, 0, 2, 0, 2), None),
    # Minor ninth
    ("Am9", "A Minor 9", (-1, 0, 2, 4, 1, 3), None),
    ("Dm9", "D Minor 9", (-1, -1, 0, 2, 1, 0), None),
    ("Em9", "E Minor 9", (0, 2, 0, 0, 0, 2), None),
    # Diminished
    ("Adim", "A Diminished", (-1, 0, 1, 2, 1, 2), None),
    ("Bdim", "B Diminished", (-1, 2, 3, 4, 3, -1), None),
    ("Cdim", "C Diminished", (-1, 3, 4, 2, 4, 2), None),
    ("Ddim", "D Diminished", (-1, -1, 0, 1, 0, 1), None),
    ("Edim", "E Diminished", (-1, -1, 2, 3, 2, 3), None),
    ("Fdim", "F Diminished", (-1, -1, 3, 4, 3, 4), None),
    ("Gdim", "G Diminished", (-1, -1, 5, 6, 5, 6), None),
    ("Adim7", "A Diminished 7", (-1, 0, 1, 2, 1, 2), None),
    ("Bdim7", "B Diminished 7", (-1, 2, 3, 1, 3, 1), None),
    ("Cdim7", "C Diminished 7", (-1, 3, 4, 2, 4, 2), None),
    ("Ddim7", "D Diminished 7", (-1, -1, 0, 1, 0, 1), None),
    ("Edim7", "E Diminished 7", (-1, -1, 2, 3, 2, 3), None),
    # Half-diminished
    ("Am7b5", "A Half-Diminished", (-1, 0, 1, 0, 1, 0), None),
    ("Bm7b5", "B Half-Diminished", (-1, 2, 3, 2, 3, 2), None),
    ("Cm7b5", "C Half-Diminished", (-1, 3, 4, 3, 4, 3), None),
    ("Dm7b5", "D Half-Diminished", (-1, -1, 0, 1, 1, 1), None),
    ("Em7b5", "E Half-Diminished", (0, 1, 0, 0, 0, 0), None),
    # Augmented
    ("Aaug", "A Augmented", (-1, 0, 3, 2, 2, 1), None),
    ("Baug", "B Augmented", (-1, 2, 1, 0, 0, 3), None),
    ("Caug", "C Augmented", (-1, 3, 2, 1, 1, 0), None),
    ("Daug", "D Augmented", (-1, -1, 0, 3, 3, 2), None),
    ("Eaug", "E Augmented", (0, 3, 2, 1, 1, 0), None),
    ("Faug", "F Augmented", (-1, -1, 4, 3, 3, 2), None),
    ("Gaug", "G Augmented", (3, 2, 1, 0, 0, 3), None),
    # Altered dominants
    ("A7#5", "A7 Sharp 5", (-1, 0, 3, 0, 2, 1), None),
    ("C7#5", "C7 Sharp 5", (-1, 3, 2, 3, 1, 4), None),
    ("E7#5", "E7 Sharp 5", (0, 3, 0, 1, 1, 0), None),
    ("A7b5", "A7 Flat 5", (-1, 0, 1, 0, 2, 0), None),
    ("C7b5", "C7 Flat 5", (-1, 3, 4, 3, 5, 0), None),
    ("E7b5", "E7 Flat 5", (0, 1, 0, 1, 3, 0), None),
    ("A7#9", "A7 Sharp 9", (-1, 0, 2, 0, 2, 3), None),
    ("E7#9", "E7 Sharp 9", (0, 2, 0, 1, 3, 2), None),
    ("A7b9", "A7 Flat 9", (-1, 0, 2, 0, 2, 1), None),
    ("E7b9", "E7 Flat 9", (0, 2, 0, 1, 3, 1), None),
    # Slash chords
    ("C/G", "C/G", (3, 3, 2, 0, 1, 0), None),
    ("C/B", "C/B", (-1, 2, 2, 0, 1, 0), None),
    ("C/E", "C/E", (0, 3, 2, 0, 1, 0), None),
    ("D/F#", "D/F#", (2, -1, 0, 2, 3, 2), None),
    ("D/A", "D/A", (-1, 0, 0, 2, 3, 2), None),
    ("G/B", "G/B", (-1, 2, 0, 0, 0, 3), None),
    ("G/D", "G/D", (-1, -1, 0, 0, 0, 3), None),
    ("Am/G", "Am/G", (3, 0, 2, 2, 1, 0), None),
    ("Am/F#", "Am/F#", (2, 0, 2, 2, 1, 0), None),
    ("Am/E", "Am/E", (0, 0, 2, 2, 1, 0), None),
    ("Em/D", "Em/D", (-1, -1, 0, 0, 0, 0), None),
    ("Em/B", "Em/B", (-1, 2, 2, 0, 0, 0), None),
    ("F/C", "F/C", (-1, 3, 3, 2, 1, 1), None),
    ("F/G", "F/G", (3, 3, 3, 2, 1, 1), 1),
]

ALTERNATE_VOICINGS: list[CatalogRow] = [
    # Major barre shapes
    ("C", "C (barre 3)", (-1, 3, 5, 5, 5, 3), 3),
    ("C", "C (barre 8)", (8, 10, 10, 9, 8, 8), 8),
    ("C#", "C# (barre 9)", (9, 11, 11, 10, 9, 9), 9),
    ("Db", "Db (barre 9)", (9, 11, 11, 10, 9, 9), 9),
    ("D", "D (barre 5)", (-1, 5, 7, 7, 7, 5), 5),
    ("D", "D (barre 10)", (10, 12, 12, 11, 10, 10), 10),
    ("D#", "D# (barre 6)", (-1, 6, 8, 8, 8, 6), 6),
    ("Eb", "Eb (barre 6)", (-1, 6, 8, 8, 8, 6), 6),
    ("E", "E (barre 7)", (-1, 7, 9, 9, 9, 7), 7),
    ("F", "F (barre 8)", (-1, 8, 10, 10, 10, 8), 8),
    ("F", "F (small)", (-1, -1, 3, 2, 1, 1), None),
    ("F#", "F# (barre 9)", (-1, 9, 11, 11, 11, 9), 9),
    ("Gb", "Gb (barre 9)", (-1, 9, 11, 11, 11, 9), 9),
    ("G", "G (barre 3)", (3, 5, 5, 4, 3, 3), 3),
    ("G", "G (barre 10)", (-1, 10, 12, 12, 12, 10), 10),
    ("G", "G (rock)", (3, 2, 0, 0, 3, 3), None),
    ("G#", "G# (barre 11)", (-1, 11, 13, 13, 13, 11), 11),
    ("Ab", "Ab (barre 11)", (-1, 11, 13, 13, 13, 11), 11),
    ("A", "A (barre 5)", (5, 7, 7, 6, 5, 5), 5),
    ("A#", "A# (barre 6)", (6, 8, 8, 7, 6, 6), 6),
    ("Bb", "Bb (barre 6)", (6, 8, 8, 7, 6, 6), 6),
    ("B", "B (barre 7)", (7, 9, 9, 8, 7, 7), 7),
    # Minor barre shapes
    ("Am", "Am (barre 5)", (5, 7, 7, 5, 5, 5), 5),
    ("Bm", "Bm (barre 7)", (7, 9, 9, 7, 7, 7), 7),
    ("Cm", "Cm (barre 8)", (8, 10, 10, 8, 8, 8), 8),
    ("C#m", "C#m (barre 9)", (9, 11, 11, 9, 9, 9), 9),
    ("Dm", "Dm (barre 5)", (-1, 5, 7, 7, 6, 5), 5),
    ("Dm", "Dm (barre 10)", (10, 12, 12, 10, 10, 10), 10),
    ("Ebm", "Ebm (barre 6)", (-1, 6, 8, 8, 7, 6), 6),
    ("Em", "Em (barre 7)", (-1, 7, 9, 9, 8, 7), 7),
    ("Fm", "Fm (barre 8)", (-1, 8, 10, 10, 9, 8), 8),
    ("F#m", "F#m (barre 9)", (-1, 9, 11, 11, 10, 9), 9),
    ("Gm", "Gm (barre 10)", (-1, 10, 12, 12, 11, 10), 10),
    ("G#m", "G#m (barre 11)", (-1, 11, 13, 13, 12, 11), 11),
    ("Bbm", "Bbm (barre 6)", (6, 8, 8, 6, 6, 6), 6),
    # Seventh barre shapes
    ("A7", "A7 (barre 5)", (5, 7, 5, 6, 5, 5), 5),
    ("B7", "B7 (barre 2)", (-1, 2, 4, 2, 4, 2), 2),
    ("C7", "C7 (barre 3)", (-1, 3, 5, 3, 5, 3), 3),
    ("D7", "D7 (barre 5)", (-1, 5, 7, 5, 7, 5), 5),
    ("E7", "E7 (barre 7)", (-1, 7, 9, 7, 9, 7), 7),
    ("E7", "E7 (four finger)", (0, 2, 2, 1, 3, 0), None),
    ("G7", "G7 (barre 3)", (3, 5, 3, 4, 3, 3), 3),
    # Minor seventh barre shapes
    ("Am7", "Am7 (barre 5)", (5, 7, 5, 5, 5, 5), 5),
    ("Bm7", "Bm7 (barre 7)", (7, 9, 7, 7, 7, 7), 7),
    ("Dm7", "Dm7 (barre 5)", (-1, 5, 7, 5, 6, 5), 5),
    ("Em7", "Em7 (barre 7)", (-1, 7, 9, 7, 8, 7), 7),
    ("Em7", "Em7 (four finger)", (0, 2, 2, 0, 3, 0), None),
    # Major seventh alternates
    ("Cmaj7", "Cmaj7 (barre 3)", (-1, 3, 5, 4, 5, 3), 3),
    ("Dmaj7", "Dmaj7 (barre 5)", (-1, 5, 7, 6, 7, 5), 5),
    ("Fmaj7", "Fmaj7 (open)", (-1, -1, 3, 2, 1, 0), None),
    ("Gmaj7", "Gmaj7 (jazz)", (3, -1, 4, 4, 3, -1), None),
    # Power chord alternates
    ("A5", "A5 (fret 5)", (5, 7, 7, -1, -1, -1), None),
    ("D5", "D5 (fret 5)", (-1, 5, 7, 7, -1, -1), None),
    ("E5", "E5 (fret 7)", (-1, 7, 9, 9, -1, -1), None),
]
