"""Line classification for pasted chord charts.

Lines are judged one at a time with simple substring heuristics. Anything that
looks like tablature, a chord diagram, an instruction or an explanation is
dropped before chord matching so that fret numbers and prose do not turn into
chord tokens.
"""

from __future__ import annotations

from typing import Literal

LineKind = Literal["empty", "tablature", "diagram", "instruction", "explanation", "fingering", "chart"]

STRING_MARKERS = ("e|", "B|", "G|", "D|", "A|", "E|")
TUNING_MARKER = "E-A-D-G-B-e"
MUTED_STRING_PATTERNS = ("x-x-", "-x-x-", "X-X-", "-X-X-")
INSTRUCTION_PREFIXES = ("Play:", "Key:", "For ", "or use", "The ", "Capo:")
INSTRUCTION_MARKERS = ("transpose", "Real Book", "fret", "---")
EXPLANATION_MARKERS = ("(=", "as the root", '"')

DIAGRAM_MIN_DIGITS = 3
FINGERING_MIN_DIGITS = 4


def count_digits(line: str) -> int:
    return sum(1 for c in line if c.isdigit())


def is_tablature(line: str) -> bool:
    """Check for tab staff lines such as ``e|---3---|``.

    Examples
    --------
    >>> is_tablature("e|---3---|")
    True
    >>> is_tablature("G  C  D")
    False
    """
    return "|" in line and ("---" in line or any(marker in line for marker in STRING_MARKERS))


def is_chord_diagram(line: str) -> bool:
    """Check for diagram rows (``E-A-D-G-B-e``, ``x-x-0-2``, ``x32010`` with dashes)."""
    if TUNING_MARKER in line or any(pattern in line for pattern in MUTED_STRING_PATTERNS):
        return True
    return "x" in line and "-" in line and count_digits(line) > DIAGRAM_MIN_DIGITS


def is_instruction(line: str) -> bool:
    """Check for lines such as ``Key: G`` or ``Capo: 2nd fret``."""
    stripped = line.strip()
    return stripped.startswith(INSTRUCTION_PREFIXES) or any(marker in stripped for marker in INSTRUCTION_MARKERS)


def is_explanation(line: str) -> bool:
    return any(marker in line for marker in EXPLANATION_MARKERS)


def is_fingering(line: str) -> bool:
    """Check for shape lines such as ``G     3-x-0-0-3(3)``."""
    return "-" in line and "(" in line and count_digits(line) > FINGERING_MIN_DIGITS


def classify_line(line: str) -> LineKind:
    """Classify a single chart line.

    Examples
    --------
    >>> classify_line("   ")
    'empty'
    >>> classify_line("Capo: 2")
    'instruction'
    >>> classify_line("G  D  Em  C")
    'chart'
    """
    if not line.strip():
        return "empty"
    if is_tablature(line):
        return "tablature"
    if is_chord_diagram(line):
        return "diagram"
    if is_instruction(line):
        return "instruction"
    if is_explanation(line):
        return "explanation"
    if is_fingering(line):
        return "fingering"
    return "chart"


def filter_lines(text: str) -> str:
    """Keep only chart lines, each followed by a newline.

    Examples
    --------
    >>> filter_lines("Intro\\ne|---0---|\\nG  C\\n")
    'Intro\\nG  C\\n'
    """
    return "".join(f"{line}\n" for line in text.splitlines() if classify_line(line) == "chart")
