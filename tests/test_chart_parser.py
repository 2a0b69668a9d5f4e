"""Tests for chord chart text parsing."""

import pytest

from chord_engine import ParsedChart, parse_chart
from chord_engine.chart_parser import extract_capo, extract_chords

SAMPLE_CHART = """Sweet Song - Some Band
Capo: 3rd fret
Tuning: E-A-D-G-B-e

[Intro]
e|---3---2---0---|
B|---3---3---1---|

[Verse]
G           D/F#        Em
Walking down the road again
C               G/B        Am7
I know that it will all be fine

Chords used:
G     3-x-0-0-3(3)
Em (= E minor)
"""


class TestParseChart:
    """Test end-to-end chart parsing."""

    def test_capo_and_chords(self) -> None:
        text = "Capo: 2\nVerse\nG  D  Em  C\n"
        assert parse_chart(text) == ParsedChart(capo_position=2, chords=("G", "D", "Em", "C"), full_text=text)

    def test_tab_line_dropped(self) -> None:
        chart = parse_chart("e|---3---|\nG  C\n")
        assert chart.chords == ("G", "C")
        assert chart.capo_position == 0

    def test_false_positive_words(self) -> None:
        chart = parse_chart("I went to Oh My God and All the chords were C G Am F")
        assert "I" not in chart.chords
        assert "Oh" not in chart.chords
        assert "All" not in chart.chords
        assert chart.chords == ("C", "G", "Am", "F")

    def test_full_chart(self) -> None:
        chart = parse_chart(SAMPLE_CHART)
        assert chart.capo_position == 3
        assert chart.chords == ("G", "D/F#", "Em", "C", "G/B", "Am7")

    def test_full_text_preserved(self) -> None:
        assert parse_chart(SAMPLE_CHART).full_text == SAMPLE_CHART

    def test_deterministic(self) -> None:
        assert parse_chart(SAMPLE_CHART) == parse_chart(SAMPLE_CHART)

    def test_windows_line_endings(self) -> None:
        chart = parse_chart("e|---3---|\r\nAm  F  C  G\r\n")
        assert chart.chords == ("Am", "F", "C", "G")


class TestExtractChords:
    """Test chord token matching."""

    def test_first_seen_order_without_duplicates(self) -> None:
        assert extract_chords("G D G Em D C G") == ["G", "D", "Em", "C"]

    @pytest.mark.parametrize(
        "token",
        ["Cmaj7", "F#m", "Bbm7", "Dsus4", "Asus2", "Cadd9", "Bdim", "Caug", "D/F#", "Am7/G", "Ebmaj7", "Gsus"],
    )
    def test_chord_shapes(self, token: str) -> None:
        assert extract_chords(f"{token}  x") == [token]

    def test_unicode_accidentals(self) -> None:
        assert extract_chords("B♭  F♯m  E♭/G") == ["B♭", "F♯m", "E♭/G"]

    def test_words_not_split(self) -> None:
        """``Cmajor`` must not yield ``C`` from the middle of the word."""
        assert extract_chords("Cmajor Dmaj7") == ["Dmaj7"]

    def test_capitalised_words_ignored(self) -> None:
        assert extract_chords("Chorus Bridge Ending") == []

    def test_dropped_lines_contribute_nothing(self) -> None:
        text = "\n".join(
            [
                "E-A-D-G-B-e",
                "x-x-0-2-3-2",
                "Key: G",
                "Play: Am",
                "For the bridge use C",
                "Use the D shape at the 5th fret",
                'Sing "Em" softly',
                "D as the root",
                "Bm  2-4-4-3-2(2)",
                "------------",
            ]
        )
        assert extract_chords(text) == []


class TestExtractCapo:
    """Test capo detection."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Capo: 2", 2),
            ("capo 4", 4),
            ("CAPO:5", 5),
            ("Put a capo on the 3rd fret. Capo 3", 3),
            ("Capo 0", 0),
            ("Capo 7", 7),
        ],
    )
    def test_found(self, text: str, expected: int) -> None:
        assert extract_capo(text) == expected

    def test_first_mention_wins(self) -> None:
        assert extract_capo("Capo 2\nLater: capo 5") == 2

    @pytest.mark.parametrize("text", ["Capo 8", "capo 12", "No capo", "", "Capo: none"])
    def test_defaults_to_zero(self, text: str) -> None:
        assert extract_capo(text) == 0

    def test_huge_number_defaults_to_zero(self) -> None:
        assert extract_capo("Capo " + "9" * 5000) == 0


class TestAdversarialInput:
    """Parsing never raises on text input."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "\n\n\n",
            "||||",
            "((((((",
            "♯♭♯♭",
            "\x00\x01\x02",
            "A" * 10000,
            "capo " + "9" * 50,
            "Capo " + "9" * 5000 + "\nG C\n",
            "-" * 500,
            '"' * 20,
        ],
    )
    def test_never_raises(self, text: str) -> None:
        chart = parse_chart(text)
        assert isinstance(chart.chords, tuple)
        assert 0 <= chart.capo_position <= 7
        assert chart.full_text == text
