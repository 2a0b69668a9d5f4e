"""Tests for chord notation parsing and fingerprint encoding."""

import pytest

from chord_engine import ChordCatalog, Fingering
from chord_engine.notation import (
    decode_fingerprint,
    encode_fingerprint,
    notation_for,
    parse_notation,
    split_transposition,
    split_voicing,
)


class TestFingerprint:
    """Test fingerprint encoding and decoding."""

    def test_encode_open_chord(self) -> None:
        assert encode_fingerprint([3, 2, 0, 0, 0, 3]) == "320003"

    def test_encode_muted_strings(self) -> None:
        assert encode_fingerprint((-1, -1, 0, 2, 3, 2)) == "XX0232"

    def test_encode_high_frets(self) -> None:
        """Frets of 10 and above are wrapped in parentheses."""
        assert encode_fingerprint((10, 12, 12, 11, 10, 10)) == "(10)(12)(12)(11)(10)(10)"

    @pytest.mark.parametrize(
        ("fingerprint", "expected"),
        [
            ("320033", (3, 2, 0, 0, 3, 3)),
            ("X02210", (-1, 0, 2, 2, 1, 0)),
            ("x02210", (-1, 0, 2, 2, 1, 0)),
            ("xx0232", (-1, -1, 0, 2, 3, 2)),
            ("X(10)(12)(12)(12)(10)", (-1, 10, 12, 12, 12, 10)),
        ],
    )
    def test_decode_valid(self, fingerprint: str, expected: tuple[int, ...]) -> None:
        assert decode_fingerprint(fingerprint) == expected

    @pytest.mark.parametrize(
        "fingerprint",
        ["", "32003", "3200333", "32003a", "m", "m7", "5", "32 003", "(16)00000", "(10"],
    )
    def test_decode_invalid(self, fingerprint: str) -> None:
        """Wrong length or alphabet is not a fingerprint."""
        assert decode_fingerprint(fingerprint) is None

    def test_round_trip_over_catalog(self) -> None:
        """Every catalog shape survives encode then decode."""
        for entry in ChordCatalog():
            assert decode_fingerprint(encode_fingerprint(entry.positions)) == entry.positions


class TestSplitVoicing:
    """Test the ``#`` voicing split."""

    def test_voiced_name(self) -> None:
        assert split_voicing("G#320033") == ("G", (3, 2, 0, 0, 3, 3))

    @pytest.mark.parametrize("name", ["C#", "F#m", "D/F#", "A7#5", "C#maj7", "G"])
    def test_sharp_names_stay_intact(self, name: str) -> None:
        """Text after ``#`` that is not a fingerprint keeps the full name."""
        assert split_voicing(name) == (name, None)

    def test_sharp_root_with_fingerprint_splits_at_first_hash(self) -> None:
        """``C#320033`` reads as base ``C`` with a voicing."""
        assert split_voicing("C#320033") == ("C", (3, 2, 0, 0, 3, 3))


class TestSplitTransposition:
    """Test the ``@`` transposition split."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Am@7", ("Am", 7)),
            ("Am @ 7", ("Am", 7)),
            ("F#m@4", ("F#m", 4)),
            ("Am@-2", ("Am", -2)),
            ("Am@20", ("Am", 20)),
        ],
    )
    def test_with_fret(self, name: str, expected: tuple[str, int]) -> None:
        assert split_transposition(name) == expected

    @pytest.mark.parametrize("name", ["Am", "Am@seven", "Am@", "@7", "Am@7.5"])
    def test_without_fret(self, name: str) -> None:
        """A non-integer suffix leaves the whole string as the name."""
        assert split_transposition(name) == (name, None)

    @pytest.mark.parametrize("name", ["F@12345", "F@" + "9" * 5000])
    def test_overlong_fret_is_part_of_the_name(self, name: str) -> None:
        assert split_transposition(name) == (name, None)


class TestParseNotation:
    """Test the tagged notation request."""

    def test_plain(self) -> None:
        request = parse_notation("  G  ")
        assert request.kind == "plain"
        assert request.raw == "G"
        assert request.base_name == "G"
        assert request.positions is None
        assert request.target_fret is None

    def test_voiced(self) -> None:
        request = parse_notation("G#355433")
        assert request.kind == "voiced"
        assert request.base_name == "G"
        assert request.positions == (3, 5, 5, 4, 3, 3)

    def test_transposed(self) -> None:
        request = parse_notation("Am@7")
        assert request.kind == "transposed"
        assert request.base_name == "Am"
        assert request.target_fret == 7

    def test_sharp_chord_with_transposition(self) -> None:
        """A failed voicing split falls through to the transposition split."""
        request = parse_notation("C#m@6")
        assert request.kind == "transposed"
        assert request.base_name == "C#m"
        assert request.target_fret == 6

    def test_voicing_wins_over_transposition(self) -> None:
        request = parse_notation("G#320033")
        assert request.kind == "voiced"


class TestNotationFor:
    def test_default_voicing_uses_name(self) -> None:
        fingering = Fingering(name="G", positions=(3, 2, 0, 0, 0, 3))
        assert notation_for(fingering) == "G"

    def test_alternate_voicing_uses_fingerprint(self) -> None:
        fingering = Fingering(name="Am", positions=(5, 7, 7, 5, 5, 5), barre=5, is_default=False)
        assert notation_for(fingering) == "Am#577555"

    def test_alternates_resolve_back(self) -> None:
        """The voiced name of each non-sharp alternate resolves to it."""
        from chord_engine import ChordEngine

        engine = ChordEngine()
        for entry in engine.catalog:
            if entry.is_default or "#" in entry.name:
                continue
            assert engine.resolve(notation_for(entry)) == entry
