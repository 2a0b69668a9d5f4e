"""Tests for the custom chord store."""

import json
import logging
import threading
import uuid
from datetime import datetime, timezone

import pytest

from chord_engine import CustomChord, CustomChordStore, DuplicateChordNameError, detect_barre, extract_base_name
from chord_engine.custom import chord_from_record, chord_to_record


@pytest.fixture
def sweet_home() -> CustomChord:
    return CustomChord.create("G (Sweet Home)", [3, 2, 0, 0, 3, 3])


@pytest.fixture
def store(sweet_home: CustomChord) -> CustomChordStore:
    return CustomChordStore([sweet_home])


class TestCustomChord:
    """Test custom chord creation helpers."""

    def test_create_derives_base_name(self, sweet_home: CustomChord) -> None:
        assert sweet_home.base_name == "G"
        assert sweet_home.display_name == "G (Sweet Home)"

    def test_create_trims_display_name(self) -> None:
        chord = CustomChord.create("  Am (folk)  ", [-1, 0, 2, 2, 1, 0])
        assert chord.display_name == "Am (folk)"
        assert chord.base_name == "Am"

    def test_create_assigns_unique_ids(self) -> None:
        first = CustomChord.create("One", [3, 2, 0, 0, 3, 3])
        second = CustomChord.create("Two", [3, 2, 0, 0, 3, 3])
        assert first.id != second.id

    def test_create_detects_barre(self) -> None:
        chord = CustomChord.create("F (mine)", [1, 3, 3, 2, 1, 1])
        assert chord.barre == 1

    def test_create_keeps_given_barre(self) -> None:
        chord = CustomChord.create("F (mine)", [1, 3, 3, 2, 1, 1], barre=3)
        assert chord.barre == 3

    def test_edited_keeps_identity(self, sweet_home: CustomChord) -> None:
        edited = sweet_home.edited("G (Sweeter)", [3, 5, 5, 4, 3, 3])
        assert edited.id == sweet_home.id
        assert edited.created_at == sweet_home.created_at
        assert edited.display_name == "G (Sweeter)"
        assert edited.barre == 3

    def test_empty_display_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            CustomChord.create("   ", [3, 2, 0, 0, 3, 3])

    def test_wrong_string_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="Expected 6"):
            CustomChord.create("Short", [3, 2, 0])

    def test_as_fingering(self, sweet_home: CustomChord) -> None:
        fingering = sweet_home.as_fingering()
        assert fingering.name == "G (Sweet Home)"
        assert fingering.positions == (3, 2, 0, 0, 3, 3)
        assert fingering.barre is None


class TestHelpers:
    @pytest.mark.parametrize(
        ("display_name", "expected"),
        [
            ("G (Sweet Home)", "G"),
            ("Am7(open)", "Am7"),
            ("Cadd9", "Cadd9"),
            ("(weird)", ""),
        ],
    )
    def test_extract_base_name(self, display_name: str, expected: str) -> None:
        assert extract_base_name(display_name) == expected

    @pytest.mark.parametrize(
        ("positions", "expected"),
        [
            ([1, 3, 3, 2, 1, 1], 1),
            ([-1, 3, 5, 5, 5, 3], None),
            ([3, 5, 3, 3, 3, 3], 3),
            ([3, 2, 0, 0, 0, 3], None),
            ([-1, -1, -1, -1, 1, 1], None),
        ],
    )
    def test_detect_barre(self, positions: list[int], expected: int | None) -> None:
        assert detect_barre(positions) == expected


class TestStoreCrud:
    """Test add, update, delete and lookups."""

    def test_find_by_display_name(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        assert store.find_by_display_name("G (Sweet Home)") == sweet_home
        assert store.find_by_display_name("G") is None

    def test_find_by_id(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        assert store.find_by_id(sweet_home.id) == sweet_home
        assert store.find_by_id(uuid.uuid4()) is None

    def test_contains(self, store: CustomChordStore) -> None:
        assert "G (Sweet Home)" in store
        assert "G" not in store

    def test_add(self, store: CustomChordStore) -> None:
        chord = CustomChord.create("Am (folk)", [-1, 0, 2, 2, 1, 3])
        store.add(chord)
        assert len(store) == 2
        assert store.list()[-1] == chord

    def test_add_duplicate_name_rejected(self, store: CustomChordStore) -> None:
        with pytest.raises(DuplicateChordNameError):
            store.add(CustomChord.create("G (Sweet Home)", [3, 5, 5, 4, 3, 3]))
        assert len(store) == 1

    def test_add_duplicate_id_rejected(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        with pytest.raises(ValueError, match="already exists"):
            store.add(sweet_home.edited("Another name", sweet_home.positions))

    def test_update_in_place(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        other = CustomChord.create("Other", [0, 2, 2, 0, 0, 0])
        store.add(other)
        edited = sweet_home.edited("G (Sweeter)", [3, 5, 5, 4, 3, 3])

        previous = store.update(edited)

        assert previous == sweet_home
        assert store.list() == [edited, other]
        assert store.find_by_display_name("G (Sweet Home)") is None

    def test_update_same_name_allowed(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        """Keeping the display name while changing the shape is not a collision."""
        edited = sweet_home.edited("G (Sweet Home)", [3, 5, 5, 4, 3, 3])
        assert store.update(edited) == sweet_home

    def test_update_to_taken_name_rejected(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        store.add(CustomChord.create("Other", [0, 2, 2, 0, 0, 0]))
        with pytest.raises(DuplicateChordNameError):
            store.update(sweet_home.edited("Other", sweet_home.positions))
        assert store.find_by_id(sweet_home.id) == sweet_home

    def test_update_unknown_id(self, store: CustomChordStore) -> None:
        assert store.update(CustomChord.create("Ghost", [3, 2, 0, 0, 3, 3])) is None
        assert len(store) == 1

    def test_delete(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        assert store.delete(sweet_home.id) == sweet_home
        assert len(store) == 0
        assert store.delete(sweet_home.id) is None

    def test_list_is_a_snapshot(self, store: CustomChordStore) -> None:
        snapshot = store.list()
        store.add(CustomChord.create("Later", [0, 2, 2, 0, 0, 0]))
        assert len(snapshot) == 1

    def test_concurrent_adds(self) -> None:
        store = CustomChordStore()

        def worker(offset: int) -> None:
            for i in range(25):
                store.add(CustomChord.create(f"Chord {offset}-{i}", [3, 2, 0, 0, 3, 3]))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 200
        assert len(set(store.display_names())) == 200


class TestRecords:
    """Test the JSON record boundary."""

    def test_round_trip(self, store: CustomChordStore, sweet_home: CustomChord) -> None:
        restored = CustomChordStore.loads(store.dumps())
        assert restored.list() == [sweet_home]

    def test_record_shape(self, sweet_home: CustomChord) -> None:
        record = chord_to_record(sweet_home)
        assert record["fingers"] == [3, 2, 0, 0, 3, 3]
        assert record["name"] == "G"
        assert record["displayName"] == "G (Sweet Home)"
        assert record["barre"] is None
        assert datetime.fromisoformat(record["dateCreated"]) == sweet_home.created_at

    def test_from_record(self) -> None:
        record = {
            "id": "6f1c2d4e-0000-4000-8000-000000000001",
            "fingers": [1, 3, 3, 2, 1, 1],
            "name": "F",
            "displayName": "F (barre)",
            "barre": 1,
            "dateCreated": "2024-05-01T12:00:00+00:00",
        }
        chord = chord_from_record(record)
        assert chord.id == uuid.UUID("6f1c2d4e-0000-4000-8000-000000000001")
        assert chord.barre == 1
        assert chord.created_at == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)

    def test_malformed_records_dropped(self, sweet_home: CustomChord, caplog: pytest.LogCaptureFixture) -> None:
        """Bad records are skipped with a warning; valid ones still load."""
        good = chord_to_record(sweet_home)
        short = {**chord_to_record(CustomChord.create("Short", [0, 2, 2, 0, 0, 0])), "fingers": [0, 2, 2]}
        unnamed = {**chord_to_record(CustomChord.create("Unnamed", [0, 2, 2, 0, 0, 0])), "displayName": ""}
        missing = {"id": str(uuid.uuid4())}
        dup = CustomChord.create("Dup", [0, 2, 2, 0, 0, 0])
        duplicate = {**chord_to_record(dup), "displayName": good["displayName"]}

        with caplog.at_level(logging.WARNING, logger="chord_engine.custom"):
            store = CustomChordStore.from_records([short, good, unnamed, missing, "junk", duplicate])

        assert store.list() == [sweet_home]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 5

    @pytest.mark.parametrize("field", ["fingers", "barre"])
    def test_non_finite_numbers_dropped(self, sweet_home: CustomChord, field: str) -> None:
        """JSON ``Infinity`` cannot become a fret; only that record is skipped."""
        bad = chord_to_record(CustomChord.create("Bad", [3, 2, 0, 0, 0, 3]))
        bad[field] = [float("inf"), 2, 0, 0, 0, 3] if field == "fingers" else float("inf")
        text = json.dumps([bad, chord_to_record(sweet_home)])
        assert "Infinity" in text

        store = CustomChordStore.loads(text)

        assert store.list() == [sweet_home]

    @pytest.mark.parametrize("text", ["not json", "{}", "null", '{"a": 1}'])
    def test_undecodable_json_gives_empty_store(self, text: str) -> None:
        assert len(CustomChordStore.loads(text)) == 0

    def test_loads_array(self, sweet_home: CustomChord) -> None:
        text = json.dumps([chord_to_record(sweet_home)])
        assert CustomChordStore.loads(text).find_by_id(sweet_home.id) == sweet_home
