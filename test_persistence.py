#!/usr/bin/env python3
"""
Test suite for the save store and career export.

Tests:
1. Save / load / list / delete round trip
2. Quick-save slot overwrites in place
3. Unknown saves
4. Newer schema versions and corrupt rows refuse to load
5. Full career history survives a save
6. CSV export of the career log
"""

import csv
import sqlite3
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from sideline import persistence
from sideline.errors import PersistenceError, SaveNotFoundError
from sideline.export import (
    FIELDNAMES,
    career_history_csv_text,
    career_history_rows,
    export_career_history_csv,
)
from sideline.models import CareerLog
from sideline.turn_engine import advance_turn, new_career


def divider(title: str):
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def fresh_db() -> Path:
    path = Path(tempfile.mkdtemp()) / "saves.db"
    persistence.set_db_path(path)
    assert persistence.get_db_path() == path
    return path


def short_career(seed: int = 21, turns: int = 4):
    history = [new_career(seed, coach_name="Dana Reyes")]
    offer = history[0].job_offers[0]
    history.append(advance_turn(history[-1], f"offer_accept_{offer.id}", "Take it"))
    for _ in range(turns):
        history.append(advance_turn(history[-1], "advance"))
    return history


# ──────────────────────────────────────────────
# TEST 1: Round Trip
# ──────────────────────────────────────────────

def test_save_load_list_delete():
    divider("TEST 1: Save Round Trip")

    fresh_db()
    turn = new_career(3, coach_name="Dana Reyes")
    save_id = persistence.save("Day One", turn.header, {"note": "first"})
    print(f"  Saved as {save_id}")

    record = persistence.load(save_id)
    assert record is not None
    assert record.name == "Day One"
    assert record.header.to_dict() == turn.header.to_dict()
    assert record.metadata == {"note": "first"}
    assert record.schema_version == persistence.SCHEMA_VERSION
    assert record.timestamp > 0

    listing = persistence.list_saves()
    assert [s["id"] for s in listing] == [save_id]
    assert listing[0]["data_size"] > 0

    persistence.delete(save_id)
    assert persistence.load(save_id) is None
    assert persistence.list_saves() == []
    print("  PASSED")


def test_saving_does_not_touch_header():
    divider("TEST 1b: Header Untouched")

    fresh_db()
    turn = new_career(4)
    before = turn.header.to_dict()
    persistence.save("Snapshot", turn.header)
    assert turn.header.to_dict() == before
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 2: Quick Save
# ──────────────────────────────────────────────

def test_quick_save_overwrites():
    divider("TEST 2: Quick Save")

    fresh_db()
    history = short_career(turns=1)
    assert persistence.quick_save(history[0].header) == persistence.QUICKSAVE_ID
    assert persistence.quick_save(history[-1].header) == persistence.QUICKSAVE_ID

    saves = persistence.list_saves()
    assert len(saves) == 1
    assert saves[0]["name"] == persistence.QUICKSAVE_NAME
    record = persistence.load(persistence.QUICKSAVE_ID)
    assert record.header.date == history[-1].header.date
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 3: Unknown Saves
# ──────────────────────────────────────────────

def test_unknown_save():
    divider("TEST 3: Unknown Save")

    fresh_db()
    assert persistence.load("does-not-exist") is None
    with pytest.raises(SaveNotFoundError):
        persistence.delete("does-not-exist")
    try:
        persistence.delete("does-not-exist")
    except LookupError as e:
        print(f"  {e}")
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 4: Schema Versions
# ──────────────────────────────────────────────

def test_newer_schema_refuses_to_load():
    divider("TEST 4: Newer Schema")

    path = fresh_db()
    save_id = persistence.save("Future", new_career(5).header)
    conn = sqlite3.connect(str(path))
    conn.execute("UPDATE saves SET schema_version=? WHERE save_id=?",
                 (persistence.SCHEMA_VERSION + 1, save_id))
    conn.commit()
    conn.close()

    with pytest.raises(PersistenceError):
        persistence.load(save_id)
    print("  PASSED")


def test_corrupt_row_refuses_to_load():
    divider("TEST 4b: Corrupt Row")

    path = fresh_db()
    save_id = persistence.save("Broken", new_career(6).header)
    conn = sqlite3.connect(str(path))
    conn.execute("UPDATE saves SET data=? WHERE save_id=?", ("{not json", save_id))
    conn.commit()
    conn.close()

    with pytest.raises(PersistenceError):
        persistence.load(save_id)
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 5: Career History
# ──────────────────────────────────────────────

def test_career_history_survives_save():
    divider("TEST 5: Career History")

    fresh_db()
    history = short_career()
    meta = {"history": persistence.serialize_career(history)}
    save_id = persistence.save("Mid Career", history[-1].header, meta)

    record = persistence.load(save_id)
    restored = persistence.deserialize_career(record.metadata["history"])
    print(f"  {len(restored)} turns restored, last {restored[-1].header.date}")
    assert record.metadata["history"]["turn_count"] == len(history)
    assert [t.to_dict() for t in restored] == [t.to_dict() for t in history]

    # play on from the restored turn exactly as from the original
    a = advance_turn(history[-1], "advance")
    b = advance_turn(restored[-1], "advance")
    assert a.to_dict() == b.to_dict()

    with pytest.raises(PersistenceError):
        persistence.deserialize_career({"turns": [{"header": {}}]})
    print("  PASSED")


# ──────────────────────────────────────────────
# TEST 6: CSV Export
# ──────────────────────────────────────────────

def test_export_career_history_csv():
    divider("TEST 6: CSV Export")

    turn = new_career(8)
    turn.header.career_history = [
        CareerLog(1995, "Montana", "Position Coach", "8-4", "Promoted"),
        CareerLog(1998, "Iowa", "Offensive Coordinator", "0-0", "Hired Away"),
    ]
    rows = career_history_rows(turn.header)
    assert rows[0]["wins"] == 8 and rows[0]["win_pct"] == 0.667
    assert rows[1]["win_pct"] == 0.0

    out = Path(tempfile.mkdtemp()) / "nested" / "career.csv"
    path = export_career_history_csv([turn], str(out))
    with open(path, newline="") as f:
        written = list(csv.DictReader(f))
    print(f"  {written}")
    assert list(written[0].keys()) == FIELDNAMES
    assert written[1]["team"] == "Iowa"
    assert written[1]["result"] == "Hired Away"

    text = career_history_csv_text(turn)
    assert text.splitlines()[0] == ",".join(FIELDNAMES)
    with pytest.raises(ValueError):
        career_history_csv_text([])
    print("  PASSED")


def main():
    tests = [
        test_save_load_list_delete,
        test_saving_does_not_touch_header,
        test_quick_save_overwrites,
        test_unknown_save,
        test_newer_schema_refuses_to_load,
        test_corrupt_row_refuses_to_load,
        test_career_history_survives_save,
        test_export_career_history_csv,
    ]

    passed = 0
    failed = 0
    for test_fn in tests:
        try:
            test_fn()
            passed += 1
        except Exception as e:
            failed += 1
            print(f"\n  FAILED: {test_fn.__name__}")
            print(f"    Error: {e}")
            import traceback
            traceback.print_exc()

    divider("RESULTS")
    print(f"  Passed: {passed}/{len(tests)}")
    print(f"  Failed: {failed}/{len(tests)}")

    if failed == 0:
        print("\n  ALL TESTS PASSED")
    else:
        print(f"\n  {failed} TEST(S) FAILED")
        sys.exit(1)


if __name__ == "__main__":
    main()
