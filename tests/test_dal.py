from datetime import date

import pytest

from tripbook.core.errors import StoreError, TripNotFoundError
from tripbook.db.dal import Database


def test_create_and_get(db):
    trip_id = db.create_trip("Yosemite", "Vacation", date(2024, 6, 1), date(2024, 6, 10))
    row = db.get_trip(trip_id)
    assert row["name"] == "Yosemite"
    assert row["category"] == "Vacation"
    assert row["start_date"] == "2024-06-01"
    assert row["end_date"] == "2024-06-10"
    assert row["created_at"] and row["updated_at"]


def test_store_accepts_incomplete_records(db):
    trip_id = db.create_trip("", "", None, None)
    row = db.get_trip(trip_id)
    assert row["name"] == ""
    assert row["start_date"] is None and row["end_date"] is None


def test_list_orders_by_start_date_with_missing_first(db):
    later = db.create_trip("Later", "Business", date(2024, 9, 1), date(2024, 9, 2))
    undated = db.create_trip("Undated", "Vacation", None, None)
    earlier = db.create_trip("Earlier", "Adventure", date(2024, 2, 1), date(2024, 2, 3))
    same_day = db.create_trip("Same day", "Vacation", date(2024, 2, 1), None)

    ids = [row["id"] for row in db.list_trips()]
    assert ids == [undated, earlier, same_day, later]


def test_update_keeps_identifier(db):
    trip_id = db.create_trip("Yosemite", "Vacation", date(2024, 6, 1), date(2024, 6, 10))
    created = db.get_trip(trip_id)

    db.update_trip(trip_id, name="Yosemite NP", end_date=date(2024, 6, 12))

    row = db.get_trip(trip_id)
    assert row["id"] == trip_id
    assert row["name"] == "Yosemite NP"
    assert row["end_date"] == "2024-06-12"
    assert row["start_date"] == "2024-06-01"
    assert row["created_at"] == created["created_at"]


def test_update_can_clear_date(db):
    trip_id = db.create_trip("Yosemite", "Vacation", date(2024, 6, 1), date(2024, 6, 10))
    db.update_trip(trip_id, end_date=None)
    assert db.get_trip(trip_id)["end_date"] is None


def test_update_unknown_trip(db):
    with pytest.raises(TripNotFoundError):
        db.update_trip(999, name="nope")
    with pytest.raises(TripNotFoundError):
        db.update_trip(999)


def test_delete(db):
    trip_id = db.create_trip("Yosemite", "Vacation", date(2024, 6, 1), date(2024, 6, 10))
    assert db.count_trips() == 1
    db.delete_trip(trip_id)
    assert db.get_trip(trip_id) is None
    assert db.count_trips() == 0
    with pytest.raises(TripNotFoundError):
        db.delete_trip(trip_id)


def test_sqlite_failure_surfaces_as_store_error(tmp_path):
    # no schema applied: every query fails
    broken = Database(tmp_path / "empty.sqlite3")
    with pytest.raises(StoreError) as excinfo:
        broken.list_trips()
    assert not isinstance(excinfo.value, TripNotFoundError)
    assert excinfo.value.kind == "store_unavailable"


def test_iso_date_strings_are_stored(db):
    trip_id = db.create_trip("Yosemite", "Vacation", "2024-06-01", "2024-06-10")
    db.update_trip(trip_id, end_date="2024-06-12")
    row = db.get_trip(trip_id)
    assert row["start_date"] == "2024-06-01"
    assert row["end_date"] == "2024-06-12"


def test_unusable_dates_are_refused_without_writing(db):
    trip_id = db.create_trip("Yosemite", "Vacation", date(2024, 6, 1), date(2024, 6, 10))
    with pytest.raises(TypeError):
        db.update_trip(trip_id, end_date=20240612)
    with pytest.raises(ValueError):
        db.update_trip(trip_id, end_date="next tuesday")
    with pytest.raises(TypeError):
        db.create_trip("Broken", "Vacation", 1717200000, None)
    assert db.get_trip(trip_id)["end_date"] == "2024-06-10"
    assert db.count_trips() == 1
