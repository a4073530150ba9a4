"""Unit tests for UI <-> storage shape translation."""
import pytest

from client.shapes import to_storage_shape, to_ui_shape

pytestmark = pytest.mark.unit

UI_RECORD = {
    "id": 4,
    "name": "Patrol",
    "description": "Coastal patrol boat",
    "maxSpeed": 35.5,
    "fuelCapacity": 1200.0,
    "engineCount": 2,
    "color": "#10b981",
}


def test_to_storage_shape_renames_fields():
    assert to_storage_shape(UI_RECORD) == {
        "id": 4,
        "name": "Patrol",
        "description": "Coastal patrol boat",
        "max_speed": 35.5,
        "fuel_capacity": 1200.0,
        "engine_count": 2,
        "color": "#10b981",
    }


def test_round_trip_is_lossless():
    """UI -> storage -> UI returns the same record."""
    assert to_ui_shape(to_storage_shape(UI_RECORD)) == UI_RECORD


@pytest.mark.parametrize(
    "partial",
    [
        {"name": "Only name"},
        {"maxSpeed": None},
        {"engineCount": 0, "color": None},
        {},
    ],
)
def test_round_trip_partial_records(partial):
    """Partial records keep exactly their keys, None values included."""
    assert to_ui_shape(to_storage_shape(partial)) == partial


def test_timestamps_belong_to_storage_only():
    storage = {
        "id": 1,
        "name": "Cargo",
        "created_at": "2026-01-01T00:00:00",
        "updated_at": "2026-01-02T00:00:00",
    }
    assert to_ui_shape(storage) == {"id": 1, "name": "Cargo"}
    assert "created_at" not in to_storage_shape({"name": "Cargo", "createdAt": "x", "created_at": "y"})


def test_storage_keys_pass_through():
    """Already snake_case input is accepted as-is."""
    assert to_storage_shape({"max_speed": 12, "engine_count": 3}) == {"max_speed": 12, "engine_count": 3}


def test_unknown_keys_dropped():
    assert to_storage_shape({"name": "X", "category": "tanker"}) == {"name": "X"}
