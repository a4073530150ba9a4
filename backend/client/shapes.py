"""UI shape (camelCase) <-> storage shape (snake_case) for vessel types."""
from typing import Any

# UI key -> storage key. Timestamps belong to the storage shape only.
UI_TO_STORAGE: dict[str, str] = {
    "id": "id",
    "name": "name",
    "description": "description",
    "maxSpeed": "max_speed",
    "fuelCapacity": "fuel_capacity",
    "engineCount": "engine_count",
    "color": "color",
}
STORAGE_TO_UI: dict[str, str] = {v: k for k, v in UI_TO_STORAGE.items()}

TIMESTAMP_FIELDS = frozenset({"created_at", "updated_at", "createdAt", "updatedAt"})


def to_storage_shape(vessel_type: dict[str, Any]) -> dict[str, Any]:
    """Translate a (possibly partial) UI record. Keys already in storage form pass through."""
    out: dict[str, Any] = {}
    for key, value in vessel_type.items():
        if key in TIMESTAMP_FIELDS:
            continue
        if key in UI_TO_STORAGE:
            out[UI_TO_STORAGE[key]] = value
        elif key in STORAGE_TO_UI:
            out[key] = value
    return out


def to_ui_shape(record: dict[str, Any]) -> dict[str, Any]:
    """Translate a (possibly partial) storage record; timestamps are dropped."""
    return {STORAGE_TO_UI[key]: value for key, value in record.items() if key in STORAGE_TO_UI}
