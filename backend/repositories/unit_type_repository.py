"""Unit type repository: list, create, update, delete. One statement per call."""
from functools import lru_cache
from typing import Any, Optional, Sequence

from sqlalchemy import MetaData, Table, delete, func, insert, select, update
from sqlalchemy.engine import Connection

from models.unit_type import UnitType
from schemas.vessel_types import DEFAULT_COLOR, VesselTypeData, VesselTypeRecord
from utils.config import ALLOWED_TABLES

# Column order for every SELECT/RETURNING; rows are mapped by position.
COLUMNS = (
    "id",
    "name",
    "description",
    "max_speed",
    "fuel_capacity",
    "engine_count",
    "color",
    "created_at",
    "updated_at",
)

DEFAULT_ENGINE_COUNT = 1

_alias_metadata = MetaData()


@lru_cache(maxsize=None)
def _table_named(name: str) -> Table:
    if name == UnitType.__tablename__:
        return UnitType.__table__
    return UnitType.__table__.to_metadata(_alias_metadata, name=name)


def resolve_table(name: str, allowed: frozenset[str] = ALLOWED_TABLES) -> Optional[Table]:
    """Return the Table for an allow-listed name, or None. Names outside the list never reach SQL."""
    if name not in allowed:
        return None
    return _table_named(name)


def _columns(table: Table) -> list:
    return [table.c[name] for name in COLUMNS]


def _to_float(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


def row_to_record(row: Sequence[Any]) -> VesselTypeRecord:
    """Map a positional row (COLUMNS order) to the storage record shape."""
    values = dict(zip(COLUMNS, row))
    values["max_speed"] = _to_float(values["max_speed"])
    values["fuel_capacity"] = _to_float(values["fuel_capacity"])
    return VesselTypeRecord(**values)


def list_unit_types(conn: Connection, table: Table) -> list[VesselTypeRecord]:
    """Return every row ordered by id. Rows without a colour get the display default."""
    with conn.begin():
        rows = conn.execute(select(*_columns(table)).order_by(table.c.id)).all()
    records = [row_to_record(row) for row in rows]
    for record in records:
        if not record.color:
            record.color = DEFAULT_COLOR
    return records


def create_unit_type(conn: Connection, table: Table, data: VesselTypeData) -> VesselTypeRecord:
    """Insert one row; id and timestamps come from the database."""
    values = {
        "name": data.name,
        "description": data.description,
        "max_speed": data.max_speed,
        "fuel_capacity": data.fuel_capacity,
        "engine_count": data.engine_count if data.engine_count is not None else DEFAULT_ENGINE_COUNT,
        "color": data.color,
        "created_at": func.now(),
        "updated_at": func.now(),
    }
    stmt = insert(table).values(**values).returning(*_columns(table))
    with conn.begin():
        row = conn.execute(stmt).one()
    return row_to_record(row)


def update_unit_type(
    conn: Connection, table: Table, unit_type_id: int, data: VesselTypeData
) -> Optional[VesselTypeRecord]:
    """Update the supplied fields and refresh updated_at. Returns None if no row has that id."""
    values: dict[str, Any] = data.model_dump(exclude_unset=True)
    values["updated_at"] = func.now()
    stmt = (
        update(table)
        .where(table.c.id == unit_type_id)
        .values(**values)
        .returning(*_columns(table))
    )
    with conn.begin():
        row = conn.execute(stmt).first()
    return row_to_record(row) if row is not None else None


def delete_unit_type(conn: Connection, table: Table, unit_type_id: int) -> bool:
    """Hard delete by id. Returns True if deleted, False if not found."""
    stmt = delete(table).where(table.c.id == unit_type_id).returning(table.c.id)
    with conn.begin():
        row = conn.execute(stmt).first()
    return row is not None
