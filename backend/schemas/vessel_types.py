"""Pydantic schemas for the vessel-type proxy."""
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic.alias_generators import to_camel

Action = Literal["getAll", "create", "update", "delete"]
ACTIONS: frozenset[str] = frozenset({"getAll", "create", "update", "delete"})

# Display colour used when a stored row has none.
DEFAULT_COLOR = "#3b82f6"


class ConnectionConfig(BaseModel):
    """Database connection settings sent with every request. No field has a default."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1)
    port: int = Field(..., ge=1, le=65535)
    user: str = Field(..., min_length=1)
    password: SecretStr
    database: str = Field(..., min_length=1)
    table: str = Field(..., min_length=1)

    def to_wire(self) -> dict[str, Any]:
        """Plain dict for the request body (password revealed)."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password.get_secret_value(),
            "database": self.database,
            "table": self.table,
        }


class VesselTypeData(BaseModel):
    """Writable vessel-type fields. Accepts snake_case or camelCase keys; id and timestamps are ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str | None = None
    description: str | None = None
    max_speed: float | None = None
    fuel_capacity: float | None = None
    engine_count: int | None = None
    color: str | None = None


class VesselTypeRecord(BaseModel):
    """Storage record shape: one unit_type row."""

    id: int
    name: str
    description: str | None = None
    max_speed: float | None = None
    fuel_capacity: float | None = None
    engine_count: int | None = None
    color: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProxyRequest(BaseModel):
    """Envelope accepted by POST /vessel-types. Nested parts are validated per action."""

    action: str | None = None
    config: dict[str, Any] | None = None
    id: int | None = None
    data: dict[str, Any] | None = None


class VesselTypeListResponse(BaseModel):
    vessel_types: list[VesselTypeRecord]


class VesselTypeResponse(BaseModel):
    vessel_type: VesselTypeRecord


class DeleteResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str
    details: str | None = None
