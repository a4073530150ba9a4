"""Async data-access facade for vessel types.

Every operation posts one ``{action, config, id?, data?}`` request to the proxy
endpoint and returns a ``ServiceResult``; nothing is ever raised to the caller.
Configuration is injected explicitly: there are no default hosts or credentials.
"""
import logging
import os
from collections.abc import Mapping
from typing import Any, Callable

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from client.shapes import to_storage_shape
from schemas.vessel_types import ConnectionConfig, VesselTypeData, VesselTypeRecord

LOG = logging.getLogger(__name__)

NETWORK_ERROR = "Network error occurred"
NOT_FOUND = "Vessel type not found"
CONNECTION_FAILED = "Database connection failed"

# Environment variable -> ConnectionConfig field.
_ENV_FIELDS = {
    "DB_HOST": "host",
    "DB_PORT": "port",
    "DB_USER": "user",
    "DB_PASSWORD": "password",
    "DB_NAME": "database",
    "DB_TABLE": "table",
}


class ConfigError(ValueError):
    """Raised when required service settings are missing or invalid."""


class ServiceConfig(BaseModel):
    """Where the proxy lives and which database it should talk to."""

    model_config = ConfigDict(frozen=True)

    endpoint_url: str = Field(..., min_length=1)
    connection: ConnectionConfig
    timeout_s: float = Field(default=30.0, gt=0)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Build from VESSEL_TYPES_URL and DB_*; every variable is required."""
        env = os.environ if environ is None else environ
        required = ["VESSEL_TYPES_URL", *_ENV_FIELDS]
        missing = [name for name in required if not env.get(name)]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")
        try:
            connection = ConnectionConfig(**{field: env[name] for name, field in _ENV_FIELDS.items()})
            return cls(
                endpoint_url=env["VESSEL_TYPES_URL"],
                connection=connection,
                timeout_s=float(env.get("VESSEL_TYPES_TIMEOUT_S", "30")),
            )
        except (ValidationError, ValueError) as e:
            raise ConfigError(f"Invalid vessel type service configuration: {e}") from e


class ServiceResult(BaseModel):
    """Uniform envelope returned by every facade operation."""

    success: bool
    data: Any = None
    error: str | None = None
    not_found: bool = False


def _payload_data(vessel_type: Mapping[str, Any] | VesselTypeData) -> dict[str, Any]:
    if isinstance(vessel_type, VesselTypeData):
        return vessel_type.model_dump(exclude_unset=True)
    return to_storage_shape(dict(vessel_type))


class VesselTypeService:
    """get_all / create / update / delete over the vessel-type proxy."""

    def __init__(
        self,
        config: ServiceConfig,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Use the given client, or own one built with config.timeout_s (and transport, if given)."""
        self._config = config
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=config.timeout_s, transport=transport)
        self._client = client

    async def __aenter__(self) -> "VesselTypeService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    async def get_all(self) -> ServiceResult:
        """All vessel types in ascending id order."""
        return await self._call(
            "getAll",
            "fetch",
            lambda body: [VesselTypeRecord.model_validate(r) for r in body.get("vessel_types") or []],
        )

    async def create(self, vessel_type: Mapping[str, Any] | VesselTypeData) -> ServiceResult:
        """Create a vessel type. The input must not carry an id."""
        data = _payload_data(vessel_type)
        if "id" in data:
            return ServiceResult(success=False, error="Identifier must not be set on create")
        return await self._call(
            "create",
            "create",
            lambda body: VesselTypeRecord.model_validate(body["vessel_type"]),
            data=data,
        )

    async def update(self, vessel_type_id: int, vessel_type: Mapping[str, Any] | VesselTypeData) -> ServiceResult:
        data = _payload_data(vessel_type)
        data.pop("id", None)
        return await self._call(
            "update",
            "update",
            lambda body: VesselTypeRecord.model_validate(body["vessel_type"]),
            vessel_type_id=vessel_type_id,
            data=data,
        )

    async def delete(self, vessel_type_id: int) -> ServiceResult:
        return await self._call("delete", "delete", lambda body: True, vessel_type_id=vessel_type_id)

    async def _call(
        self,
        action: str,
        verb: str,
        parse: Callable[[dict[str, Any]], Any],
        vessel_type_id: int | None = None,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        body: dict[str, Any] = {"action": action, "config": self._config.connection.to_wire()}
        if vessel_type_id is not None:
            body["id"] = vessel_type_id
        if data is not None:
            body["data"] = data
        try:
            response = await self._client.post(self._config.endpoint_url, json=body)
            payload = response.json()
            if not isinstance(payload, dict):
                raise ValueError("response body is not a JSON object")
            if response.status_code != httpx.codes.OK:
                return self._failure(action, response.status_code, payload, verb)
            return ServiceResult(success=True, data=parse(payload))
        except (httpx.HTTPError, ValueError, KeyError) as e:
            LOG.error("Service error during %s: %s", action, e)
            return ServiceResult(success=False, error=NETWORK_ERROR)

    def _failure(self, action: str, status_code: int, payload: dict[str, Any], verb: str) -> ServiceResult:
        error = payload.get("error")
        details = payload.get("details")
        # Record not-found applies to update/delete only; any other 404 is a plain failure.
        if status_code == httpx.codes.NOT_FOUND and error == NOT_FOUND and action in ("update", "delete"):
            LOG.warning("Vessel type not found")
            return ServiceResult(success=False, error=NOT_FOUND, not_found=True)
        if error == CONNECTION_FAILED:
            LOG.error("%s: %s", CONNECTION_FAILED, details)
            return ServiceResult(success=False, error=NETWORK_ERROR)
        LOG.error("Failed to %s vessel type (%s): %s %s", verb, status_code, error, details or "")
        if error and details:
            return ServiceResult(success=False, error=f"{error}: {details}")
        return ServiceResult(success=False, error=error or f"Failed to {verb} vessel type")
