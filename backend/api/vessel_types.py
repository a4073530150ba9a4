"""Vessel-type proxy: one structured request in, one SQL statement, one JSON response out."""
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy import Table
from sqlalchemy.engine import Connection

from db import Connector, get_connector
from repositories.unit_type_repository import (
    create_unit_type as repo_create_unit_type,
    delete_unit_type as repo_delete_unit_type,
    list_unit_types as repo_list_unit_types,
    resolve_table,
    update_unit_type as repo_update_unit_type,
)
from schemas.vessel_types import (
    ACTIONS,
    ConnectionConfig,
    DeleteResponse,
    ErrorResponse,
    ProxyRequest,
    VesselTypeData,
    VesselTypeListResponse,
    VesselTypeResponse,
)

LOG = logging.getLogger(__name__)

router = APIRouter(tags=["vessel-types"])

# Sent on every response, errors included.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}

NOT_FOUND = "Vessel type not found"


class ProxyError(Exception):
    """Failure that maps directly to an error response."""

    def __init__(self, status_code: int, error: str, details: str | None = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def json_response(body: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        content=body.model_dump(mode="json", exclude_none=isinstance(body, ErrorResponse)),
        status_code=status_code,
        headers=CORS_HEADERS,
    )


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    return json_response(ErrorResponse(error=error, details=details), status_code)


def _validation_details(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'body'}: {err['msg']}" for err in exc.errors()
    )


def _parse_request(payload: Any) -> ProxyRequest:
    if payload is not None and not isinstance(payload, dict):
        raise ProxyError(status.HTTP_400_BAD_REQUEST, "Invalid JSON body", "expected a JSON object")
    try:
        request = ProxyRequest.model_validate(payload or {})
    except ValidationError as e:
        raise ProxyError(status.HTTP_400_BAD_REQUEST, "Invalid request", _validation_details(e)) from e
    if not request.action or not request.config:
        raise ProxyError(status.HTTP_400_BAD_REQUEST, "Missing required fields: action and config")
    return request


def _parse_config(raw: dict[str, Any]) -> tuple[ConnectionConfig, Table]:
    try:
        config = ConnectionConfig.model_validate(raw)
    except ValidationError as e:
        raise ProxyError(
            status.HTTP_400_BAD_REQUEST, "Invalid connection config", _validation_details(e)
        ) from e
    table = resolve_table(config.table)
    if table is None:
        raise ProxyError(status.HTTP_400_BAD_REQUEST, "Table not allowed", config.table)
    return config, table


def _parse_data(raw: dict[str, Any] | None) -> VesselTypeData | None:
    if raw is None:
        return None
    try:
        return VesselTypeData.model_validate(raw)
    except ValidationError as e:
        raise ProxyError(
            status.HTTP_400_BAD_REQUEST, "Invalid vessel type data", _validation_details(e)
        ) from e


def _require_id(request: ProxyRequest) -> int:
    if request.id is None or request.id < 1:
        raise ProxyError(status.HTTP_400_BAD_REQUEST, "Missing required field: id")
    return request.id


def _validate_action(request: ProxyRequest) -> VesselTypeData | None:
    """Check per-action inputs before any connection is opened."""
    data = _parse_data(request.data)
    if request.action == "create":
        if request.id is not None:
            raise ProxyError(status.HTTP_400_BAD_REQUEST, "Identifier not allowed on create")
        if data is None or not (data.name or "").strip():
            raise ProxyError(status.HTTP_400_BAD_REQUEST, "Missing required field: data.name")
    elif request.action == "update":
        _require_id(request)
        if data is None:
            raise ProxyError(status.HTTP_400_BAD_REQUEST, "Missing required field: data")
        if "name" in data.model_fields_set and not (data.name or "").strip():
            raise ProxyError(status.HTTP_400_BAD_REQUEST, "Invalid field: data.name")
    elif request.action == "delete":
        _require_id(request)
    return data


def _execute(
    conn: Connection, table: Table, request: ProxyRequest, data: VesselTypeData | None
) -> JSONResponse:
    if request.action == "getAll":
        records = repo_list_unit_types(conn, table)
        return json_response(VesselTypeListResponse(vessel_types=records))
    if request.action == "create":
        record = repo_create_unit_type(conn, table, data)
        LOG.info("Created vessel type id=%s in %s", record.id, table.name)
        return json_response(VesselTypeResponse(vessel_type=record))
    if request.action == "update":
        record = repo_update_unit_type(conn, table, request.id, data)
        if record is None:
            raise ProxyError(status.HTTP_404_NOT_FOUND, NOT_FOUND)
        LOG.info("Updated vessel type id=%s in %s", record.id, table.name)
        return json_response(VesselTypeResponse(vessel_type=record))
    if not repo_delete_unit_type(conn, table, request.id):
        raise ProxyError(status.HTTP_404_NOT_FOUND, NOT_FOUND)
    LOG.info("Deleted vessel type id=%s from %s", request.id, table.name)
    return json_response(DeleteResponse())


def handle_proxy_request(payload: Any, connector: Connector) -> JSONResponse:
    """Validate, connect, run one statement, respond. The connection is closed on every path."""
    try:
        request = _parse_request(payload)
        config, table = _parse_config(request.config)
        if request.action not in ACTIONS:
            raise ProxyError(status.HTTP_400_BAD_REQUEST, "Invalid action")
        data = _validate_action(request)
    except ProxyError as e:
        LOG.warning("Rejected vessel-type request: %s (%s)", e.error, e.details or "")
        return error_response(e.status_code, e.error, e.details)

    LOG.info("vessel-types %s on %s:%s/%s", request.action, config.host, config.port, config.database)
    try:
        conn = connector.open(config)
    except Exception as e:
        LOG.error("Database connection failed for %s:%s: %s", config.host, config.port, e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database connection failed", str(e))

    try:
        with conn:
            return _execute(conn, table, request, data)
    except ProxyError as e:
        return error_response(e.status_code, e.error, e.details)
    except Exception as e:
        LOG.exception("vessel-types %s failed", request.action)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database query failed", str(e))


@router.options("/vessel-types", response_class=PlainTextResponse)
def vessel_types_preflight() -> PlainTextResponse:
    """CORS preflight."""
    return PlainTextResponse("ok", headers=CORS_HEADERS)


@router.post(
    "/vessel-types",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def vessel_types(
    payload: Any = Body(default=None),
    connector: Connector = Depends(get_connector),
) -> JSONResponse:
    """Run getAll, create, update or delete against the configured vessel-type table."""
    return handle_proxy_request(payload, connector)
