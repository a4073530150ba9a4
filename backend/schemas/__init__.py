# Schemas package
from .health import HealthResponse
from .vessel_types import (
    ConnectionConfig,
    DeleteResponse,
    ErrorResponse,
    ProxyRequest,
    VesselTypeData,
    VesselTypeListResponse,
    VesselTypeRecord,
    VesselTypeResponse,
)

__all__ = [
    "ConnectionConfig",
    "DeleteResponse",
    "ErrorResponse",
    "HealthResponse",
    "ProxyRequest",
    "VesselTypeData",
    "VesselTypeListResponse",
    "VesselTypeRecord",
    "VesselTypeResponse",
]
