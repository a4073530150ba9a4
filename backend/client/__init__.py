"""Client-side access to the vessel-type proxy."""
from client.shapes import to_storage_shape, to_ui_shape
from client.vessel_type_service import (
    ConfigError,
    ServiceConfig,
    ServiceResult,
    VesselTypeService,
)

__all__ = [
    "ConfigError",
    "ServiceConfig",
    "ServiceResult",
    "VesselTypeService",
    "to_storage_shape",
    "to_ui_shape",
]
