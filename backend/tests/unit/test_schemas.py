"""Unit tests for vessel-type wire schemas."""
import pytest
from pydantic import ValidationError

from schemas.vessel_types import ConnectionConfig, VesselTypeData

pytestmark = pytest.mark.unit

CONFIG = {
    "host": "db.internal",
    "port": 5432,
    "user": "fleet",
    "password": "s3cret",
    "database": "fleet",
    "table": "unit_type",
}


def test_vessel_type_data_accepts_camel_and_snake():
    camel = VesselTypeData.model_validate({"name": "A", "maxSpeed": 10, "fuelCapacity": 5, "engineCount": 2})
    snake = VesselTypeData.model_validate({"name": "A", "max_speed": 10, "fuel_capacity": 5, "engine_count": 2})
    assert camel == snake
    assert camel.model_dump(exclude_unset=True) == {
        "name": "A",
        "max_speed": 10.0,
        "fuel_capacity": 5.0,
        "engine_count": 2,
    }


def test_vessel_type_data_ignores_identity_and_timestamps():
    data = VesselTypeData.model_validate({"id": 9, "name": "A", "created_at": "x", "updated_at": "y"})
    assert data.model_dump(exclude_unset=True) == {"name": "A"}


def test_vessel_type_data_rejects_bad_types():
    with pytest.raises(ValidationError):
        VesselTypeData.model_validate({"engineCount": "many"})


def test_connection_config_requires_every_field():
    for key in CONFIG:
        incomplete = {k: v for k, v in CONFIG.items() if k != key}
        with pytest.raises(ValidationError):
            ConnectionConfig.model_validate(incomplete)


@pytest.mark.parametrize("port", [0, 70000, "x"])
def test_connection_config_rejects_bad_port(port):
    with pytest.raises(ValidationError):
        ConnectionConfig.model_validate({**CONFIG, "port": port})


def test_connection_config_hides_password():
    config = ConnectionConfig.model_validate(CONFIG)
    assert "s3cret" not in repr(config)
    assert config.to_wire() == CONFIG


def test_connection_config_is_hashable_by_value():
    assert hash(ConnectionConfig(**CONFIG)) == hash(ConnectionConfig(**CONFIG))
    assert ConnectionConfig(**CONFIG) != ConnectionConfig(**{**CONFIG, "host": "other"})
