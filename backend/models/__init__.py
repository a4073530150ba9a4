"""SQLAlchemy declarative base and models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all DB models; alembic reads Base.metadata."""
    pass


from models.unit_type import UnitType  # noqa: E402,F401 - register with Base
