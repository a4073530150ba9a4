"""Unit (vessel) type model for DB persistence."""
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class UnitType(Base):
    """unit_type table: one row per vessel type shown on the configuration screen."""

    __tablename__ = "unit_type"
    # Never reuse ids of deleted rows on SQLite.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    max_speed: Mapped[Optional[float]] = mapped_column(Numeric(10, 2), nullable=True)
    fuel_capacity: Mapped[Optional[float]] = mapped_column(Numeric(12, 2), nullable=True)
    engine_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, default=1, server_default="1")
    color: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())
