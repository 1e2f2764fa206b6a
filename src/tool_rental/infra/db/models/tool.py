from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from tool_rental.infra.db.models.base import Base


class ToolRow(Base):
    __tablename__ = "tools"

    code: Mapped[str] = mapped_column(String(10), primary_key=True)
    tool_type: Mapped[str] = mapped_column(String(30), nullable=False)
    brand: Mapped[str] = mapped_column(String(30), nullable=False)
    daily_charge: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2), nullable=False
    )

    weekday_charge: Mapped[bool] = mapped_column(Boolean, nullable=False)
    weekend_charge: Mapped[bool] = mapped_column(Boolean, nullable=False)
    holiday_charge: Mapped[bool] = mapped_column(Boolean, nullable=False)
    available: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default="true"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
