"""PostgreSQL implementation of ToolInventory."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from tool_rental.domain.tool import Tool, ToolBrand, ToolType
from tool_rental.infra.db.models.tool import ToolRow
from tool_rental.ports.tool_inventory import ToolInventory


class PostgresToolInventory(ToolInventory):
    """
    PostgreSQL implementation of ToolInventory.

    - Uses SQLAlchemy ORM for database access
    - try_reserve takes a row lock (SELECT ... FOR UPDATE) before flipping
      availability, so concurrent checkouts of one tool serialize on the row
    - Commit is left to the session owner (one session per request)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_tools(self) -> list[Tool]:
        query = select(ToolRow).order_by(ToolRow.code)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def get_by_code(self, code: str) -> Tool | None:
        query = select(ToolRow).where(ToolRow.code == code)
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def try_reserve(self, code: str) -> bool:
        """
        Flip the tool to unavailable under a row lock.

        Returns:
            True if the tool was available and is now reserved, False otherwise
        """
        query = select(ToolRow).where(ToolRow.code == code).with_for_update()
        row = self._session.execute(query).scalar_one_or_none()

        if row is None or not row.available:
            return False

        row.available = False
        self._session.flush()
        return True

    def _to_domain(self, row: ToolRow) -> Tool:
        """Convert database model (ToolRow) to domain entity (Tool)."""
        return Tool(
            code=row.code,
            tool_type=ToolType(row.tool_type),
            brand=ToolBrand(row.brand),
            daily_charge=row.daily_charge,  # Already Decimal from NUMERIC column
            weekday_charge=row.weekday_charge,
            weekend_charge=row.weekend_charge,
            holiday_charge=row.holiday_charge,
            available=row.available,
        )
