"""
Dependency injection for FastAPI routes.

Database sessions are per-request; each request gets a fresh inventory
adapter and use case bound to its own session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from tool_rental.adapters.postgres_tool_inventory import PostgresToolInventory
from tool_rental.infra.db.session import get_session
from tool_rental.ports.tool_inventory import ToolInventory
from tool_rental.use_cases.checkout_tool import CheckoutTool
from tool_rental.use_cases.get_tool_by_code import GetToolByCode
from tool_rental.use_cases.list_tools import ListTools


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The session commits when the request finishes (persisting a checkout's
    reservation) and rolls back if the route raised.
    """
    with get_session() as session:
        yield session


def get_tool_inventory(db: Session = Depends(get_db)) -> ToolInventory:
    return PostgresToolInventory(session=db)


def get_checkout_tool_use_case(
    inventory: ToolInventory = Depends(get_tool_inventory),
) -> CheckoutTool:
    return CheckoutTool(tool_inventory=inventory)


def get_list_tools_use_case(inventory: ToolInventory = Depends(get_tool_inventory)) -> ListTools:
    return ListTools(tool_inventory=inventory)


def get_tool_by_code_use_case(
    inventory: ToolInventory = Depends(get_tool_inventory),
) -> GetToolByCode:
    return GetToolByCode(tool_inventory=inventory)
