#!/usr/bin/env python3
"""
Seed the tools table with the store's standard catalog.

Features:
- Idempotent: safe to run multiple times (clears before seeding)
- Every seeded tool starts out available

Usage:
    DATABASE_URL=postgresql+psycopg2://... python scripts/seed_tools.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tool_rental.domain.tool import STANDARD_TOOLS, Tool
from tool_rental.infra.db.models.tool import ToolRow
from tool_rental.infra.db.session import get_session


def to_row(tool: Tool) -> ToolRow:
    return ToolRow(
        code=tool.code,
        tool_type=tool.tool_type.value,
        brand=tool.brand.value,
        daily_charge=tool.daily_charge,
        weekday_charge=tool.weekday_charge,
        weekend_charge=tool.weekend_charge,
        holiday_charge=tool.holiday_charge,
        available=True,
    )


def seed_tools(tools: tuple[Tool, ...] = STANDARD_TOOLS) -> None:
    print(f"Seeding database with {len(tools)} tools...")

    with get_session() as session:
        deleted_count = session.query(ToolRow).delete()
        print(f"   Deleted {deleted_count} existing tools")

        session.add_all([to_row(tool) for tool in tools])
        session.flush()

        for tool in tools:
            print(
                f"   {tool.code}: {tool.brand.value} {tool.tool_type.value} - "
                f"${tool.daily_charge:,.2f}/day"
            )

    print(f"Successfully seeded {len(tools)} tools!")


if __name__ == "__main__":
    try:
        seed_tools()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
