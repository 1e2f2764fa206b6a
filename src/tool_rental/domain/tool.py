from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class ToolType(str, Enum):
    CHAINSAW = "Chainsaw"
    LADDER = "Ladder"
    JACKHAMMER = "Jackhammer"


class ToolBrand(str, Enum):
    STIHL = "Stihl"
    WERNER = "Werner"
    DEWALT = "DeWalt"
    RIDGID = "Ridgid"


@dataclass(frozen=True, slots=True)
class Tool:
    """
    A rentable tool and its billing policy.

    `available` is a snapshot taken when the tool was looked up. The inventory
    owns the real state and only changes it through `ToolInventory.try_reserve`.
    """

    code: str
    tool_type: ToolType
    brand: ToolBrand
    daily_charge: Decimal
    weekday_charge: bool
    weekend_charge: bool
    holiday_charge: bool
    available: bool = True


STANDARD_TOOLS: tuple[Tool, ...] = (
    Tool(
        code="CHNS",
        tool_type=ToolType.CHAINSAW,
        brand=ToolBrand.STIHL,
        daily_charge=Decimal("1.49"),
        weekday_charge=True,
        weekend_charge=False,
        holiday_charge=True,
    ),
    Tool(
        code="LADW",
        tool_type=ToolType.LADDER,
        brand=ToolBrand.WERNER,
        daily_charge=Decimal("1.99"),
        weekday_charge=True,
        weekend_charge=True,
        holiday_charge=False,
    ),
    Tool(
        code="JAKD",
        tool_type=ToolType.JACKHAMMER,
        brand=ToolBrand.DEWALT,
        daily_charge=Decimal("2.99"),
        weekday_charge=True,
        weekend_charge=False,
        holiday_charge=False,
    ),
    Tool(
        code="JAKR",
        tool_type=ToolType.JACKHAMMER,
        brand=ToolBrand.RIDGID,
        daily_charge=Decimal("2.99"),
        weekday_charge=True,
        weekend_charge=False,
        holiday_charge=False,
    ),
)
