from __future__ import annotations

from tool_rental.domain.tool import Tool
from tool_rental.entrypoints.http.dtos.tools import ToolListResponseDTO, ToolResponseDTO


class ToolMapper:
    """Maps domain tools to REST DTOs."""

    @staticmethod
    def to_response(tool: Tool) -> ToolResponseDTO:
        return ToolResponseDTO(
            code=tool.code,
            tool_type=tool.tool_type.value,
            brand=tool.brand.value,
            daily_charge=str(tool.daily_charge),  # Decimal → str at boundary
            weekday_charge=tool.weekday_charge,
            weekend_charge=tool.weekend_charge,
            holiday_charge=tool.holiday_charge,
            available=tool.available,
        )

    @staticmethod
    def to_list_response(tools: list[Tool]) -> ToolListResponseDTO:
        return ToolListResponseDTO(
            tools=[ToolMapper.to_response(tool) for tool in tools],
            total=len(tools),
        )
