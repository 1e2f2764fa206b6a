from __future__ import annotations

from dataclasses import dataclass

from tool_rental.domain.tool import Tool
from tool_rental.ports.tool_inventory import ToolInventory


@dataclass(frozen=True, slots=True)
class ListToolsRequest:
    available_only: bool = False


class ListTools:
    """List the tool catalog in code order, optionally only tools that can be rented now."""

    def __init__(self, tool_inventory: ToolInventory) -> None:
        self._inventory = tool_inventory

    def execute(self, request: ListToolsRequest) -> list[Tool]:
        tools = self._inventory.list_tools()
        if request.available_only:
            return [tool for tool in tools if tool.available]
        return tools
