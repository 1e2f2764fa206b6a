"""Get tool by code use case."""

from __future__ import annotations

from dataclasses import dataclass

from tool_rental.domain.errors import NotFoundError, ValidationError
from tool_rental.domain.tool import Tool
from tool_rental.ports.tool_inventory import ToolInventory


@dataclass(frozen=True, slots=True)
class GetToolByCodeRequest:
    """Request to get a tool by code."""

    code: str


class GetToolByCode:
    """
    Use case for retrieving a single tool with its current availability.

    Responsibilities:
    - Reject blank codes
    - Delegate to the inventory for data access
    - Raise NotFoundError if the tool doesn't exist
    """

    def __init__(self, tool_inventory: ToolInventory) -> None:
        self._inventory = tool_inventory

    def execute(self, request: GetToolByCodeRequest) -> Tool:
        """
        Raises:
            ValidationError: If code is empty or whitespace
            NotFoundError: If no tool has the given code
        """
        if not request.code.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "code",
                        "message": "Must not be blank",
                        "code": "BLANK_CODE",
                    }
                ]
            )

        tool = self._inventory.get_by_code(request.code)

        if tool is None:
            raise NotFoundError(resource="Tool", identifier=request.code)

        return tool
