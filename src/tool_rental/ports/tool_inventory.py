from __future__ import annotations

from abc import ABC, abstractmethod

from tool_rental.domain.tool import Tool


class ToolInventory(ABC):
    """
    Port for tool inventory access.

    Availability is only ever changed through `try_reserve`, an explicit
    available -> unavailable transition.

    Contract:
        - `try_reserve` is atomic per tool code: between two flips, at most one
          caller gets True
        - Codes are matched exactly; callers pass them as given by the client
    """

    @abstractmethod
    def list_tools(self) -> list[Tool]:
        """Return every tool, ordered by code."""
        ...

    @abstractmethod
    def get_by_code(self, code: str) -> Tool | None:
        """Return the tool with its current availability, or None if unknown."""
        ...

    @abstractmethod
    def try_reserve(self, code: str) -> bool:
        """
        Mark the tool unavailable if it is currently available.

        Returns:
            True if this call performed the flip, False if the tool was already
            unavailable or does not exist
        """
        ...
