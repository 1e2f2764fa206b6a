from __future__ import annotations

import threading
from dataclasses import replace
from typing import Iterable

from tool_rental.domain.tool import Tool
from tool_rental.ports.tool_inventory import ToolInventory


class InMemoryToolInventory(ToolInventory):
    """
    Canonical contract implementation for tests and local runs.

    - Availability is tracked per code, seeded from each tool's `available` flag
    - Returned tools carry the availability at lookup time
    - try_reserve is serialized by a lock so a tool is handed out at most once
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        self._tools = {tool.code: tool for tool in tools}
        self._available = {code: tool.available for code, tool in self._tools.items()}
        self._lock = threading.Lock()

    def list_tools(self) -> list[Tool]:
        return [self._snapshot(code) for code in sorted(self._tools)]

    def get_by_code(self, code: str) -> Tool | None:
        if code not in self._tools:
            return None
        return self._snapshot(code)

    def try_reserve(self, code: str) -> bool:
        with self._lock:
            if not self._available.get(code, False):
                return False
            self._available[code] = False
            return True

    def _snapshot(self, code: str) -> Tool:
        return replace(self._tools[code], available=self._available[code])
