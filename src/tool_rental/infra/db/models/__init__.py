from tool_rental.infra.db.models.base import Base
from tool_rental.infra.db.models.tool import ToolRow

__all__ = ["Base", "ToolRow"]
