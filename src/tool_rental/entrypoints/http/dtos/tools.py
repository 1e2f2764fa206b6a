from pydantic import BaseModel, ConfigDict, Field


class ToolResponseDTO(BaseModel):
    code: str
    tool_type: str
    brand: str
    daily_charge: str = Field(description="Daily rental charge as decimal string")
    weekday_charge: bool
    weekend_charge: bool
    holiday_charge: bool
    available: bool

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": "LADW",
                "tool_type": "Ladder",
                "brand": "Werner",
                "daily_charge": "1.99",
                "weekday_charge": True,
                "weekend_charge": True,
                "holiday_charge": False,
                "available": True,
            }
        }
    )


class ToolsQueryDTO(BaseModel):
    """Query parameters for listing tools."""

    available_only: bool = Field(
        default=False,
        description="Only return tools that can be checked out right now",
        examples=[True],
    )


class ToolListResponseDTO(BaseModel):
    tools: list[ToolResponseDTO]
    total: int
