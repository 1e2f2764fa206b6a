from fastapi import APIRouter, Depends

from tool_rental.entrypoints.http.dependencies import (
    get_list_tools_use_case,
    get_tool_by_code_use_case,
)
from tool_rental.entrypoints.http.dtos.tools import (
    ToolListResponseDTO,
    ToolResponseDTO,
    ToolsQueryDTO,
)
from tool_rental.entrypoints.http.error_responses import ErrorResponse
from tool_rental.entrypoints.http.mappers.tool_mapper import ToolMapper
from tool_rental.use_cases.get_tool_by_code import GetToolByCode, GetToolByCodeRequest
from tool_rental.use_cases.list_tools import ListTools, ListToolsRequest

router = APIRouter(tags=["Tools"])


@router.get(
    "/tools",
    response_model=ToolListResponseDTO,
    summary="List rental tools",
    description="""
    List the tool catalog ordered by tool code.

    Use `available_only=true` to hide tools that are currently checked out.
    """,
)
def list_tools(
    query: ToolsQueryDTO = Depends(),
    use_case: ListTools = Depends(get_list_tools_use_case),
) -> ToolListResponseDTO:
    tools = use_case.execute(ListToolsRequest(available_only=query.available_only))
    return ToolMapper.to_list_response(tools)


@router.get(
    "/tools/{code}",
    response_model=ToolResponseDTO,
    summary="Get a tool by code",
    responses={404: {"model": ErrorResponse, "description": "Unknown tool code"}},
)
def get_tool(
    code: str,
    use_case: GetToolByCode = Depends(get_tool_by_code_use_case),
) -> ToolResponseDTO:
    tool = use_case.execute(GetToolByCodeRequest(code=code))
    return ToolMapper.to_response(tool)
