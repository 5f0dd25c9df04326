"""Tool listing and dispatch endpoints."""

from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.api.deps import OrchestratorDep, ToolsDep
from app.core.credentials import resolve_credentials
from app.core.exceptions import DeployerError, ParameterValidationError
from app.models.tools import ErrorEnvelope, SuccessEnvelope, ToolListResponse
from app.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


def error_response(message: str, code: int, details: str) -> JSONResponse:
    """Render an error envelope with a matching HTTP status."""
    envelope = ErrorEnvelope.build(message, code, details)
    return JSONResponse(status_code=code, content=envelope.model_dump())


async def _read_params(request: Request) -> dict[str, Any]:
    body = await request.body()
    if not body:
        return {}
    try:
        params = await request.json()
    except ValueError as e:
        raise ParameterValidationError("Request body must be valid JSON") from e
    if not isinstance(params, dict):
        raise ParameterValidationError("Request body must be a JSON object")
    return params


@router.get(
    "",
    response_model=ToolListResponse,
    summary="List available tools",
)
async def list_tools(tools: ToolsDep) -> ToolListResponse:
    """Declare the tools and their parameter schemas."""
    definitions = tools.definitions()
    return ToolListResponse(tools=definitions, total=len(definitions))


@router.post(
    "/{tool_name}",
    summary="Execute a tool",
    description="Authenticate the caller, validate parameters and run the named tool.",
)
async def execute_tool(
    tool_name: str,
    request: Request,
    tools: ToolsDep,
    orchestrator: OrchestratorDep,
) -> JSONResponse:
    """Run a tool and wrap its outcome in the response envelope."""
    try:
        credentials = resolve_credentials(request.headers)
        tool = tools.get(tool_name)
        params = tool.validate(await _read_params(request))

        logger.info("tool.started", tool=tool_name)
        data = await tool.execute(orchestrator, credentials, params)
        logger.info("tool.completed", tool=tool_name)

    except DeployerError as e:
        logger.info(
            "tool.rejected",
            tool=tool_name,
            error_type=type(e).__name__,
            status_code=e.status_code,
        )
        return error_response(e.message, e.status_code, e.context)

    except Exception as e:
        logger.exception("tool.execution_error", tool=tool_name)
        return error_response(
            str(e) or "Unknown error occurred",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Tool execution failed",
        )

    envelope = SuccessEnvelope(data=data.model_dump(by_alias=True, exclude_none=True))
    return JSONResponse(content=envelope.model_dump(by_alias=True))
