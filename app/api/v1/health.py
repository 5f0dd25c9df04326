"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.api.deps import ToolsDep
from app.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    version: str
    environment: str
    tools: list[str]
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(tools: ToolsDep) -> HealthResponse:
    """Report service version and the tools it serves."""
    return HealthResponse(
        version=__version__,
        environment=settings.app_env,
        tools=tools.list_tools(),
        timestamp=datetime.now(timezone.utc),
    )
