"""Dependency injection for API endpoints."""

from typing import Annotated

from fastapi import Depends

from app.core.orchestrator import DeploymentOrchestrator, get_orchestrator
from app.tools.registry import ToolRegistry, get_tool_registry


async def get_deployment_orchestrator() -> DeploymentOrchestrator:
    """Get a deployment orchestrator."""
    return get_orchestrator()


async def get_tools() -> ToolRegistry:
    """Get the tool registry."""
    return get_tool_registry()


# Type aliases for cleaner signatures
OrchestratorDep = Annotated[DeploymentOrchestrator, Depends(get_deployment_orchestrator)]
ToolsDep = Annotated[ToolRegistry, Depends(get_tools)]
