"""Tools exposed to the agent framework."""

from app.tools.base import BaseTool
from app.tools.deploy_repo import DeployRepoTool
from app.tools.deployment_status import DeploymentStatusTool
from app.tools.registry import ToolRegistry, get_tool_registry

__all__ = [
    "BaseTool",
    "DeployRepoTool",
    "DeploymentStatusTool",
    "ToolRegistry",
    "get_tool_registry",
]
