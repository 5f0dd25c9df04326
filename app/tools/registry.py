"""Tool registry for dispatching tool calls by name."""

from functools import lru_cache
from typing import Any

from app.core.exceptions import UnknownToolError
from app.models.tools import ToolDefinition
from app.tools.base import BaseTool
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """Registry of the tools exposed by the service."""

    def __init__(self):
        self._tools: dict[str, BaseTool[Any]] = {}

    def register(self, tool: BaseTool[Any]) -> None:
        """Register a tool instance."""
        if tool.name in self._tools:
            logger.warning("tool_registry.overwrite", tool=tool.name)

        self._tools[tool.name] = tool
        logger.debug("tool_registry.registered", tool=tool.name)

    def get(self, name: str) -> BaseTool[Any]:
        """Get a tool by name.

        Raises:
            UnknownToolError: If no tool has that name
        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name, self.list_tools())
        return tool

    def list_tools(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def definitions(self) -> list[ToolDefinition]:
        """Schemas of all registered tools."""
        return [tool.definition() for tool in self._tools.values()]


@lru_cache
def get_tool_registry() -> ToolRegistry:
    """Get the tool registry with the deployment tools registered."""
    from app.tools.deploy_repo import DeployRepoTool
    from app.tools.deployment_status import DeploymentStatusTool

    registry = ToolRegistry()
    registry.register(DeployRepoTool())
    registry.register(DeploymentStatusTool())
    return registry
