"""Base class for the tools exposed to the agent framework."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from app.core.exceptions import ParameterValidationError
from app.core.orchestrator import DeploymentOrchestrator
from app.models.deployment import CredentialPair
from app.models.tools import ToolData, ToolDefinition
from app.utils.logging import get_logger

ParamsT = TypeVar("ParamsT", bound=BaseModel)


class BaseTool(ABC, Generic[ParamsT]):
    """Base class for deployment tools.

    Tools should implement:
    - name: Tool identifier used in the dispatch route
    - description: What the tool does
    - parameters: JSON schema of the tool's parameters
    - validate(): Turn the raw request body into typed parameters
    - execute(): Run the operation and shape the response payload
    """

    def __init__(self):
        self.logger = get_logger(f"tool.{self.name}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name/identifier."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this tool does."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """JSON schema for the tool's parameters."""
        pass

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
        )

    @abstractmethod
    def validate(self, params: dict[str, Any]) -> ParamsT:
        """Validate raw parameters.

        Raises:
            ParameterValidationError: If a parameter is missing or malformed
        """
        pass

    @abstractmethod
    async def execute(
        self,
        orchestrator: DeploymentOrchestrator,
        credentials: CredentialPair,
        params: ParamsT,
    ) -> ToolData:
        """Run the tool and return its response payload."""
        pass

    @staticmethod
    def require_string(params: dict[str, Any], key: str) -> str:
        value = params.get(key)
        if value is None or value == "":
            raise ParameterValidationError(f"Missing required parameter: {key}")
        if not isinstance(value, str):
            raise ParameterValidationError(f"Parameter '{key}' must be a string")
        return value

    @staticmethod
    def optional_string(params: dict[str, Any], key: str) -> str | None:
        value = params.get(key)
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise ParameterValidationError(f"Parameter '{key}' must be a string")
        return value
