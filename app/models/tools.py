"""Tool declaration and response envelope models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ToolDefinition(BaseModel):
    """Schema of a tool as declared to the agent framework."""

    name: str
    description: str
    parameters: dict[str, Any]


class ToolListResponse(BaseModel):
    """Response for listing tools."""

    tools: list[ToolDefinition]
    total: int


class ToolData(BaseModel):
    """Base for tool payloads, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DeployRepoData(ToolData):
    """Payload returned by deployRepo."""

    deployment_id: str
    deployment_url: str
    project_name: str
    status: str
    message: str
    repository: str
    framework: str
    inspector_url: str | None = None
    tool_type: Literal["deployment"] = Field(default="deployment", alias="tool_type")


class DeploymentStatusData(ToolData):
    """Payload returned by getDeploymentStatus."""

    deployment_id: str
    status: str
    deployment_url: str
    message: str
    is_live: bool
    has_error: bool
    is_terminal: bool
    created_at: str | None = None
    inspector_url: str | None = None
    tool_type: Literal["deployment_status"] = Field(
        default="deployment_status", alias="tool_type"
    )


class SuccessEnvelope(BaseModel):
    """Uniform success response."""

    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    response_type: str = Field(default="mixed", alias="responseType")
    data: dict[str, Any]


class ErrorBody(BaseModel):
    message: str
    code: int
    details: str


class ErrorEnvelope(BaseModel):
    """Uniform error response."""

    success: Literal[False] = False
    error: ErrorBody

    @classmethod
    def build(cls, message: str, code: int, details: str) -> "ErrorEnvelope":
        return cls(error=ErrorBody(message=message, code=code, details=details))
