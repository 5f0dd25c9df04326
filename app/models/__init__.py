"""Data models for the deployer."""

from app.models.deployment import (
    DEFAULT_FRAMEWORK,
    FRAMEWORK_PRESETS,
    CredentialPair,
    DeploymentResult,
    DeploymentState,
    DeploymentStatusParams,
    DeployRepoParams,
    RepositoryMetadata,
    RepositoryReference,
    StatusSummary,
    VercelDeployment,
    VercelProject,
)
from app.models.tools import (
    DeploymentStatusData,
    DeployRepoData,
    ErrorEnvelope,
    SuccessEnvelope,
    ToolDefinition,
    ToolListResponse,
)

__all__ = [
    # Deployment models
    "DEFAULT_FRAMEWORK",
    "FRAMEWORK_PRESETS",
    "CredentialPair",
    "DeploymentResult",
    "DeploymentState",
    "DeploymentStatusParams",
    "DeployRepoParams",
    "RepositoryMetadata",
    "RepositoryReference",
    "StatusSummary",
    "VercelDeployment",
    "VercelProject",
    # Tool models
    "DeploymentStatusData",
    "DeployRepoData",
    "ErrorEnvelope",
    "SuccessEnvelope",
    "ToolDefinition",
    "ToolListResponse",
]
