"""Custom exceptions for the deployer.

Every error carries the HTTP-style status code and the short context string
used when the Request Adapter renders it as an error envelope.
"""

from typing import Any


class DeployerError(Exception):
    """Base exception for the deployer."""

    status_code: int = 400
    context: str = "Tool execution failed"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


# Repository lookup


class InvalidReferenceError(DeployerError):
    """Repository reference matches none of the accepted forms."""

    def __init__(self, reference: str):
        super().__init__(
            f"Invalid GitHub repository URL: {reference}",
            {"reference": reference},
        )


class RepositoryNotFoundError(DeployerError):
    """Repository is absent or invisible to the credential."""

    def __init__(self, reference: str):
        super().__init__(
            f"Repository not found or not accessible: {reference}",
            {"reference": reference},
        )


class InvalidCredentialError(DeployerError):
    """GitHub rejected the token."""

    def __init__(self) -> None:
        super().__init__("GitHub token is invalid or expired")


class InsufficientPermissionError(DeployerError):
    """GitHub token lacks access to the repository."""

    def __init__(self) -> None:
        super().__init__(
            "GitHub token does not have permission to access this repository"
        )


class UpstreamError(DeployerError):
    """Any other GitHub API failure."""

    def __init__(self, message: str, upstream_status: int | None = None):
        details = {}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        super().__init__(f"GitHub API error: {message}", details)


# Deployment platform


class ProvisioningError(DeployerError):
    """Vercel project could not be created."""

    def __init__(self, message: str):
        super().__init__(f"Failed to create Vercel project: {message}")


class DeploymentTriggerError(DeployerError):
    """Vercel refused to create the deployment."""

    def __init__(self, message: str):
        super().__init__(f"Failed to create deployment: {message}")


class StatusFetchError(DeployerError):
    """Deployment state could not be fetched."""

    def __init__(self, message: str):
        super().__init__(f"Vercel API error: {message}")


# Orchestrator boundary


class OperationFailedError(DeployerError):
    """A component error re-raised with an operation-specific prefix."""

    prefix: str = "Operation failed"

    def __init__(self, cause: DeployerError):
        self.cause = cause
        super().__init__(f"{self.prefix}: {cause.message}", cause.details)
        self.context = self.prefix


class DeploymentFailedError(OperationFailedError):
    prefix = "Deployment failed"


class StatusCheckFailedError(OperationFailedError):
    prefix = "Failed to get deployment status"


# Request Adapter


class ParameterValidationError(DeployerError):
    """Tool parameters are missing or malformed."""

    context = "Invalid tool parameters"


class CredentialFormatError(ParameterValidationError):
    """Credentials were supplied but could not be parsed."""

    context = 'Token format should be "github_token:vercel_token"'


class AuthenticationMissingError(DeployerError):
    """No credential transport was present on the request."""

    status_code = 401
    context = "Missing Authorization header with Bearer token"

    def __init__(self) -> None:
        super().__init__(
            "Deployment tools require authentication. Please provide Bearer "
            'token in format "github_token:vercel_token"'
        )


class UnknownToolError(DeployerError):
    """Requested tool is not registered."""

    status_code = 404

    def __init__(self, tool_name: str, available: list[str]):
        super().__init__(f"Unknown tool: {tool_name}", {"tool_name": tool_name})
        self.context = f"Available tools: {', '.join(available)}"
