"""Core functionality for the deployer."""

from app.core.credentials import (
    CombinedTokenStrategy,
    CredentialStrategy,
    HeaderPairStrategy,
    parse_combined_token,
    resolve_credentials,
)
from app.core.exceptions import (
    AuthenticationMissingError,
    CredentialFormatError,
    DeployerError,
    DeploymentFailedError,
    DeploymentTriggerError,
    InsufficientPermissionError,
    InvalidCredentialError,
    InvalidReferenceError,
    OperationFailedError,
    ParameterValidationError,
    ProvisioningError,
    RepositoryNotFoundError,
    StatusCheckFailedError,
    StatusFetchError,
    UnknownToolError,
    UpstreamError,
)

__all__ = [
    "CombinedTokenStrategy",
    "CredentialStrategy",
    "HeaderPairStrategy",
    "parse_combined_token",
    "resolve_credentials",
    "AuthenticationMissingError",
    "CredentialFormatError",
    "DeployerError",
    "DeploymentFailedError",
    "DeploymentTriggerError",
    "InsufficientPermissionError",
    "InvalidCredentialError",
    "InvalidReferenceError",
    "OperationFailedError",
    "ParameterValidationError",
    "ProvisioningError",
    "RepositoryNotFoundError",
    "StatusCheckFailedError",
    "StatusFetchError",
    "UnknownToolError",
    "UpstreamError",
]
