"""Per-request credential extraction.

Two transports are accepted and resolve to the same ``CredentialPair``:
separate ``X-GitHub-Token``/``X-Vercel-Token`` headers, or the legacy
``Authorization: Bearer <github_token>:<vercel_token>`` combined token.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from app.core.exceptions import AuthenticationMissingError, CredentialFormatError
from app.models.deployment import CredentialPair

TOKEN_SEPARATOR = ":"
FORMAT_MESSAGE = 'Token format should be "github_token:vercel_token"'
BOTH_REQUIRED_MESSAGE = "Both GitHub and Vercel tokens are required"


def _pair(source_token: str, platform_token: str) -> CredentialPair:
    source_token = source_token.strip()
    platform_token = platform_token.strip()
    if not source_token or not platform_token:
        raise CredentialFormatError(BOTH_REQUIRED_MESSAGE)
    return CredentialPair(source_token=source_token, platform_token=platform_token)


def parse_combined_token(token: str) -> CredentialPair:
    """Split ``github_token:vercel_token`` into a credential pair."""
    parts = token.split(TOKEN_SEPARATOR)
    if len(parts) != 2:
        raise CredentialFormatError(FORMAT_MESSAGE)
    return _pair(parts[0], parts[1])


class CredentialStrategy(ABC):
    """A way of carrying the credential pair on a request."""

    @abstractmethod
    def extract(self, headers: Mapping[str, str]) -> CredentialPair | None:
        """Return the pair, or None if this transport is not in use.

        Raises:
            CredentialFormatError: If the transport is present but malformed.
        """


class HeaderPairStrategy(CredentialStrategy):
    """Tokens in two dedicated headers."""

    def __init__(
        self,
        source_header: str = "X-GitHub-Token",
        platform_header: str = "X-Vercel-Token",
    ):
        self.source_header = source_header
        self.platform_header = platform_header

    def extract(self, headers: Mapping[str, str]) -> CredentialPair | None:
        source = headers.get(self.source_header)
        platform = headers.get(self.platform_header)
        if source is None and platform is None:
            return None
        return _pair(source or "", platform or "")


class CombinedTokenStrategy(CredentialStrategy):
    """Both tokens joined by ``:`` in an ``Authorization: Bearer`` header."""

    prefix = "Bearer "

    def extract(self, headers: Mapping[str, str]) -> CredentialPair | None:
        auth_header = headers.get("Authorization")
        if not auth_header or not auth_header.startswith(self.prefix):
            return None
        return parse_combined_token(auth_header[len(self.prefix) :])


DEFAULT_STRATEGIES: tuple[CredentialStrategy, ...] = (
    HeaderPairStrategy(),
    CombinedTokenStrategy(),
)


def resolve_credentials(
    headers: Mapping[str, str],
    strategies: Sequence[CredentialStrategy] = DEFAULT_STRATEGIES,
) -> CredentialPair:
    """Return the credential pair from the first transport present.

    Raises:
        AuthenticationMissingError: If no strategy finds its transport.
        CredentialFormatError: If a transport is present but malformed.
    """
    for strategy in strategies:
        credentials = strategy.extract(headers)
        if credentials is not None:
            return credentials
    raise AuthenticationMissingError()
