"""GitHub service for repository validation and metadata."""

import re
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from app.config import settings
from app.core.exceptions import (
    InsufficientPermissionError,
    InvalidCredentialError,
    InvalidReferenceError,
    RepositoryNotFoundError,
    UpstreamError,
)
from app.models.deployment import RepositoryMetadata, RepositoryReference
from app.utils.logging import get_logger

logger = get_logger("github_service")

# Tried in order, first match wins
REFERENCE_PATTERNS = [
    re.compile(r"^https://github\.com/([^/]+)/([^/]+?)(?:\.git)?(?:/.*)?$"),
    re.compile(r"^git@github\.com:([^/]+)/([^/]+?)(?:\.git)?$"),
    re.compile(r"^([^/]+)/([^/]+)$"),
]


def parse_repository_reference(reference: str) -> RepositoryReference:
    """Parse a GitHub URL, SSH remote or ``owner/repo`` string.

    Raises:
        InvalidReferenceError: If no accepted form matches.
    """
    for pattern in REFERENCE_PATTERNS:
        match = pattern.match(reference)
        if match:
            return RepositoryReference(owner=match.group(1), repo=match.group(2))

    raise InvalidReferenceError(reference)


class GitHubService:
    """Looks up repositories through the GitHub REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
    ):
        self._client = client
        self.base_url = (base_url or settings.github_api_url).rstrip("/")

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient() as client:
            yield client

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": settings.user_agent,
        }

    async def validate_repository(
        self, token: str, reference: str
    ) -> RepositoryMetadata:
        """Validate that a repository exists and fetch its metadata.

        Args:
            token: GitHub token of the caller
            reference: Repository in any form accepted by
                :func:`parse_repository_reference`

        Returns:
            Metadata including the default branch and numeric repository id
        """
        ref = parse_repository_reference(reference)
        url = f"{self.base_url}/repos/{ref.owner}/{ref.repo}"

        logger.debug("github.repository.lookup", owner=ref.owner, repo=ref.repo)

        try:
            async with self._http() as client:
                response = await client.get(url, headers=self._headers(token))
        except httpx.HTTPError as e:
            raise UpstreamError(str(e) or type(e).__name__) from e

        if response.status_code == 404:
            raise RepositoryNotFoundError(reference)
        if response.status_code == 401:
            raise InvalidCredentialError()
        if response.status_code == 403:
            raise InsufficientPermissionError()
        if not response.is_success:
            raise UpstreamError(
                _error_message(response), upstream_status=response.status_code
            )

        try:
            data = response.json()
            metadata = RepositoryMetadata(
                owner=data["owner"]["login"],
                repo=data["name"],
                full_name=data["full_name"],
                default_branch=data["default_branch"],
                is_private=data["private"],
                repo_id=data["id"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(
                "invalid response body", upstream_status=response.status_code
            ) from e

        logger.info(
            "github.repository.validated",
            repository=metadata.full_name,
            default_branch=metadata.default_branch,
            private=metadata.is_private,
        )
        return metadata


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    message = body.get("message") if isinstance(body, dict) else None
    return message or response.reason_phrase or f"HTTP {response.status_code}"
