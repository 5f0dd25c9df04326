"""Vercel service for project provisioning and deployments."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx

from app.config import settings
from app.core.exceptions import (
    DeploymentTriggerError,
    ProvisioningError,
    StatusFetchError,
)
from app.models.deployment import (
    RepositoryMetadata,
    VercelDeployment,
    VercelProject,
)
from app.utils.logging import get_logger

logger = get_logger("vercel_service")

# Vercel has no "static" preset; static sites are created without one
STATIC_FRAMEWORK = "static"


class VercelService:
    """Client for the Vercel projects and deployments APIs."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str | None = None,
        team_id: str | None = None,
    ):
        self._client = client
        self.base_url = (base_url or settings.vercel_api_url).rstrip("/")
        self.team_id = team_id if team_id is not None else settings.vercel_team_id

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient() as client:
            yield client

    async def _request(
        self,
        method: str,
        path: str,
        token: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {token}",
            "User-Agent": settings.user_agent,
        }
        params = {"teamId": self.team_id} if self.team_id else None
        async with self._http() as client:
            return await client.request(
                method,
                f"{self.base_url}{path}",
                headers=headers,
                params=params,
                json=json,
            )

    async def get_project(self, token: str, name: str) -> VercelProject | None:
        """Get an existing project by name, or None if Vercel reports 404."""
        response = await self._request("GET", f"/v9/projects/{name}", token)
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return VercelProject.model_validate(response.json())

    async def provision_project(
        self,
        token: str,
        name: str,
        repo: RepositoryMetadata,
        framework: str = STATIC_FRAMEWORK,
    ) -> VercelProject:
        """Return the project called ``name``, creating it if needed.

        An existing project is returned untouched. Any lookup failure other
        than a clean hit counts as "absent" and falls through to creation.
        """
        try:
            existing = await self.get_project(token, name)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "vercel.project.lookup_failed",
                project=name,
                error=str(e),
            )
            existing = None

        if existing is not None:
            logger.info("vercel.project.reused", project=existing.name, id=existing.id)
            return existing

        payload = {
            "name": name,
            "gitRepository": {"type": "github", "repo": repo.full_name},
            "framework": None if framework == STATIC_FRAMEWORK else framework,
        }

        try:
            response = await self._request("POST", "/v9/projects", token, json=payload)
        except httpx.HTTPError as e:
            raise ProvisioningError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise ProvisioningError(f"Vercel API error: {_error_message(response)}")

        try:
            project = VercelProject.model_validate(response.json())
        except ValueError as e:
            raise ProvisioningError("invalid response body") from e

        logger.info("vercel.project.created", project=project.name, id=project.id)
        return project

    async def create_deployment(
        self,
        token: str,
        project: VercelProject,
        repo: RepositoryMetadata,
    ) -> VercelDeployment:
        """Deploy the repository's default branch into ``project``."""
        if not project.id:
            raise DeploymentTriggerError(f"Project {project.name!r} has no id")

        payload = {
            "name": project.name,
            "project": project.id,
            "gitSource": {
                "type": "github",
                "repo": repo.full_name,
                "ref": repo.default_branch,
                "repoId": repo.repo_id,
            },
        }

        try:
            response = await self._request(
                "POST", "/v13/deployments", token, json=payload
            )
        except httpx.HTTPError as e:
            raise DeploymentTriggerError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise DeploymentTriggerError(
                f"Vercel deployment error: {_error_message(response)}"
            )

        try:
            deployment = VercelDeployment.model_validate(response.json())
        except ValueError as e:
            raise DeploymentTriggerError("invalid response body") from e

        logger.info(
            "vercel.deployment.created",
            deployment_id=deployment.id,
            project=project.name,
            ref=repo.default_branch,
        )
        return deployment

    async def get_deployment(self, token: str, deployment_id: str) -> VercelDeployment:
        """Fetch a deployment's current state."""
        try:
            response = await self._request(
                "GET", f"/v13/deployments/{deployment_id}", token
            )
        except httpx.HTTPError as e:
            raise StatusFetchError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise StatusFetchError(_error_message(response))

        try:
            return VercelDeployment.model_validate(response.json())
        except ValueError as e:
            raise StatusFetchError("invalid response body") from e


def _error_message(response: httpx.Response) -> str:
    """Extract ``error.message`` from a Vercel error body."""
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return message or response.reason_phrase or f"HTTP {response.status_code}"
