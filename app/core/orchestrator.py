"""Deployment Orchestrator.

Sequences repository validation, project provisioning and deployment
triggering into a single deploy operation, and exposes the status check.
"""

import re

from app.core.exceptions import (
    DeployerError,
    DeploymentFailedError,
    StatusCheckFailedError,
)
from app.models.deployment import (
    CredentialPair,
    DeploymentResult,
    DeployRepoParams,
    RepositoryMetadata,
    StatusSummary,
)
from app.services.github_service import GitHubService
from app.services.status_service import StatusService
from app.services.vercel_service import VercelService
from app.utils.logging import get_logger

_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9-]")
_REPEATED_HYPHENS = re.compile(r"-+")


def sanitize_project_name(name: str) -> str:
    """Lowercase and reduce a name to Vercel's ``[a-z0-9-]`` alphabet."""
    name = _INVALID_NAME_CHARS.sub("-", name.lower())
    return _REPEATED_HYPHENS.sub("-", name).strip("-")


def resolve_project_name(repo: RepositoryMetadata, custom_name: str | None = None) -> str:
    """Pick the Vercel project name for a repository.

    A custom name is sanitized; without one (or when sanitizing leaves
    nothing) the name is ``<owner>-<repo>`` lowercased.
    """
    if custom_name:
        sanitized = sanitize_project_name(custom_name)
        if sanitized:
            return sanitized
    return f"{repo.owner}-{repo.repo}".lower()


class DeploymentOrchestrator:
    """Orchestrates GitHub and Vercel calls for the deployment tools.

    Deploy flow:
    1. Validate the GitHub repository
    2. Resolve the project name
    3. Create or reuse the Vercel project
    4. Trigger a deployment of the default branch
    """

    def __init__(
        self,
        github: GitHubService | None = None,
        vercel: VercelService | None = None,
    ):
        self.github = github or GitHubService()
        self.vercel = vercel or VercelService()
        self.status = StatusService(self.vercel)
        self.logger = get_logger("orchestrator")

    async def deploy_repository(
        self, credentials: CredentialPair, params: DeployRepoParams
    ) -> DeploymentResult:
        """Deploy a GitHub repository to Vercel.

        Raises:
            DeploymentFailedError: Wrapping the error of the step that failed.
                A project created before a failed trigger is left in place.
        """
        try:
            self.logger.info("deployment.validating_repository", repository=params.repo_url)
            repo = await self.github.validate_repository(
                credentials.source_token, params.repo_url
            )

            project_name = resolve_project_name(repo, params.project_name)

            self.logger.info(
                "deployment.provisioning_project",
                project=project_name,
                framework=params.framework,
            )
            project = await self.vercel.provision_project(
                credentials.platform_token,
                project_name,
                repo,
                params.framework,
            )

            self.logger.info("deployment.triggering", project=project.name)
            deployment = await self.vercel.create_deployment(
                credentials.platform_token, project, repo
            )
        except DeployerError as e:
            self.logger.warning("deployment.failed", error=e.message)
            raise DeploymentFailedError(e) from e

        self.logger.info(
            "deployment.initiated",
            deployment_id=deployment.id,
            project=project.name,
            state=deployment.state,
        )

        return DeploymentResult(
            deployment=deployment,
            project=project,
            message=f"Successfully initiated deployment of {repo.full_name} to Vercel",
        )

    async def get_deployment_status(
        self, platform_token: str, deployment_id: str
    ) -> StatusSummary:
        """Get the normalized status of a deployment."""
        try:
            return await self.status.get_status(platform_token, deployment_id)
        except DeployerError as e:
            raise StatusCheckFailedError(e) from e


def get_orchestrator() -> DeploymentOrchestrator:
    """Get a deployment orchestrator instance."""
    return DeploymentOrchestrator()
