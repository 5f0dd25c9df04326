"""deployRepo tool.

Deploys a GitHub repository to Vercel and reports the new deployment.
"""

from typing import Any

from app.core.exceptions import ParameterValidationError
from app.core.orchestrator import DeploymentOrchestrator
from app.models.deployment import (
    DEFAULT_FRAMEWORK,
    FRAMEWORK_PRESETS,
    CredentialPair,
    DeployRepoParams,
)
from app.models.tools import DeployRepoData
from app.tools.base import BaseTool

GITHUB_DOMAIN = "github.com"


class DeployRepoTool(BaseTool[DeployRepoParams]):
    """Tool that validates, provisions and triggers a Vercel deployment."""

    @property
    def name(self) -> str:
        return "deployRepo"

    @property
    def description(self) -> str:
        return (
            "Deploy a GitHub repository to Vercel. Creates the Vercel project "
            "if it does not exist and deploys the repository's default branch."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "repoUrl": {
                    "type": "string",
                    "description": "GitHub repository URL, SSH remote or owner/repo",
                },
                "projectName": {
                    "type": "string",
                    "description": "Vercel project name (defaults to owner-repo)",
                },
                "framework": {
                    "type": "string",
                    "description": "Framework preset",
                    "enum": list(FRAMEWORK_PRESETS),
                    "default": DEFAULT_FRAMEWORK,
                },
            },
            "required": ["repoUrl"],
        }

    def validate(self, params: dict[str, Any]) -> DeployRepoParams:
        repo_url = self.require_string(params, "repoUrl")
        if GITHUB_DOMAIN not in repo_url:
            raise ParameterValidationError(
                "Parameter 'repoUrl' must be a valid GitHub repository URL"
            )

        # Framework presets are passed through as given
        return DeployRepoParams(
            repo_url=repo_url,
            project_name=self.optional_string(params, "projectName"),
            framework=self.optional_string(params, "framework") or DEFAULT_FRAMEWORK,
        )

    async def execute(
        self,
        orchestrator: DeploymentOrchestrator,
        credentials: CredentialPair,
        params: DeployRepoParams,
    ) -> DeployRepoData:
        result = await orchestrator.deploy_repository(credentials, params)

        return DeployRepoData(
            deployment_id=result.deployment.id,
            deployment_url=f"https://{result.deployment.url}",
            project_name=result.project.name,
            status=result.deployment.state,
            message=result.message,
            repository=params.repo_url,
            framework=params.framework,
            inspector_url=result.deployment.inspector_url,
        )
