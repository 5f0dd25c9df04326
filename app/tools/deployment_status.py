"""getDeploymentStatus tool."""

from datetime import datetime, timedelta, timezone
from typing import Any

from app.core.orchestrator import DeploymentOrchestrator
from app.models.deployment import CredentialPair, DeploymentStatusParams
from app.models.tools import DeploymentStatusData
from app.tools.base import BaseTool

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_timestamp(epoch_ms: int | None) -> str | None:
    """Render epoch milliseconds as ISO-8601 UTC, e.g. ``2024-01-01T00:00:00.000Z``."""
    if epoch_ms is None:
        return None
    moment = EPOCH + timedelta(milliseconds=epoch_ms)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DeploymentStatusTool(BaseTool[DeploymentStatusParams]):
    """Tool that reports the current state of a Vercel deployment."""

    @property
    def name(self) -> str:
        return "getDeploymentStatus"

    @property
    def description(self) -> str:
        return "Check the status of a Vercel deployment."

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "deploymentId": {
                    "type": "string",
                    "description": "Deployment id returned by deployRepo",
                },
            },
            "required": ["deploymentId"],
        }

    def validate(self, params: dict[str, Any]) -> DeploymentStatusParams:
        return DeploymentStatusParams(
            deployment_id=self.require_string(params, "deploymentId")
        )

    async def execute(
        self,
        orchestrator: DeploymentOrchestrator,
        credentials: CredentialPair,
        params: DeploymentStatusParams,
    ) -> DeploymentStatusData:
        summary = await orchestrator.get_deployment_status(
            credentials.platform_token, params.deployment_id
        )
        deployment = summary.deployment

        return DeploymentStatusData(
            deployment_id=deployment.id,
            status=summary.status,
            deployment_url=f"https://{deployment.url}",
            message=summary.message,
            is_live=summary.is_live,
            has_error=summary.has_error,
            is_terminal=summary.is_terminal,
            created_at=format_timestamp(deployment.created_at),
            inspector_url=deployment.inspector_url,
        )
