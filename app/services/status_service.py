"""Translates Vercel deployment state into a user-facing summary."""

from app.models.deployment import DeploymentState, StatusSummary, VercelDeployment
from app.services.vercel_service import VercelService

STATUS_MESSAGES: dict[DeploymentState, str] = {
    DeploymentState.BUILDING: "Deployment is currently building",
    DeploymentState.ERROR: "Deployment failed with errors",
    DeploymentState.INITIALIZING: "Deployment is initializing",
    DeploymentState.QUEUED: "Deployment is queued and waiting to start",
    DeploymentState.READY: "Deployment is live and ready",
    DeploymentState.CANCELED: "Deployment was canceled",
}

UNKNOWN_STATUS_MESSAGE = "Unknown deployment status"


def summarize_deployment(deployment: VercelDeployment) -> StatusSummary:
    """Map a deployment's raw state onto the fixed message table."""
    state = deployment.known_state
    return StatusSummary(
        deployment=deployment,
        status=deployment.state,
        message=STATUS_MESSAGES.get(state, UNKNOWN_STATUS_MESSAGE),
        is_live=state is DeploymentState.READY,
        has_error=state is DeploymentState.ERROR,
        is_terminal=state is not None and state.is_terminal,
    )


class StatusService:
    """Fetches a deployment and summarizes its state."""

    def __init__(self, vercel: VercelService):
        self.vercel = vercel

    async def get_status(self, token: str, deployment_id: str) -> StatusSummary:
        deployment = await self.vercel.get_deployment(token, deployment_id)
        return summarize_deployment(deployment)
