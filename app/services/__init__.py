"""Upstream API services."""

from app.services.github_service import GitHubService, parse_repository_reference
from app.services.status_service import StatusService, summarize_deployment
from app.services.vercel_service import VercelService

__all__ = [
    "GitHubService",
    "parse_repository_reference",
    "StatusService",
    "summarize_deployment",
    "VercelService",
]
