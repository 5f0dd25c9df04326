"""Pytest configuration and fixtures."""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_deployment_orchestrator
from app.core.orchestrator import DeploymentOrchestrator
from app.main import app
from app.models.deployment import CredentialPair, RepositoryMetadata, VercelProject
from app.services.github_service import GitHubService
from app.services.vercel_service import VercelService
from tests.support.upstream import (
    GITHUB_API,
    VERCEL_API,
    FakeUpstream,
    vercel_project_payload,
)


@pytest.fixture
def upstream() -> FakeUpstream:
    """Fresh fake GitHub/Vercel upstream."""
    return FakeUpstream()


@pytest.fixture
async def http_client(upstream: FakeUpstream) -> httpx.AsyncClient:
    """HTTP client whose requests are served by the fake upstream."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as client:
        yield client


@pytest.fixture
def github(http_client: httpx.AsyncClient) -> GitHubService:
    return GitHubService(client=http_client, base_url=GITHUB_API)


@pytest.fixture
def vercel(http_client: httpx.AsyncClient) -> VercelService:
    return VercelService(client=http_client, base_url=VERCEL_API, team_id="")


@pytest.fixture
def orchestrator(github: GitHubService, vercel: VercelService) -> DeploymentOrchestrator:
    return DeploymentOrchestrator(github=github, vercel=vercel)


@pytest.fixture
def credentials() -> CredentialPair:
    return CredentialPair(source_token="gh_token", platform_token="vc_token")


@pytest.fixture
def repo_metadata() -> RepositoryMetadata:
    return RepositoryMetadata(
        owner="acme",
        repo="site",
        full_name="acme/site",
        default_branch="main",
        is_private=False,
        repo_id=4242,
    )


@pytest.fixture
def project() -> VercelProject:
    return VercelProject.model_validate(vercel_project_payload())


@pytest.fixture
async def client(orchestrator: DeploymentOrchestrator) -> AsyncClient:
    """Create an async test client wired to the fake upstream."""
    app.dependency_overrides[get_deployment_orchestrator] = lambda: orchestrator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
