"""Fake GitHub and Vercel upstreams for tests."""

from typing import Any

import httpx

GITHUB_API = "https://api.github.com"
VERCEL_API = "https://api.vercel.com"


class FakeUpstream:
    """Routes mocked GitHub and Vercel requests and records them.

    Unrouted requests answer 404 with a Vercel-style error body.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], Any] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        url: str,
        status_code: int = 200,
        json: Any = None,
    ) -> None:
        self.routes[(method, url)] = (status_code, json)

    def add_text(self, method: str, url: str, text: str, status_code: int = 200) -> None:
        self.routes[(method, url)] = (status_code, text)

    def fail(self, method: str, url: str, error: type[httpx.HTTPError]) -> None:
        self.routes[(method, url)] = error

    def calls(self, method: str, url: str) -> list[httpx.Request]:
        return [
            request
            for request in self.requests
            if request.method == method and _base(request) == url
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, _base(request)))
        if route is None:
            return httpx.Response(404, json={"error": {"message": "Not Found"}})
        if isinstance(route, type) and issubclass(route, httpx.HTTPError):
            raise route("connection refused", request=request)
        status_code, body = route
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)


def _base(request: httpx.Request) -> str:
    return f"{request.url.scheme}://{request.url.host}{request.url.path}"


def github_repo_payload(
    owner: str = "acme", name: str = "site", repo_id: int = 4242
) -> dict[str, Any]:
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner},
        "default_branch": "main",
        "private": False,
    }


def vercel_project_payload(
    name: str = "acme-site", project_id: str = "prj_123"
) -> dict[str, Any]:
    return {
        "id": project_id,
        "name": name,
        "accountId": "team_abc",
        "createdAt": 1700000000000,
        "updatedAt": 1700000000000,
    }


def vercel_deployment_payload(
    state: str = "QUEUED", deployment_id: str = "dpl_abc123"
) -> dict[str, Any]:
    return {
        "id": deployment_id,
        "url": "acme-site-abc123.vercel.app",
        "name": "acme-site",
        "readyState": state,
        "createdAt": 1704067200000,
        "projectId": "prj_123",
        "inspectorUrl": f"https://vercel.com/acme/acme-site/{deployment_id}",
    }
