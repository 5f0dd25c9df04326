"""Unit tests for tool parameter validation and the registry."""

import pytest

from app.core.exceptions import ParameterValidationError, UnknownToolError
from app.tools.deploy_repo import DeployRepoTool
from app.tools.deployment_status import DeploymentStatusTool, format_timestamp
from app.tools.registry import ToolRegistry, get_tool_registry


class TestDeployRepoTool:
    """Tests for DeployRepoTool.validate."""

    @pytest.fixture
    def tool(self) -> DeployRepoTool:
        return DeployRepoTool()

    def test_defaults(self, tool: DeployRepoTool):
        params = tool.validate({"repoUrl": "https://github.com/acme/site"})

        assert params.repo_url == "https://github.com/acme/site"
        assert params.project_name is None
        assert params.framework == "static"

    def test_optional_parameters(self, tool: DeployRepoTool):
        params = tool.validate(
            {
                "repoUrl": "https://github.com/acme/site",
                "projectName": "Site",
                "framework": "nextjs",
            }
        )

        assert params.project_name == "Site"
        assert params.framework == "nextjs"

    def test_unlisted_framework_passes_through(self, tool: DeployRepoTool):
        params = tool.validate(
            {"repoUrl": "https://github.com/acme/site", "framework": "astro"}
        )

        assert params.framework == "astro"

    @pytest.mark.parametrize(
        ("params", "message"),
        [
            ({}, "Missing required parameter: repoUrl"),
            ({"repoUrl": ""}, "Missing required parameter: repoUrl"),
            ({"repoUrl": 42}, "Parameter 'repoUrl' must be a string"),
            (
                {"repoUrl": "https://gitlab.com/acme/site"},
                "Parameter 'repoUrl' must be a valid GitHub repository URL",
            ),
            (
                {"repoUrl": "https://github.com/acme/site", "projectName": 1},
                "Parameter 'projectName' must be a string",
            ),
            (
                {"repoUrl": "https://github.com/acme/site", "framework": ["vite"]},
                "Parameter 'framework' must be a string",
            ),
        ],
    )
    def test_invalid_parameters(self, tool: DeployRepoTool, params: dict, message: str):
        with pytest.raises(ParameterValidationError) as exc_info:
            tool.validate(params)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400

    def test_schema_declares_presets(self, tool: DeployRepoTool):
        definition = tool.definition()

        assert definition.parameters["required"] == ["repoUrl"]
        framework = definition.parameters["properties"]["framework"]
        assert "static" in framework["enum"]
        assert framework["default"] == "static"


class TestDeploymentStatusTool:
    """Tests for DeploymentStatusTool.validate."""

    def test_valid(self):
        params = DeploymentStatusTool().validate({"deploymentId": "dpl_1"})

        assert params.deployment_id == "dpl_1"

    @pytest.mark.parametrize("params", [{}, {"deploymentId": ""}, {"deploymentId": None}])
    def test_missing_deployment_id(self, params: dict):
        with pytest.raises(ParameterValidationError) as exc_info:
            DeploymentStatusTool().validate(params)

        assert exc_info.value.message == "Missing required parameter: deploymentId"


def test_format_timestamp():
    assert format_timestamp(1704067200000) == "2024-01-01T00:00:00.000Z"
    assert format_timestamp(1704067200123) == "2024-01-01T00:00:00.123Z"
    assert format_timestamp(None) is None


class TestToolRegistry:
    """Tests for ToolRegistry."""

    def test_default_tools(self):
        registry = get_tool_registry()

        assert registry.list_tools() == ["deployRepo", "getDeploymentStatus"]

    def test_unknown_tool(self):
        registry = ToolRegistry()
        registry.register(DeployRepoTool())

        with pytest.raises(UnknownToolError) as exc_info:
            registry.get("deleteRepo")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Unknown tool: deleteRepo"
        assert exc_info.value.context == "Available tools: deployRepo"
