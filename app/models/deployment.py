"""Deployment data models."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

FRAMEWORK_PRESETS = (
    "nextjs",
    "react",
    "vue",
    "nuxtjs",
    "gatsby",
    "svelte",
    "vite",
    "static",
)

DEFAULT_FRAMEWORK = "static"


class DeploymentState(str, Enum):
    """Vercel deployment lifecycle states."""

    BUILDING = "BUILDING"
    ERROR = "ERROR"
    INITIALIZING = "INITIALIZING"
    QUEUED = "QUEUED"
    READY = "READY"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        return self in (DeploymentState.ERROR, DeploymentState.READY, DeploymentState.CANCELED)


class CredentialPair(BaseModel):
    """Per-request GitHub and Vercel tokens."""

    model_config = ConfigDict(frozen=True)

    source_token: str = Field(min_length=1, repr=False)
    platform_token: str = Field(min_length=1, repr=False)


class RepositoryReference(BaseModel):
    """Canonical owner/repo pair."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)


class RepositoryMetadata(BaseModel):
    """Repository details fetched from GitHub."""

    owner: str
    repo: str
    full_name: str
    default_branch: str
    is_private: bool
    repo_id: int


class VercelProject(BaseModel):
    """A Vercel project as returned by the projects API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    account_id: str | None = Field(default=None, alias="accountId")
    created_at: int | None = Field(default=None, alias="createdAt")
    updated_at: int | None = Field(default=None, alias="updatedAt")


class VercelDeployment(BaseModel):
    """A Vercel deployment as returned by the deployments API.

    ``state`` keeps whatever value the platform sent; use
    :attr:`known_state` to compare against the known lifecycle states.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    url: str = ""
    name: str = ""
    state: str = Field(
        default="",
        validation_alias=AliasChoices("state", "readyState", "status"),
    )
    created_at: int | None = Field(default=None, alias="createdAt")
    project_id: str | None = Field(default=None, alias="projectId")
    inspector_url: str | None = Field(default=None, alias="inspectorUrl")

    @property
    def known_state(self) -> DeploymentState | None:
        try:
            return DeploymentState(self.state)
        except ValueError:
            return None


class DeployRepoParams(BaseModel):
    """Validated parameters of the deployRepo tool."""

    repo_url: str
    project_name: str | None = None
    framework: str = DEFAULT_FRAMEWORK


class DeploymentResult(BaseModel):
    """Outcome of a successfully triggered deployment."""

    deployment: VercelDeployment
    project: VercelProject
    message: str


class StatusSummary(BaseModel):
    """Normalized view of a deployment's current state."""

    deployment: VercelDeployment
    status: str
    message: str
    is_live: bool
    has_error: bool
    is_terminal: bool


class DeploymentStatusParams(BaseModel):
    """Validated parameters of the getDeploymentStatus tool."""

    deployment_id: str = Field(min_length=1)
