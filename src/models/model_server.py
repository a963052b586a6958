from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Category(str, Enum):
    """Closed set of catalog categories."""

    AGGREGATORS = "Aggregators"
    ART_AND_CULTURE = "Art & Culture"
    HEALTHCARE = "Healthcare"
    BROWSER_AUTOMATION = "Browser Automation"
    CLOUD = "Cloud"
    DEVELOPMENT = "Development"
    CLI_TOOLS = "CLI Tools"
    COMMUNICATION = "Communication"
    DATA = "Data"
    LOGISTICS = "Logistics"
    DATA_SCIENCE = "Data Science"
    IOT = "IoT"
    FILE_MANAGEMENT = "File Management"
    FINANCE = "Finance"
    GAMING = "Gaming"
    KNOWLEDGE = "Knowledge"
    LOCATION = "Location"
    MARKETING = "Marketing"
    MONITORING = "Monitoring"
    MEDIA = "Media"
    AI_TOOLS = "AI Tools"
    SEARCH = "Search"
    SECURITY = "Security"
    SOCIAL_MEDIA = "Social Media"
    SPORTS = "Sports"
    SUPPORT = "Support"
    TRANSLATION = "Translation"
    AUDIO = "Audio"
    TRAVEL = "Travel"
    MESSENGERS = "Messengers"
    EMAIL = "Email"
    CRM = "CRM"
    ENTERPRISE = "Enterprise"
    JOB_SEARCH = "Job Search"
    LOCAL_FILES = "Local files"
    GENERAL = "General"


class Dependency(BaseModel):
    """A runtime or service dependency of a server."""

    name: str = Field(description="e.g. 'Node.js', 'Docker', 'API Key'")
    importance: int = Field(ge=1, le=10, description="1-10, where 10 is absolutely critical")


class ProtocolFeatures(BaseModel):
    """MCP capabilities and transports a server implements."""

    implementing_tools: bool = False
    implementing_prompts: bool = False
    implementing_resources: bool = False
    implementing_sampling: bool = False
    implementing_roots: bool = False
    implementing_logging: bool = False
    implementing_stdio: bool = False
    implementing_streamable_http: bool = False
    implementing_oauth2: bool = False

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value


class RepositoryOrigin(BaseModel):
    """Server implemented in a source repository."""

    kind: Literal["repository"] = "repository"
    owner: str = Field(description="Repository organization or user")
    repo: str = Field(description="Repository name")
    path: str | None = Field(default=None, description="Sub-path for monorepo servers")
    url: str = Field(description="Origin URL as listed in the manifest")
    stars: int = Field(default=0, ge=0)
    contributors: int = Field(default=0, ge=0)
    issues: int = Field(default=0, ge=0)
    releases: bool = Field(default=False, description="Repository publishes releases")
    ci_cd: bool = Field(default=False, description="CI/CD workflows detected")
    latest_commit_hash: str | None = None


class RemoteOrigin(BaseModel):
    """Server reachable only as a hosted network endpoint."""

    kind: Literal["remote"] = "remote"
    url: str = Field(description="Endpoint URL")
    docs_url: str | None = None


Origin = Annotated[RepositoryOrigin | RemoteOrigin, Field(discriminator="kind")]


class LocalServerConfig(BaseModel):
    """Launch configuration for a locally run server."""

    type: Literal["local"] = "local"
    command: str = "unknown"
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)


class RemoteServerConfig(BaseModel):
    """Connection configuration for a hosted server."""

    type: Literal["remote"] = "remote"
    url: str
    docs_url: str | None = None


ServerConfig = Annotated[LocalServerConfig | RemoteServerConfig, Field(discriminator="type")]


class Author(BaseModel):
    name: str


def _upgrade_legacy_document(data: dict[str, Any]) -> dict[str, Any]:
    """Rewrite ``github_info``/``remote_url`` documents into the ``origin`` union."""
    data = dict(data)
    github_info = data.pop("github_info", None)
    remote_url = data.pop("remote_url", None)
    if "origin" in data:
        return data

    if github_info:
        data["origin"] = {
            "kind": "repository",
            **{k: v for k, v in github_info.items() if k in RepositoryOrigin.model_fields},
        }
        return data

    server = data.get("server") or {}
    if server.get("type") == "remote" or remote_url:
        data["origin"] = {
            "kind": "remote",
            "url": remote_url or server.get("url"),
            "docs_url": server.get("docs_url"),
        }
    return data


class ServerRecord(BaseModel):
    """One cataloged MCP server listing.

    Records are immutable once loaded. ``quality_score`` is None until the
    server has been evaluated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(description="Identity derived from the origin URL")
    display_name: str = Field(description="Human readable name")
    description: str = ""
    long_description: str | None = None
    author: Author
    origin: Origin
    server: ServerConfig = Field(default_factory=LocalServerConfig)
    category: Category | None = None
    programming_language: str | None = None
    framework: str | None = None
    readme: str | None = None
    protocol_features: ProtocolFeatures | None = Field(
        default=None, description="None when the server has not been analyzed"
    )
    dependencies: list[Dependency] | None = Field(
        default=None, description="None when dependencies have not been analyzed"
    )
    raw_dependencies: str | None = None
    quality_score: int | None = Field(default=None, ge=0, le=100)
    evaluation_model: str | None = None
    last_scraped_at: datetime | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_layout(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return _upgrade_legacy_document(data)
        return data

    @field_validator("protocol_features", mode="before")
    @classmethod
    def _empty_features_unanalyzed(cls, value: Any) -> Any:
        # An empty object means the server was never analyzed
        if isinstance(value, dict) and not value:
            return None
        return value

    @property
    def repository(self) -> RepositoryOrigin | None:
        return self.origin if isinstance(self.origin, RepositoryOrigin) else None

    @property
    def is_remote(self) -> bool:
        return isinstance(self.origin, RemoteOrigin)

    @property
    def stars(self) -> int:
        repository = self.repository
        return repository.stars if repository else 0

    @property
    def sort_name(self) -> str:
        """Last path segment when present, else repository name."""
        repository = self.repository
        if repository is None:
            return self.display_name
        if repository.path:
            return repository.path.rstrip("/").split("/")[-1] or repository.repo
        return repository.repo
