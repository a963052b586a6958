from pydantic import BaseModel, Field


class ServerInfo(BaseModel):
    """Identity and origin parts parsed from a manifest URL."""

    org: str = Field(description="Repository owner, or main domain for remote endpoints")
    repo: str = Field(description="Repository name, or 'remote-mcp' for remote endpoints")
    name: str = Field(description="Lowercase, slug-safe identity")
    repository_path: str | None = Field(default=None, description="Monorepo sub-path")
    is_remote: bool = False
    remote_url: str | None = None
