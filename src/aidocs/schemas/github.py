"""GitHub REST API models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class GitHubRelease(BaseModel):
    """Subset of the release object returned by the GitHub API."""

    model_config = ConfigDict(extra="ignore")

    tag_name: str
    name: str | None = None
    prerelease: bool = False
    draft: bool = False
    created_at: datetime | None = None
    published_at: datetime | None = None
