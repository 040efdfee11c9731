"""
Pydantic schemas for the GitHub REST API.

These cover the repository contents endpoint (which returns either a
single object or a list of entries) and code search.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContentEntry(BaseModel):
    """
    An item from GET /repos/{owner}/{repo}/contents/{path}.

    For a file the API returns a single entry with `content` and
    `encoding`; for a directory it returns a list of entries without
    content.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    path: str
    type: str
    size: int | None = None
    sha: str | None = None
    content: str | None = None
    encoding: str | None = None
    html_url: str | None = None


RepositoryContent = ContentEntry | list[ContentEntry]


class RepositoryRef(BaseModel):
    """Repository summary embedded in search results."""

    model_config = ConfigDict(extra="ignore")

    full_name: str


class CodeSearchItem(BaseModel):
    """One match from GET /search/code."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    path: str
    html_url: str
    repository: RepositoryRef


class CodeSearchResponse(BaseModel):
    """Response of GET /search/code."""

    model_config = ConfigDict(extra="ignore")

    total_count: int = 0
    incomplete_results: bool = False
    items: list[CodeSearchItem] = Field(default_factory=list)
