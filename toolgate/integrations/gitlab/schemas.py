"""
Pydantic schemas for the GitLab REST API (v4).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MergeRequest(BaseModel):
    """Response of GET /projects/:id/merge_requests/:iid (subset)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    iid: int
    title: str
    description: str | None = None
    state: str
    source_branch: str
    target_branch: str
    web_url: str | None = None


class MergeRequestDiff(BaseModel):
    """One entry of GET /projects/:id/merge_requests/:iid/diffs."""

    model_config = ConfigDict(extra="ignore")

    old_path: str
    new_path: str
    diff: str = ""
    new_file: bool = False
    renamed_file: bool = False
    deleted_file: bool = False
