"""
Pydantic schemas for the Brave Search API.

Only the fields the adapter reshapes are modelled; everything else in
the response is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WebResult(BaseModel):
    """One organic web result."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    url: str | None = None
    description: str | None = None


class WebResults(BaseModel):
    """The `web` section of a search response."""

    model_config = ConfigDict(extra="ignore")

    results: list[WebResult] = Field(default_factory=list)


class WebSearchResponse(BaseModel):
    """Response of GET /res/v1/web/search."""

    model_config = ConfigDict(extra="ignore")

    web: WebResults | None = None

    @property
    def results(self) -> list[WebResult]:
        """Web results, empty when the response has no `web` section."""
        if self.web is None:
            return []
        return self.web.results
