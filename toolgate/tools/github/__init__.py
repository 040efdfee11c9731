"""
GitHub Tools.

- ReadFileTool: read_file
- SearchCodeTool: search_code
- ListRepositoryContentTool: list_repository_content
"""

from .base import GitHubTool
from .list_content import ListRepositoryContentTool
from .read_file import ReadFileTool
from .search_code import SearchCodeTool, build_search_query

__all__ = [
    "GitHubTool",
    "ListRepositoryContentTool",
    "ReadFileTool",
    "SearchCodeTool",
    "build_search_query",
]
