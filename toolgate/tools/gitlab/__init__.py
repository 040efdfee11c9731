"""
GitLab Tools.

- MergeRequestContentTool: get_merge_request_content
"""

from .merge_request import MergeRequestContentTool

__all__ = [
    "MergeRequestContentTool",
]
