"""
Web search tools (Brave Search backend).
"""

from .web_search import NO_RESULTS_TEXT, BraveWebSearchTool

__all__ = [
    "BraveWebSearchTool",
    "NO_RESULTS_TEXT",
]
