"""
Toolgate - third-party web APIs exposed as MCP tools over stdio.

Three adapters share one dispatch contract:

- **search**: web search through Brave Search
- **github**: read files, list directories and search code on GitHub
- **gitlab**: merge request content (metadata plus diffs) from GitLab

Each adapter is a ToolServer composed of a ToolRegistry, a
ToolDispatcher and a Transport, built from explicit AdapterSettings.

Quick Start:
    $ export GITHUB_TOKEN=ghp_...
    $ toolgate-github            # or: python -m toolgate github
"""

__version__ = "0.1.0"
__license__ = "MIT"

from toolgate.tools import (
    InvocationRequest,
    Tool,
    ToolDispatcher,
    ToolError,
    ToolRegistry,
    ToolResult,
)

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Core dispatch
    "InvocationRequest",
    "Tool",
    "ToolDispatcher",
    "ToolError",
    "ToolRegistry",
    "ToolResult",
]
