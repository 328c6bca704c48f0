"""
MCP tool implementations.

- patterns - Pattern listing, search, retrieval and creation
"""

from chuk_mcp_patterns.tools.patterns import register_pattern_tools

__all__ = [
    "register_pattern_tools",
]
