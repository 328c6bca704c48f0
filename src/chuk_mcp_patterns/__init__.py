"""
CHUK Patterns MCP Server.

A library of reusable development patterns stored as markdown files
with YAML frontmatter, exposed as MCP tools.
"""

__version__ = "0.1.0"
