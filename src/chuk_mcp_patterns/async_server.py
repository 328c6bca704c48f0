#!/usr/bin/env python3
"""
Async Patterns MCP Server using chuk-mcp-server

This server exposes a library of software development patterns (markdown
files with YAML frontmatter) as MCP tools. The instructions sent to clients
live in constants.SERVER_INSTRUCTIONS.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_patterns.config import resolve_patterns_dir
from chuk_mcp_patterns.constants import SERVER_INSTRUCTIONS
from chuk_mcp_patterns.patterns import PatternStore
from chuk_mcp_patterns.tools import register_pattern_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-patterns"


def create_server(patterns_dir: Path | str | None = None) -> ChukMCPServer:
    """
    Build the MCP server for a patterns directory.

    Args:
        patterns_dir: Directory of pattern files. Defaults to PATTERNS_DIR.

    Returns:
        Server with all pattern tools registered

    Raises:
        ConfigError: If the directory is not configured or does not exist
    """
    path = resolve_patterns_dir(patterns_dir)
    store = PatternStore(path)

    mcp = ChukMCPServer(SERVER_NAME, description=SERVER_INSTRUCTIONS)
    register_pattern_tools(mcp, store)

    loaded = store.load_all()
    logger.info("CHUK Patterns MCP Server initialized")
    logger.info(f"  Patterns dir: {path}")
    logger.info(f"  Patterns loaded: {len(loaded.patterns)} ({len(loaded.skipped)} skipped)")

    return mcp
