"""
Pattern tools - MCP tools for pattern discovery and creation.

Tools for listing, searching, reading and creating patterns.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_patterns.constants import SuccessMessages
from chuk_mcp_patterns.errors import PatternStoreError
from chuk_mcp_patterns.models.pattern import LoadResult, Pattern, PatternSummary
from chuk_mcp_patterns.patterns import PatternQuery, PatternStore, filter_patterns

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(e: PatternStoreError) -> str:
    """Error envelope for a known failure."""
    return json.dumps({"status": "error", "error": e.code, "message": str(e)})


def _internal_error(e: Exception) -> str:
    return json.dumps({"status": "error", "error": "internal_error", "message": str(e)})


def _listing(patterns: list[Pattern], loaded: LoadResult) -> dict[str, Any]:
    """Common payload for list/search results."""
    return {
        "status": "success",
        "patterns": [PatternSummary.from_pattern(p).model_dump(mode="json") for p in patterns],
        "count": len(patterns),
        "skipped": [s.to_dict() for s in loaded.skipped],
    }


def register_pattern_tools(mcp: ChukMCPServer, store: PatternStore) -> dict[str, Any]:
    """
    Register pattern tools with the MCP server.

    Args:
        mcp: The MCP server instance
        store: The pattern store

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def list_patterns() -> str:
        """
        List all available patterns.

        Returns every pattern's name and metadata with a short preview of
        its content. Files that could not be loaded are reported under
        'skipped'.

        Returns:
            JSON string with list of pattern summaries
        """
        try:
            loaded = store.load_all()
            return json.dumps(_listing(loaded.patterns, loaded))
        except PatternStoreError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to list patterns")
            return _internal_error(e)

    tools["list_patterns"] = list_patterns

    @mcp.tool  # type: ignore[arg-type]
    async def search_patterns(
        query: str | None = None,
        category: str | None = None,
        framework: str | None = None,
        tag: str | None = None,
    ) -> str:
        """
        Search patterns by query, category, framework or tag.

        All given filters must match. Matching is case-insensitive.

        Args:
            query: Text to find in the name, category, framework, tags or content
            category: Filter by category (e.g. 'rust', 'aws', 'web')
            framework: Filter by framework (e.g. 'axum', 'lambda')
            tag: Filter by tag

        Returns:
            JSON string with matching pattern summaries

        Example:
            search_patterns(category="rust", tag="errors")
        """
        try:
            criteria = PatternQuery(query=query, category=category, framework=framework, tag=tag)
            loaded = store.load_all()
            matches = filter_patterns(loaded.patterns, criteria)

            result = _listing(matches, loaded)
            result["query"] = criteria.model_dump(exclude_none=True)
            if not matches:
                result["message"] = SuccessMessages.NO_PATTERNS_FOUND
            return json.dumps(result)
        except PatternStoreError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to search patterns")
            return _internal_error(e)

    tools["search_patterns"] = search_patterns

    @mcp.tool  # type: ignore[arg-type]
    async def get_pattern(pattern_name: str) -> str:
        """
        Get the pattern based on the pattern name.

        Returns the full markdown content and metadata.

        Args:
            pattern_name: Exact pattern name (case-sensitive)

        Returns:
            JSON string with the pattern

        Example:
            get_pattern(pattern_name="axum-error-handling")
        """
        try:
            pattern = store.get(pattern_name)
            return json.dumps({"status": "success", "pattern": pattern.to_dict()})
        except PatternStoreError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to get pattern")
            return _internal_error(e)

    tools["get_pattern"] = get_pattern

    @mcp.tool  # type: ignore[arg-type]
    async def create_pattern(
        pattern_name: str,
        content: str,
        category: str | None = None,
        framework: str | None = None,
        projects: list[str] | None = None,
        tags: list[str] | None = None,
    ) -> str:
        """
        Create a new pattern.

        Provide the category, framework, projects this pattern was used in,
        tags, and the markdown content. Look to existing patterns for
        examples of how this should look. Existing patterns are never
        overwritten.

        Args:
            pattern_name: Pattern name (1-100 letters, digits, '-' or '_')
            content: Markdown body
            category: Optional category
            framework: Optional framework
            projects: Optional list of projects the pattern was used in
            tags: Optional list of tags

        Returns:
            JSON string with the created pattern and its file path

        Example:
            create_pattern(
                pattern_name="lambda-cold-start",
                category="aws",
                framework="lambda",
                tags=["performance"],
                content="# Reducing cold starts..."
            )
        """
        try:
            pattern = store.create(
                pattern_name,
                content,
                category=category,
                framework=framework,
                projects=projects,
                tags=tags,
            )
            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.PATTERN_CREATED.format(
                        name=pattern.name, path=pattern.source_path
                    ),
                    "path": str(pattern.source_path),
                    "pattern": pattern.to_dict(),
                }
            )
        except PatternStoreError as e:
            return _error(e)
        except Exception as e:
            logger.exception("Failed to create pattern")
            return _internal_error(e)

    tools["create_pattern"] = create_pattern

    return tools
