"""
Constants for the pattern library.

No magic strings - frontmatter keys, limits and messages live here.
"""

from typing import Literal

# Environment variable holding the patterns directory
PATTERNS_DIR_ENV = "PATTERNS_DIR"

# Pattern files
PATTERN_EXTENSION = ".md"
FRONTMATTER_DELIMITER = "---"

# Recognised frontmatter keys, in the order they are written
FrontmatterKey = Literal["pattern", "category", "framework", "projects", "tags"]
FRONTMATTER_KEYS: tuple[FrontmatterKey, ...] = (
    "pattern",
    "category",
    "framework",
    "projects",
    "tags",
)

# Name rules
MAX_NAME_LENGTH = 100

# Characters of body shown in listings
PREVIEW_LENGTH = 200

# Sent to MCP clients when they connect
SERVER_INSTRUCTIONS = """\
I manage a library of software development patterns stored as markdown files with YAML frontmatter.
Use me to discover, search, and create reusable code patterns and architectural solutions.

Available operations:
- list_patterns: Get overview of all available patterns
- search_patterns: Find patterns by text, category, framework, or tags
- get_pattern: Retrieve full content of a specific pattern
- create_pattern: Add new patterns with proper metadata

Patterns include categories like 'rust', 'aws', 'web' and frameworks like 'axum', 'lambda'.
Each pattern contains implementation details, best practices, and usage examples.

When creating patterns, include relevant tags and specify which projects used them for better \
discoverability."""


class ErrorMessages:
    """Standardized error messages."""

    PATTERNS_DIR_UNSET = (
        "No patterns directory configured. Set the PATTERNS_DIR environment variable "
        "or pass --patterns-dir."
    )
    PATTERNS_DIR_MISSING = "Patterns directory does not exist: {path}"
    PATTERNS_DIR_NOT_DIR = "Patterns path is not a directory: {path}"
    PATTERN_NOT_FOUND = "Pattern '{name}' not found."
    PATTERN_EXISTS = "Pattern '{name}' already exists."
    NAME_EMPTY = "Pattern name must not be empty."
    NAME_TOO_LONG = "Pattern name must be 1-{limit} characters."
    NAME_INVALID_CHARS = (
        "Pattern name can only contain alphanumeric, dash and underscore characters."
    )
    MISSING_OPENING_DELIMITER = "Missing opening '---' frontmatter line."
    MISSING_CLOSING_DELIMITER = "Missing closing '---' frontmatter line."
    FRONTMATTER_NOT_MAPPING = "Frontmatter must be a mapping of keys to values."
    MISSING_PATTERN_FIELD = "Frontmatter field 'pattern' is missing or empty."


class SuccessMessages:
    """Standardized success messages."""

    PATTERN_CREATED = "Pattern '{name}' created at {path}."
    NO_PATTERNS_FOUND = "No patterns found."
