"""
Error taxonomy for the pattern library.

Every error carries a stable ``code`` that the MCP tools report back
to clients alongside the human-readable message.
"""

from __future__ import annotations

from pathlib import Path

from chuk_mcp_patterns.constants import ErrorMessages


class PatternStoreError(Exception):
    """Base class for all pattern library errors."""

    code = "pattern_error"


class ConfigError(PatternStoreError):
    """The patterns directory is missing or unusable. Fatal at startup."""

    code = "config_error"


class PatternParseError(PatternStoreError):
    """A pattern file could not be decoded."""

    code = "parse_error"

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            return f"{self.path.name}: {message}"
        return message


class MissingDelimiterError(PatternParseError):
    """No frontmatter block could be found."""

    code = "missing_delimiter"


class MalformedFrontmatterError(PatternParseError):
    """The frontmatter block is not valid key-value data."""

    code = "malformed_frontmatter"


class MissingRequiredFieldError(PatternParseError):
    """The ``pattern`` field is absent or empty."""

    code = "missing_required_field"


class PatternNotFoundError(PatternStoreError, LookupError):
    """No pattern with the requested name exists."""

    code = "not_found"

    def __init__(self, name: str):
        super().__init__(ErrorMessages.PATTERN_NOT_FOUND.format(name=name))
        self.name = name


class PatternExistsError(PatternStoreError):
    """A pattern with the requested name already exists."""

    code = "already_exists"

    def __init__(self, name: str, path: Path | None = None):
        super().__init__(ErrorMessages.PATTERN_EXISTS.format(name=name))
        self.name = name
        self.path = path


class InvalidPatternNameError(PatternStoreError, ValueError):
    """The pattern name cannot be mapped safely to a file."""

    code = "invalid_name"


class PatternIOError(PatternStoreError):
    """Unexpected filesystem failure while reading or writing patterns."""

    code = "io_error"
