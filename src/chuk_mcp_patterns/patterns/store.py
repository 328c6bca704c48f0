"""
Pattern Store - owns the directory of pattern files.

The directory is the source of truth. Every read re-scans it, so edits
made outside the server are picked up without cache invalidation.
New patterns are published atomically (temp file, fsync, hard link)
and never replace an existing file.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from chuk_mcp_patterns.constants import MAX_NAME_LENGTH, PATTERN_EXTENSION, ErrorMessages
from chuk_mcp_patterns.errors import (
    ConfigError,
    InvalidPatternNameError,
    PatternExistsError,
    PatternIOError,
    PatternNotFoundError,
    PatternParseError,
)
from chuk_mcp_patterns.models.pattern import LoadResult, Pattern, SkippedFile
from chuk_mcp_patterns.patterns.codec import format_pattern, parse_pattern

logger = logging.getLogger(__name__)


def validate_pattern_name(name: str) -> str:
    """
    Validate a pattern name for creation.

    Names map one-to-one onto filenames, so only letters, digits,
    dash and underscore are allowed.

    Args:
        name: Requested name

    Returns:
        The name with surrounding whitespace removed

    Raises:
        InvalidPatternNameError: If the name is empty, too long or unsafe
    """
    name = (name or "").strip()

    if not name:
        raise InvalidPatternNameError(ErrorMessages.NAME_EMPTY)
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidPatternNameError(ErrorMessages.NAME_TOO_LONG.format(limit=MAX_NAME_LENGTH))
    if any(not c.isalnum() and c not in "-_" for c in name):
        raise InvalidPatternNameError(ErrorMessages.NAME_INVALID_CHARS)

    return name


def _clean_labels(values: Iterable[str] | None) -> list[str]:
    """Strip labels, drop empties and repeats, keep first-seen order."""
    result: list[str] = []
    for value in values or []:
        label = str(value).strip()
        if label and label not in result:
            result.append(label)
    return result


class PatternStore:
    """
    File-backed pattern repository.

    One markdown file per pattern, directly inside ``patterns_dir``
    (subdirectories are not scanned).
    """

    def __init__(self, patterns_dir: Path | str):
        """
        Initialize the store.

        Args:
            patterns_dir: Directory holding the pattern files

        Raises:
            ConfigError: If the directory does not exist
        """
        path = Path(patterns_dir).expanduser()
        if not path.exists():
            raise ConfigError(ErrorMessages.PATTERNS_DIR_MISSING.format(path=path))
        if not path.is_dir():
            raise ConfigError(ErrorMessages.PATTERNS_DIR_NOT_DIR.format(path=path))

        self.patterns_dir = path

    def path_for(self, name: str) -> Path:
        """Get the file path for a (validated) pattern name."""
        return self.patterns_dir / f"{name}{PATTERN_EXTENSION}"

    def load_all(self) -> LoadResult:
        """
        Load every pattern file in the directory.

        Files that cannot be read or parsed are reported in
        ``LoadResult.skipped``; they never fail the whole scan.

        Returns:
            LoadResult with patterns ordered by filename

        Raises:
            PatternIOError: If the directory itself cannot be listed
        """
        result = LoadResult()
        seen: dict[str, Path] = {}

        for path in self._pattern_files():
            try:
                pattern = self._load_file(path)
            except (PatternParseError, PatternIOError) as e:
                logger.warning(f"Skipping pattern file {path.name}: {e}")
                result.skipped.append(SkippedFile(path=path, error=e))
                continue

            if pattern.name in seen:
                error = PatternExistsError(pattern.name, seen[pattern.name])
                logger.warning(
                    f"Skipping pattern file {path.name}: name '{pattern.name}' "
                    f"already loaded from {seen[pattern.name].name}"
                )
                result.skipped.append(SkippedFile(path=path, error=error))
                continue

            seen[pattern.name] = path
            result.patterns.append(pattern)

        logger.debug(
            f"Loaded {len(result.patterns)} patterns from {self.patterns_dir} "
            f"({len(result.skipped)} skipped)"
        )
        return result

    def list_patterns(self) -> list[Pattern]:
        """All loadable patterns, ordered by filename."""
        return self.load_all().patterns

    def get(self, name: str) -> Pattern:
        """
        Get a pattern by exact, case-sensitive name.

        Raises:
            PatternNotFoundError: If no loaded pattern has that name
        """
        pattern = self.load_all().find(name)
        if pattern is None:
            raise PatternNotFoundError(name)
        return pattern

    def create(
        self,
        name: str,
        content: str,
        category: str | None = None,
        framework: str | None = None,
        projects: Iterable[str] | None = None,
        tags: Iterable[str] | None = None,
    ) -> Pattern:
        """
        Create and persist a new pattern.

        Existing patterns are never overwritten.

        Args:
            name: Pattern name (letters, digits, '-', '_')
            content: Markdown body
            category: Optional category
            framework: Optional framework
            projects: Projects the pattern was used in
            tags: Tags for discovery

        Returns:
            The created Pattern, with ``source_path`` set

        Raises:
            InvalidPatternNameError: If the name is unsafe
            PatternExistsError: If the name or its file is already taken
            PatternIOError: If the file could not be written
        """
        name = validate_pattern_name(name)
        path = self.path_for(name)

        existing = self.load_all().find(name)
        if existing is not None:
            raise PatternExistsError(name, existing.source_path)
        if path.exists():
            raise PatternExistsError(name, path)

        pattern = Pattern(
            name=name,
            category=category,
            framework=framework,
            projects=_clean_labels(projects),
            tags=_clean_labels(tags),
            content=content,
            source_path=path,
        )

        self._publish(name, path, format_pattern(pattern))
        logger.info(f"Created pattern '{name}' at {path}")

        return pattern

    def _pattern_files(self) -> list[Path]:
        """Pattern files in the directory, sorted by filename."""
        try:
            candidates = [
                p
                for p in self.patterns_dir.iterdir()
                if p.suffix == PATTERN_EXTENSION and not p.name.startswith(".") and p.is_file()
            ]
        except OSError as e:
            raise PatternIOError(f"Cannot list patterns directory {self.patterns_dir}: {e}") from e

        return sorted(candidates, key=lambda p: p.name)

    def _load_file(self, path: Path) -> Pattern:
        """Read and parse a single pattern file."""
        try:
            raw_text = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise PatternParseError(f"File is not valid UTF-8: {e.reason}", path) from e
        except OSError as e:
            raise PatternIOError(f"Cannot read {path.name}: {e}") from e

        return parse_pattern(raw_text, source_path=path)

    def _publish(self, name: str, path: Path, text: str) -> None:
        """
        Publish ``text`` at ``path`` without ever exposing a partial file.

        The text goes to a hidden temp file in the same directory, is
        fsynced, then hard-linked to the final name. Linking fails if the
        name was taken in the meantime, so nothing is overwritten.
        """
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.stem}.", suffix=".tmp", dir=self.patterns_dir
            )
        except OSError as e:
            raise PatternIOError(f"Failed to create pattern file {path.name}: {e}") from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                # mkstemp creates 0600; published files follow the umask
                os.fchmod(f.fileno(), 0o666 & ~_current_umask())
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.link(tmp_path, path)
        except FileExistsError as e:
            raise PatternExistsError(name, path) from e
        except OSError as e:
            raise PatternIOError(f"Failed to create pattern file {path.name}: {e}") from e
        finally:
            tmp_path.unlink(missing_ok=True)

        self._sync_directory()

    def _sync_directory(self) -> None:
        """Flush the directory entry of a newly published file."""
        try:
            dir_fd = os.open(self.patterns_dir, os.O_RDONLY)
            try:
                os.fsync(dir_fd)
            finally:
                os.close(dir_fd)
        except OSError as e:
            raise PatternIOError(f"Failed to sync patterns directory {self.patterns_dir}: {e}") from e


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask
