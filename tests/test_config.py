"""
Tests for configuration and server startup.
"""

from pathlib import Path

import pytest

from chuk_mcp_patterns.config import resolve_patterns_dir
from chuk_mcp_patterns.constants import PATTERNS_DIR_ENV
from chuk_mcp_patterns.errors import ConfigError


class TestResolvePatternsDir:
    """Tests for resolve_patterns_dir."""

    def test_explicit_path(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(PATTERNS_DIR_ENV, raising=False)
        assert resolve_patterns_dir(temp_dir) == temp_dir.resolve()

    def test_from_environment(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(PATTERNS_DIR_ENV, str(temp_dir))
        assert resolve_patterns_dir() == temp_dir.resolve()

    def test_explicit_overrides_environment(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        other = temp_dir / "other"
        other.mkdir()
        monkeypatch.setenv(PATTERNS_DIR_ENV, str(temp_dir))
        assert resolve_patterns_dir(other) == other.resolve()

    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(PATTERNS_DIR_ENV, raising=False)
        with pytest.raises(ConfigError):
            resolve_patterns_dir()

    def test_blank_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(PATTERNS_DIR_ENV, "   ")
        with pytest.raises(ConfigError):
            resolve_patterns_dir()

    def test_missing_directory(self, temp_dir: Path) -> None:
        with pytest.raises(ConfigError):
            resolve_patterns_dir(temp_dir / "missing")

    def test_not_a_directory(self, temp_dir: Path) -> None:
        path = temp_dir / "file"
        path.write_text("x")
        with pytest.raises(ConfigError):
            resolve_patterns_dir(path)


class TestServerStartup:
    """The server refuses to start without a patterns directory."""

    def test_create_server_missing_directory(self, temp_dir: Path) -> None:
        from chuk_mcp_patterns.async_server import create_server

        with pytest.raises(ConfigError):
            create_server(temp_dir / "missing")

    def test_main_exits(self, temp_dir: Path) -> None:
        from chuk_mcp_patterns.server import main

        with pytest.raises(SystemExit) as exc_info:
            main(["--patterns-dir", str(temp_dir / "missing")])
        assert exc_info.value.code == 2

    def test_server_sends_instructions(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Clients receive the usage instructions as the server description."""
        from chuk_mcp_patterns import async_server
        from chuk_mcp_patterns.constants import SERVER_INSTRUCTIONS

        class RecordingServer:
            def __init__(self, name: str, **kwargs: object) -> None:
                self.name = name
                self.kwargs = kwargs
                self.tools: list[str] = []

            def tool(self, func):  # type: ignore[no-untyped-def]
                self.tools.append(func.__name__)
                return func

        monkeypatch.setattr(async_server, "ChukMCPServer", RecordingServer)

        server = async_server.create_server(temp_dir)

        assert server.name == async_server.SERVER_NAME
        assert server.kwargs["description"] == SERVER_INSTRUCTIONS
        assert "create_pattern" in SERVER_INSTRUCTIONS
        assert sorted(server.tools) == [
            "create_pattern",
            "get_pattern",
            "list_patterns",
            "search_patterns",
        ]
