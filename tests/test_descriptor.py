# SPDX-License-Identifier: MIT
"""Tests for bild.descriptor."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bild.core.project import ProjectConfig
from bild.descriptor import parse_descriptor, parse_line, strip_whitespace


def write_descriptor(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "proj.bild"
    path.write_text(content)
    return path


class TestParseLine:
    """Tests for parse_line function."""

    def test_simple_pair(self) -> None:
        assert parse_line("name=widget") == ("name", "widget")

    def test_whitespace_removed_everywhere(self) -> None:
        """Test that whitespace inside the line is removed, not just trimmed."""
        assert parse_line("  na me = wid get \t\n") == ("name", "widget")

    def test_split_on_first_equals(self) -> None:
        assert parse_line("link=a=b") == ("link", "a=b")

    def test_line_without_separator(self) -> None:
        """Test that a line without '=' is all key with an empty value."""
        assert parse_line("orphan") == ("orphan", "")

    def test_empty_line(self) -> None:
        assert parse_line("\n") == ("", "")

    def test_strip_whitespace(self) -> None:
        assert strip_whitespace(" a\tb\r\nc ") == "abc"


class TestParseDescriptor:
    """Tests for parse_descriptor function."""

    def test_name_and_link(self, tmp_path: Path) -> None:
        """Test that all link entries are kept in order, including the last."""
        path = write_descriptor(tmp_path, "name=widget\nlink=a,b,c\n")
        config = parse_descriptor(path, ProjectConfig())
        assert config.name == "widget"
        assert config.link_libraries == ("a", "b", "c")

    def test_last_name_wins(self, tmp_path: Path) -> None:
        path = write_descriptor(tmp_path, "name=first\nname=second\n")
        config = parse_descriptor(path, ProjectConfig())
        assert config.name == "second"

    def test_multiple_link_lines_accumulate(self, tmp_path: Path) -> None:
        path = write_descriptor(tmp_path, "name=w\nlink=a,b\nlink = c\n")
        config = parse_descriptor(path, ProjectConfig())
        assert config.link_libraries == ("a", "b", "c")

    def test_link_with_spaces(self, tmp_path: Path) -> None:
        path = write_descriptor(tmp_path, "name = w\nlink = opengl32 , glfw3\n")
        config = parse_descriptor(path, ProjectConfig())
        assert config.link_libraries == ("opengl32", "glfw3")

    def test_trailing_comma_keeps_empty_segment(self, tmp_path: Path) -> None:
        path = write_descriptor(tmp_path, "name=w\nlink=a,\n")
        config = parse_descriptor(path, ProjectConfig())
        assert config.link_libraries == ("a", "")

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        path = write_descriptor(tmp_path, "version=1.0\nname=w\norphan\n\n")
        config = parse_descriptor(path, ProjectConfig())
        assert config.name == "w"
        assert config.link_libraries == ()

    def test_link_entries_appended_after_existing(self, tmp_path: Path) -> None:
        """Test that descriptor entries are appended to existing state."""
        path = write_descriptor(tmp_path, "name=w\nlink=b\n")
        config = parse_descriptor(path, ProjectConfig().add_link_libraries(["a"]))
        assert config.link_libraries == ("a", "b")

    def test_input_config_unchanged(self, tmp_path: Path) -> None:
        path = write_descriptor(tmp_path, "name=w\nlink=a\n")
        original = ProjectConfig.from_args(["-debug"])
        config = parse_descriptor(path, original)
        assert original.name == ""
        assert original.link_libraries == ()
        assert config.debug
        assert config.compiler_flags == ("-Wall", "-g")

    def test_missing_name_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that an unset name is a warning, not an error."""
        path = write_descriptor(tmp_path, "link=a\n")
        with caplog.at_level(logging.WARNING, logger="bild"):
            config = parse_descriptor(path, ProjectConfig())
        assert config.name == ""
        assert config.link_libraries == ("a",)
        assert "Project name not set in" in caplog.text
        assert str(path) in caplog.text

    def test_missing_file_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a missing descriptor leaves the config unmodified."""
        original = ProjectConfig.from_args([])
        with caplog.at_level(logging.WARNING, logger="bild"):
            config = parse_descriptor(tmp_path / "proj.bild", original)
        assert config == original
        assert "Could not open project file" in caplog.text
        assert "Project name not set" not in caplog.text
