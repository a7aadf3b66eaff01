# SPDX-License-Identifier: MIT
"""Tests for bild.core.project module."""

from pathlib import Path

from bild.core.flags import ProjectFlag
from bild.core.project import DEBUG_TOKEN, ProjectConfig
from bild.toolchains.gcc import GccToolchain


class TestFromArgs:
    """Tests for creating a configuration from mode tokens."""

    def test_no_args(self):
        """Test that the baseline warning flag is always present."""
        config = ProjectConfig.from_args([])
        assert config.compiler_flags == ("-Wall",)
        assert not config.debug
        assert config.name == ""

    def test_debug_token(self):
        """Test that -debug sets the flag and adds -g."""
        config = ProjectConfig.from_args([DEBUG_TOKEN])
        assert config.debug
        assert config.flags.has(ProjectFlag.DEBUG)
        assert config.compiler_flags == ("-Wall", "-g")

    def test_unknown_tokens_ignored(self):
        """Test that unrecognized tokens are silently ignored."""
        config = ProjectConfig.from_args(["--release", "whatever", "-O2"])
        assert not config.debug
        assert config.compiler_flags == ("-Wall",)

    def test_debug_token_among_others(self):
        config = ProjectConfig.from_args(["foo", "-debug", "bar"])
        assert config.debug
        assert config.compiler_flags == ("-Wall", "-g")

    def test_custom_toolchain_flags(self):
        """Test that flags come from the toolchain."""
        toolchain = GccToolchain(
            warning_flags=("-Wall", "-Wextra"), debug_flags=("-g3",)
        )
        config = ProjectConfig.from_args(["-debug"], toolchain)
        assert config.compiler_flags == ("-Wall", "-Wextra", "-g3")


class TestSnapshots:
    """Tests that each stage produces a new snapshot."""

    def test_with_name(self):
        config = ProjectConfig.from_args([])
        named = config.with_name("widget")
        assert named.name == "widget"
        assert config.name == ""

    def test_add_link_libraries_preserves_order(self):
        config = ProjectConfig().add_link_libraries(["a", "b"])
        config = config.add_link_libraries(["c"])
        assert config.link_libraries == ("a", "b", "c")

    def test_duplicates_are_kept(self):
        """Test that paths are never de-duplicated."""
        config = ProjectConfig()
        config = config.add_library_search_path(Path("depend/foo/bin"))
        config = config.add_library_search_path(Path("depend/foo/bin"))
        config = config.add_link_libraries(["foo", "foo"])
        assert config.library_search_paths == (
            Path("depend/foo/bin"),
            Path("depend/foo/bin"),
        )
        assert config.link_libraries == ("foo", "foo")

    def test_add_include_path_and_sources(self):
        config = ProjectConfig().add_include_path(Path("depend/foo/include"))
        config = config.add_source_files([Path("src/a.cpp")])
        assert config.include_paths == (Path("depend/foo/include"),)
        assert config.source_files == (Path("src/a.cpp"),)


class TestOutputPath:
    """Tests for the output binary path."""

    def test_release_output(self):
        config = ProjectConfig.from_args([]).with_name("widget")
        assert config.output_path(Path("target")) == Path("target/release/widget")

    def test_debug_output(self):
        config = ProjectConfig.from_args(["-debug"]).with_name("widget")
        assert config.output_path(Path("target")) == Path("target/debug/widget")
