# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the workspace configuration module."""

from pathlib import Path

import pytest

from na.workspace import (
    WORKSPACE_CONFIG_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    find_workspace_config,
    load_workspace_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a workspace config file and return its path."""
    config_file = tmp_path / WORKSPACE_CONFIG_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_full_config(tmp_path: Path) -> None:
    """Both fields are read from the file."""
    config = load_workspace_config(_write_config(tmp_path, "format: json\noutput-directory: build\n"))

    assert isinstance(config, WorkspaceConfig)
    assert config.format == "json"
    assert config.output_directory == "build"


def test_format_only(tmp_path: Path) -> None:
    """A missing output-directory means results are printed."""
    config = load_workspace_config(_write_config(tmp_path, "format: normalized\n"))

    assert config.format == "normalized"
    assert config.output_directory is None


def test_output_directory_only(tmp_path: Path) -> None:
    """A missing format falls back to normalized output."""
    config = load_workspace_config(_write_config(tmp_path, "output-directory: out\n"))

    assert config.format == "normalized"
    assert config.output_directory == "out"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty document is the same as no configuration at all."""
    assert load_workspace_config(_write_config(tmp_path, "")) == WorkspaceConfig()


def test_find_without_file_gives_defaults(tmp_path: Path) -> None:
    """find_workspace_config() returns defaults when the directory has no config file."""
    assert find_workspace_config(tmp_path) == WorkspaceConfig()


def test_find_reads_existing_file(tmp_path: Path) -> None:
    """find_workspace_config() loads the file named WORKSPACE_CONFIG_NAME."""
    _write_config(tmp_path, "format: json\n")
    assert find_workspace_config(tmp_path).format == "json"


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """Loading a file that does not exist raises WorkspaceConfigError."""
    with pytest.raises(WorkspaceConfigError, match="not found"):
        load_workspace_config(tmp_path / WORKSPACE_CONFIG_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML raises WorkspaceConfigError."""
    with pytest.raises(WorkspaceConfigError, match="Invalid YAML"):
        load_workspace_config(_write_config(tmp_path, "format: [json\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(WorkspaceConfigError, match="mapping"):
        load_workspace_config(_write_config(tmp_path, "- json\n"))


def test_unknown_field(tmp_path: Path) -> None:
    """Unknown keys are reported by name."""
    with pytest.raises(WorkspaceConfigError, match="build-directory"):
        load_workspace_config(_write_config(tmp_path, "build-directory: out\n"))


def test_unknown_format(tmp_path: Path) -> None:
    """Only the supported output formats are accepted."""
    with pytest.raises(WorkspaceConfigError, match="'format' must be one of"):
        load_workspace_config(_write_config(tmp_path, "format: yaml\n"))


@pytest.mark.parametrize("content", ["format: 1\n", "output-directory: [a, b]\n"])
def test_wrong_field_type(tmp_path: Path, content: str) -> None:
    """Fields must be strings."""
    with pytest.raises(WorkspaceConfigError, match="must be a string"):
        load_workspace_config(_write_config(tmp_path, content))
