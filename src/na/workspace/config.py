# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the optional na workspace configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

WORKSPACE_CONFIG_NAME = ".na-workspace.yaml"

OUTPUT_FORMATS: tuple[str, ...] = ("normalized", "json")


class WorkspaceConfigError(Exception):
    """Raised when a workspace configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """Defaults applied by the ``na`` command line.

    Attributes:
        format: Output format, one of :data:`OUTPUT_FORMATS`.
        output_directory: Directory (relative to the workspace) receiving
            compiled files; ``None`` prints results instead.
    """

    format: str = "normalized"
    output_directory: str | None = None


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a na workspace configuration file.

    Args:
        path: Path to the `.na-workspace.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Workspace config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read workspace config file: {exc}") from exc

    return _parse_workspace_config(text, source_label=str(path))


def find_workspace_config(directory: Path) -> WorkspaceConfig:
    """Load the configuration in *directory*, or the defaults when there is none."""
    path = directory / WORKSPACE_CONFIG_NAME
    if not path.exists():
        return WorkspaceConfig()
    return load_workspace_config(path)


# ################
# Implementation
# ################


def _parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse workspace config YAML text into a WorkspaceConfig.

    An empty document yields the defaults.

    Raises:
        WorkspaceConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return WorkspaceConfig()
    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: workspace config must be a YAML mapping")

    unknown = sorted(set(data) - {"format", "output-directory"})
    if unknown:
        raise WorkspaceConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    output_format = _optional_string(data, "format", source_label) or "normalized"
    if output_format not in OUTPUT_FORMATS:
        raise WorkspaceConfigError(
            f"{source_label}: 'format' must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )

    return WorkspaceConfig(
        format=output_format,
        output_directory=_optional_string(data, "output-directory", source_label),
    )


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field from a mapping, raising WorkspaceConfigError on a wrong type."""
    if key not in mapping:
        return None
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value
