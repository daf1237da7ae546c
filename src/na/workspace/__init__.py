# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration for the na command line."""

from na.workspace.config import (
    OUTPUT_FORMATS,
    WORKSPACE_CONFIG_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    find_workspace_config,
    load_workspace_config,
)

__all__ = [
    "OUTPUT_FORMATS",
    "WORKSPACE_CONFIG_NAME",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "find_workspace_config",
    "load_workspace_config",
]
