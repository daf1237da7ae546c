# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for na: parsing and rendering to normalized na or JSON."""

from na.compiler.build import RENDERERS, compile, compile_file, compile_json
from na.compiler.render import RenderFunction, to_json, to_normalized

__all__ = [
    "compile",
    "compile_json",
    "compile_file",
    "RENDERERS",
    "RenderFunction",
    "to_normalized",
    "to_json",
]
