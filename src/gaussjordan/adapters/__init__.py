# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for linear system file I/O and text output.

External dependencies (json, file I/O) are confined to this layer.
"""
from gaussjordan.adapters.json_io import JsonResultWriter, JsonSystemReader
from gaussjordan.adapters.text_dump import (
    TextResultWriter,
    format_matrix,
    format_report,
    format_solution,
)

__all__ = [
    "JsonResultWriter",
    "JsonSystemReader",
    "TextResultWriter",
    "format_matrix",
    "format_report",
    "format_solution",
]
