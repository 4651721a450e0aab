"""
difflines - unified diff parser and normalizer.
"""

__version__ = "0.1.0"

from difflines.models.diff import DiffLine, DiffStats, LineKind
from difflines.utils.diff_utils import (
    DiffParseError,
    MalformedHunkHeader,
    UnrecognizedLineMarker,
    ParseResult,
    iter_diff_hunks,
    parse_diff,
    try_parse_diff,
    summarize_lines,
)
