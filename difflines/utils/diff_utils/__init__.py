"""
diff_utils package - Utilities for parsing unified diffs.

This package turns unified diff text into classified, numbered line records,
collapsing delete/add pairs whose content is identical into context.
"""

# Core utilities
from .core import DiffParseError, MalformedHunkHeader, UnrecognizedLineMarker

# Parsing utilities
from .parsing import Hunk, iter_hunks, read_hunks, parse_hunk_header
from .parsing import classify_line, normalize_hunk
from .parsing import ParseResult, iter_diff_hunks, parse_diff, try_parse_diff, summarize_lines
