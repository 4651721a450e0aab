"""
Parsing utilities for the diff_utils package.

This module provides functionality for reading hunks out of a unified diff
and normalizing them into numbered line records.
"""

from .hunk_reader import Hunk, iter_hunks, read_hunks, parse_hunk_header, split_diff_lines
from .line_normalizer import classify_line, normalize_hunk
from .diff_parser import ParseResult, iter_diff_hunks, parse_diff, try_parse_diff, summarize_lines
