"""
Entry points for parsing a unified diff into normalized DiffLine records.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from difflines.models.diff import DiffLine, DiffStats, LineKind
from difflines.utils.logging_utils import logger
from ..core.config import is_collapse_enabled, is_count_check_enabled, is_no_newline_marker_allowed
from ..core.exceptions import DiffParseError
from .hunk_reader import iter_hunks
from .line_normalizer import normalize_hunk


@dataclass
class ParseResult:
    """
    Outcome of try_parse_diff.

    On failure ``lines`` only holds the records of hunks normalized before
    the failing one; check ``ok`` before treating it as the whole diff.
    """
    lines: List[DiffLine] = field(default_factory=list)
    error: Optional[DiffParseError] = None
    hunk_count: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def _option(value: Optional[bool], default_getter) -> bool:
    return default_getter() if value is None else value


def iter_diff_hunks(diff_text: str, collapse_identical: Optional[bool] = None,
                    allow_no_newline_marker: Optional[bool] = None,
                    check_counts: Optional[bool] = None) -> Iterator[List[DiffLine]]:
    """
    Parse a diff hunk by hunk.

    Each yielded list is one hunk's complete normalized output. A failure in
    a later hunk is raised when that hunk is reached; lists already yielded
    remain valid.

    Args:
        diff_text: The diff content to parse
        collapse_identical: Collapse identical delete/add pairs (default from config)
        allow_no_newline_marker: Skip "\\ No newline" lines (default from config)
        check_counts: Warn on header/body count mismatch (default from config)
    """
    collapse_identical = _option(collapse_identical, is_collapse_enabled)
    allow_no_newline_marker = _option(allow_no_newline_marker, is_no_newline_marker_allowed)
    check_counts = _option(check_counts, is_count_check_enabled)

    for hunk in iter_hunks(diff_text, check_counts=check_counts):
        yield normalize_hunk(hunk, collapse_identical=collapse_identical,
                             allow_no_newline_marker=allow_no_newline_marker)


def parse_diff(diff_text: str, collapse_identical: Optional[bool] = None,
               allow_no_newline_marker: Optional[bool] = None,
               check_counts: Optional[bool] = None) -> List[DiffLine]:
    """
    Parse a unified diff into a flat list of normalized DiffLine records.

    Input without any hunk header yields an empty list.

    Raises:
        MalformedHunkHeader: if a header's numeric fields cannot be parsed
        UnrecognizedLineMarker: if a body line has an unknown leading marker
    """
    lines: List[DiffLine] = []
    hunk_count = 0
    for hunk_lines in iter_diff_hunks(diff_text, collapse_identical=collapse_identical,
                                      allow_no_newline_marker=allow_no_newline_marker,
                                      check_counts=check_counts):
        lines.extend(hunk_lines)
        hunk_count += 1
    logger.debug(f"Parsed {hunk_count} hunks into {len(lines)} lines")
    return lines


def try_parse_diff(diff_text: str, collapse_identical: Optional[bool] = None,
                   allow_no_newline_marker: Optional[bool] = None,
                   check_counts: Optional[bool] = None) -> ParseResult:
    """Parse a diff without raising; failures are reported in the result."""
    result = ParseResult()
    try:
        for hunk_lines in iter_diff_hunks(diff_text, collapse_identical=collapse_identical,
                                          allow_no_newline_marker=allow_no_newline_marker,
                                          check_counts=check_counts):
            result.lines.extend(hunk_lines)
            result.hunk_count += 1
    except DiffParseError as e:
        logger.warning(f"Diff parsing stopped at {e.describe_position()}: {e.message}")
        result.error = e
    return result


def summarize_lines(lines: Iterable[DiffLine], hunks: int = 0) -> DiffStats:
    """Count records per kind."""
    stats = DiffStats(hunks=hunks)
    for line in lines:
        if line.kind is LineKind.CONTEXT:
            stats.context += 1
        elif line.kind is LineKind.ADDITION:
            stats.additions += 1
        else:
            stats.deletions += 1
    return stats
