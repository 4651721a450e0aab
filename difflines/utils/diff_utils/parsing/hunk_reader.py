"""
Hunk reader: splits unified diff text into hunks.

Lines before the first ``@@`` header (``diff --git``, ``index``, ``---`` and
``+++`` lines and any other preamble) are skipped. Every line after a header,
up to the next header or the end of the input, belongs to that hunk's body
and is kept verbatim, leading marker included.
"""

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from difflines.utils.logging_utils import logger
from ..core.exceptions import MalformedHunkHeader

HUNK_HEADER_PREFIX = '@@'
HUNK_HEADER = re.compile(r'^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$')


@dataclass
class Hunk:
    """One ``@@`` section of a diff, before normalization."""
    index: int
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    header: str = ""
    source_line: Optional[int] = None
    raw_lines: List[str] = field(default_factory=list)

    def body_counts(self) -> Tuple[int, int]:
        """Number of old-side and new-side lines present in the body."""
        old_lines = sum(1 for line in self.raw_lines if line[:1] in (' ', '-'))
        new_lines = sum(1 for line in self.raw_lines if line[:1] in (' ', '+'))
        return old_lines, new_lines


def split_diff_lines(diff_text: str) -> List[str]:
    """
    Split diff text on line feeds.

    A single trailing empty element left by a final newline is dropped; it is
    not a line of the diff.
    """
    if not diff_text:
        return []
    lines = diff_text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def parse_hunk_header(line: str, hunk_index: int = 0,
                      source_line: Optional[int] = None) -> Tuple[int, int, int, int]:
    """
    Parse an ``@@ -O[,OC] +N[,NC] @@`` header.

    Args:
        line: The header line
        hunk_index: Index of the hunk this header opens, for error reporting
        source_line: 1-based line number of the header in the input

    Returns:
        (old_start, old_count, new_start, new_count); omitted counts are 1

    Raises:
        MalformedHunkHeader: if the numeric fields cannot be parsed
    """
    match = HUNK_HEADER.match(line)
    if not match:
        raise MalformedHunkHeader(
            f"Malformed hunk header: {line!r}",
            raw_line=line, hunk_index=hunk_index, source_line=source_line,
        )

    old_start = int(match.group(1), 10)
    old_count = int(match.group(2), 10) if match.group(2) is not None else 1
    new_start = int(match.group(3), 10)
    new_count = int(match.group(4), 10) if match.group(4) is not None else 1

    # A zero start only describes the empty side of a file creation or deletion
    for side, start, count in (('old', old_start, old_count), ('new', new_start, new_count)):
        if start == 0 and count != 0:
            raise MalformedHunkHeader(
                f"Malformed hunk header: {side} start is 0 but {side} count is {count}: {line!r}",
                raw_line=line, hunk_index=hunk_index, source_line=source_line,
                details={'side': side, 'start': start, 'count': count},
            )

    return old_start, old_count, new_start, new_count


def _check_counts(hunk: Hunk) -> None:
    old_lines, new_lines = hunk.body_counts()
    if old_lines != hunk.old_count or new_lines != hunk.new_count:
        logger.warning(
            f"Hunk {hunk.index} header {hunk.header!r} declares "
            f"{hunk.old_count}/{hunk.new_count} old/new lines, body has {old_lines}/{new_lines}"
        )


def iter_hunks(diff_text: str, check_counts: bool = True) -> Iterator[Hunk]:
    """
    Lazily read the hunks of a unified diff.

    A hunk is yielded only once its body is complete, so hunks already
    yielded stay valid when a later header turns out to be malformed.

    Args:
        diff_text: The diff content to parse
        check_counts: Log a warning when a body disagrees with its header

    Yields:
        Hunk objects in input order
    """
    current: Optional[Hunk] = None
    hunk_index = 0

    for source_line, line in enumerate(split_diff_lines(diff_text), start=1):
        if line.startswith(HUNK_HEADER_PREFIX):
            if current is not None:
                if check_counts:
                    _check_counts(current)
                yield current
                current = None

            old_start, old_count, new_start, new_count = parse_hunk_header(
                line, hunk_index=hunk_index, source_line=source_line
            )
            current = Hunk(
                index=hunk_index,
                old_start=old_start,
                old_count=old_count,
                new_start=new_start,
                new_count=new_count,
                header=line,
                source_line=source_line,
            )
            logger.debug(f"Hunk {hunk_index}: {line!r} at input line {source_line}")
            hunk_index += 1
        elif current is not None:
            current.raw_lines.append(line)
        else:
            logger.debug(f"Skipping preamble line {source_line}: {line!r}")

    if current is not None:
        if check_counts:
            _check_counts(current)
        yield current


def read_hunks(diff_text: str, check_counts: bool = True) -> List[Hunk]:
    """Read every hunk of a unified diff into a list."""
    return list(iter_hunks(diff_text, check_counts=check_counts))
