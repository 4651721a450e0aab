"""
Line normalizer: turns one hunk into numbered DiffLine records.

Context lines are emitted as they are. Consecutive '-'/'+' lines form a
change run; its deletions and additions are gathered into two ordered lists
and paired by position. A pair with identical content is a fake replacement
and becomes a single context line; any other pair is emitted as a deletion
followed by its addition. Leftovers of the longer list keep their own kind.
"""

from typing import List, Optional, Tuple

from difflines.models.diff import DiffLine, LineKind
from difflines.utils.logging_utils import logger
from ..core.exceptions import MalformedHunkHeader, UnrecognizedLineMarker
from .hunk_reader import Hunk

MARKER_KINDS = {
    ' ': LineKind.CONTEXT,
    '+': LineKind.ADDITION,
    '-': LineKind.DELETION,
}
NO_NEWLINE_MARKER = '\\'


def classify_line(raw_line: str, hunk_index: int = 0, line_index: int = 0,
                  source_line: Optional[int] = None,
                  allow_no_newline_marker: bool = False) -> Optional[LineKind]:
    """
    Classify a raw hunk body line by its first character.

    Returns:
        The line kind, or None for a skipped "\\ No newline at end of file"
        line when allow_no_newline_marker is set

    Raises:
        UnrecognizedLineMarker: for any other leading character, including
        an empty line
    """
    marker = raw_line[:1]
    kind = MARKER_KINDS.get(marker)
    if kind is not None:
        return kind
    if allow_no_newline_marker and marker == NO_NEWLINE_MARKER:
        return None
    raise UnrecognizedLineMarker(
        f"Unrecognized line marker {marker!r} in hunk {hunk_index}, line {line_index}: {raw_line!r}",
        raw_line=raw_line, hunk_index=hunk_index, line_index=line_index, source_line=source_line,
    )


def _check_empty_side(hunk: Hunk, kind: LineKind, raw_line: str, line_index: int,
                      source_line: Optional[int]) -> None:
    """A side whose header start is 0 is empty and cannot receive lines."""
    for side, start, kinds in (('old', hunk.old_start, (LineKind.CONTEXT, LineKind.DELETION)),
                               ('new', hunk.new_start, (LineKind.CONTEXT, LineKind.ADDITION))):
        if start == 0 and kind in kinds:
            raise MalformedHunkHeader(
                f"Malformed hunk header {hunk.header!r}: {side} side starts at 0 "
                f"but hunk {hunk.index}, line {line_index} has {kind.value} line {raw_line!r}",
                raw_line=raw_line, hunk_index=hunk.index, line_index=line_index,
                source_line=source_line,
                details={'header': hunk.header, 'side': side},
            )


def _emit_change_run(dels: List[str], adds: List[str], old_line: int, new_line: int,
                     out: List[DiffLine]) -> Tuple[int, int]:
    """Pair dels/adds by index, append the records to out, return the advanced counters."""
    paired = min(len(dels), len(adds))
    for i in range(paired):
        if dels[i] == adds[i]:
            logger.debug(f"Collapsing identical pair at old {old_line}/new {new_line}: {dels[i]!r}")
            out.append(DiffLine.context(dels[i], old_line, new_line))
            old_line += 1
            new_line += 1
        else:
            out.append(DiffLine.deletion(dels[i], old_line))
            old_line += 1
            out.append(DiffLine.addition(adds[i], new_line))
            new_line += 1

    for content in dels[paired:]:
        out.append(DiffLine.deletion(content, old_line))
        old_line += 1
    for content in adds[paired:]:
        out.append(DiffLine.addition(content, new_line))
        new_line += 1

    return old_line, new_line


def normalize_hunk(hunk: Hunk, collapse_identical: bool = True,
                   allow_no_newline_marker: bool = False) -> List[DiffLine]:
    """
    Normalize one hunk into DiffLine records.

    Args:
        hunk: The hunk to normalize
        collapse_identical: Rewrite identical delete/add pairs as context.
            When False every line keeps its own kind and original order.
        allow_no_newline_marker: Skip "\\ No newline at end of file" lines

    Returns:
        The hunk's records, numbered from its header's start lines

    Raises:
        UnrecognizedLineMarker: if a body line has an unknown marker
        MalformedHunkHeader: if a line lands on a side whose header start is 0
        Nothing is returned for the hunk in either case.
    """
    classified = []
    for line_index, raw_line in enumerate(hunk.raw_lines):
        source_line = hunk.source_line + 1 + line_index if hunk.source_line is not None else None
        kind = classify_line(raw_line, hunk_index=hunk.index, line_index=line_index,
                             source_line=source_line,
                             allow_no_newline_marker=allow_no_newline_marker)
        if kind is None:
            continue
        _check_empty_side(hunk, kind, raw_line, line_index, source_line)
        classified.append((kind, raw_line[1:]))

    old_line = hunk.old_start
    new_line = hunk.new_start
    result: List[DiffLine] = []

    if not collapse_identical:
        for kind, content in classified:
            if kind is LineKind.CONTEXT:
                result.append(DiffLine.context(content, old_line, new_line))
                old_line += 1
                new_line += 1
            elif kind is LineKind.DELETION:
                result.append(DiffLine.deletion(content, old_line))
                old_line += 1
            else:
                result.append(DiffLine.addition(content, new_line))
                new_line += 1
        return result

    dels: List[str] = []
    adds: List[str] = []
    for kind, content in classified:
        if kind is LineKind.CONTEXT:
            if dels or adds:
                old_line, new_line = _emit_change_run(dels, adds, old_line, new_line, result)
                dels, adds = [], []
            result.append(DiffLine.context(content, old_line, new_line))
            old_line += 1
            new_line += 1
        elif kind is LineKind.DELETION:
            dels.append(content)
        else:
            adds.append(content)

    if dels or adds:
        _emit_change_run(dels, adds, old_line, new_line, result)

    logger.debug(f"Hunk {hunk.index}: {len(hunk.raw_lines)} raw lines -> {len(result)} records")
    return result
