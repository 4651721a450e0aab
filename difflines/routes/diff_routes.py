"""
Diff parsing routes.
"""
from fastapi import APIRouter, HTTPException
import logging

from difflines.models.diff import ParseDiffRequest, ParseDiffResponse
from difflines.utils.diff_utils.core.config import get_max_diff_bytes
from difflines.utils.diff_utils.core.exceptions import DiffParseError
from difflines.utils.diff_utils.parsing.diff_parser import iter_diff_hunks, summarize_lines

logger = logging.getLogger("DIFFLINES")
router = APIRouter(prefix="/api", tags=["diff"])


@router.get('/health')
async def health():
    return {"status": "ok"}


@router.post('/parse-diff', response_model=ParseDiffResponse)
async def parse_diff_route(request: ParseDiffRequest):
    """Parse a unified diff into normalized line records."""
    max_bytes = get_max_diff_bytes()
    size = len(request.diff.encode('utf-8'))
    if size > max_bytes:
        raise HTTPException(status_code=413, detail=f"Diff is {size} bytes, limit is {max_bytes}")

    lines = []
    hunks = 0
    try:
        for hunk_lines in iter_diff_hunks(request.diff,
                                          collapse_identical=request.collapseIdentical,
                                          allow_no_newline_marker=request.allowNoNewlineMarker):
            lines.extend(hunk_lines)
            hunks += 1
    except DiffParseError as e:
        logger.warning(f"Rejected diff at {e.describe_position()}: {e.message}")
        raise HTTPException(status_code=422, detail=e.to_dict())

    return ParseDiffResponse(lines=lines, stats=summarize_lines(lines, hunks=hunks))
