"""
Tests for splitting diff text into hunks.
"""

import logging

import pytest

from difflines.utils.diff_utils.core.exceptions import MalformedHunkHeader
from difflines.utils.diff_utils.parsing.hunk_reader import (
    iter_hunks,
    parse_hunk_header,
    read_hunks,
    split_diff_lines,
)


def test_split_drops_single_trailing_newline():
    assert split_diff_lines("@@ -1 +1 @@\n-a\n+b\n") == ["@@ -1 +1 @@", "-a", "+b"]
    assert split_diff_lines("@@ -1 +1 @@\n-a\n+b") == ["@@ -1 +1 @@", "-a", "+b"]


def test_split_keeps_blank_lines_before_the_final_newline():
    # Only the element produced by the last newline is dropped
    assert split_diff_lines(" a\n\n") == [" a", ""]


def test_split_empty_input():
    assert split_diff_lines("") == []


@pytest.mark.parametrize("header, expected", [
    ("@@ -1,3 +1,4 @@", (1, 3, 1, 4)),
    ("@@ -12 +12 @@", (12, 1, 12, 1)),
    ("@@ -5,2 +7 @@", (5, 2, 7, 1)),
    ("@@ -0,0 +1,3 @@", (0, 0, 1, 3)),
    ("@@ -4,2 +0,0 @@", (4, 2, 0, 0)),
    ("@@ -20,7 +21,8 @@ def handler(request):", (20, 7, 21, 8)),
    ("@@ -010,2 +010,2 @@", (10, 2, 10, 2)),
])
def test_parse_hunk_header(header, expected):
    assert parse_hunk_header(header) == expected


@pytest.mark.parametrize("header", [
    "@@ -x,1 +1,1 @@",
    "@@ -1,y +1,1 @@",
    "@@ -1,1 +1,1",
    "@@ 1,1 1,1 @@",
    "@@ -1,1 +-1,1 @@",
    "@@@ -1,1 -1,1 +1,2 @@@",
    "@@ -0,2 +1,2 @@",
    "@@ -1,2 +0,1 @@",
])
def test_malformed_hunk_header(header):
    with pytest.raises(MalformedHunkHeader) as excinfo:
        parse_hunk_header(header, hunk_index=3, source_line=9)

    error = excinfo.value
    assert error.raw_line == header
    assert error.hunk_index == 3
    assert error.line_index is None
    assert error.source_line == 9
    assert "malformed" in str(error).lower()


def test_read_hunks_skips_preamble():
    diff = (
        "diff --git a/app.py b/app.py\n"
        "index 83db48f..bf269f4 100644\n"
        "--- a/app.py\n"
        "+++ b/app.py\n"
        "@@ -1,2 +1,2 @@\n"
        " keep\n"
        "-old\n"
        "+new\n"
    )
    hunks = read_hunks(diff)

    assert len(hunks) == 1
    hunk = hunks[0]
    assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (1, 2, 1, 2)
    assert hunk.index == 0
    assert hunk.header == "@@ -1,2 +1,2 @@"
    assert hunk.source_line == 5
    assert hunk.raw_lines == [" keep", "-old", "+new"]


def test_read_hunks_splits_on_each_header():
    diff = "@@ -1 +1 @@\n-a\n+b\n@@ -10,2 +10,2 @@\n x\n y\n"
    hunks = read_hunks(diff)

    assert [h.index for h in hunks] == [0, 1]
    assert hunks[0].raw_lines == ["-a", "+b"]
    assert hunks[1].raw_lines == [" x", " y"]
    assert hunks[1].old_start == 10
    assert hunks[1].source_line == 4


def test_raw_lines_are_kept_verbatim():
    diff = "@@ -1,2 +1,2 @@\n-  tabbed\tline  \n+  tabbed\tline\r\n bogus?\n"
    hunk = read_hunks(diff)[0]
    assert hunk.raw_lines == ["-  tabbed\tline  ", "+  tabbed\tline\r", " bogus?"]


def test_no_headers_means_no_hunks():
    assert read_hunks("") == []
    assert read_hunks("just some text\nwithout hunks\n") == []
    assert read_hunks("--- a/x\n+++ b/x\n") == []


def test_malformed_first_header_raises():
    with pytest.raises(MalformedHunkHeader) as excinfo:
        read_hunks("--- a/x\n+++ b/x\n@@ -x,1 +1,1 @@\n-a\n+b\n")
    assert excinfo.value.hunk_index == 0
    assert excinfo.value.source_line == 3


def test_earlier_hunks_survive_a_malformed_later_header():
    diff = "@@ -1 +1 @@\n-a\n+b\n@@ -?,1 +1 @@\n c\n"
    reader = iter_hunks(diff)

    first = next(reader)
    assert first.raw_lines == ["-a", "+b"]

    with pytest.raises(MalformedHunkHeader) as excinfo:
        next(reader)
    assert excinfo.value.hunk_index == 1
    assert excinfo.value.raw_line == "@@ -?,1 +1 @@"


def test_body_counts():
    hunk = read_hunks("@@ -1,3 +1,2 @@\n a\n-b\n-c\n+d\n")[0]
    assert hunk.body_counts() == (3, 2)


def test_count_mismatch_is_logged_not_raised(caplog):
    logger = logging.getLogger("DIFFLINES")
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger="DIFFLINES"):
            hunks = read_hunks("@@ -1,5 +1,5 @@\n a\n")
    finally:
        logger.removeHandler(caplog.handler)

    assert len(hunks) == 1
    assert any("declares 5/5" in record.getMessage() for record in caplog.records)


def test_count_check_can_be_disabled(caplog):
    logger = logging.getLogger("DIFFLINES")
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger="DIFFLINES"):
            read_hunks("@@ -1,5 +1,5 @@\n a\n", check_counts=False)
    finally:
        logger.removeHandler(caplog.handler)

    assert not caplog.records
