"""
Exceptions for diff parsing.
"""

from typing import Any, Dict, Optional


class DiffParseError(Exception):
    """
    Base exception raised when a diff cannot be parsed.

    Attributes:
        message -- explanation of the error
        raw_line -- the offending line, exactly as it appeared in the input
        hunk_index -- 0-based index of the hunk being parsed
        line_index -- 0-based index of the line within the hunk body,
                      or None when the header itself is at fault
        source_line -- 1-based line number within the whole input
        details -- additional details about the error
    """

    error_type = "diff_parse_error"

    def __init__(self, message: str, raw_line: str = "", hunk_index: Optional[int] = None,
                 line_index: Optional[int] = None, source_line: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.raw_line = raw_line
        self.hunk_index = hunk_index
        self.line_index = line_index
        self.source_line = source_line
        self.details = details or {}
        super().__init__(self.message)

    def describe_position(self) -> str:
        """Human readable position, e.g. 'hunk 2, line 5 (input line 14)'."""
        parts = []
        if self.hunk_index is not None:
            parts.append(f"hunk {self.hunk_index}")
        if self.line_index is not None:
            parts.append(f"line {self.line_index}")
        position = ", ".join(parts) or "unknown position"
        if self.source_line is not None:
            position += f" (input line {self.source_line})"
        return position

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "type": self.error_type,
            "message": self.message,
            "raw_line": self.raw_line,
            "hunk_index": self.hunk_index,
            "line_index": self.line_index,
            "source_line": self.source_line,
            "details": self.details,
        }


class MalformedHunkHeader(DiffParseError):
    """Raised when an @@ header line cannot be parsed into its numeric fields."""

    error_type = "malformed_hunk_header"


class UnrecognizedLineMarker(DiffParseError):
    """Raised when a hunk body line does not start with ' ', '+' or '-'."""

    error_type = "unrecognized_line_marker"

    @property
    def marker(self) -> str:
        return self.raw_line[:1]

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["marker"] = self.marker
        return payload
