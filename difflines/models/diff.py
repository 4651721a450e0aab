"""
Diff line data models.
"""
import enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class LineKind(str, enum.Enum):
    """Classification of a normalized diff line."""
    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"


class DiffLine(BaseModel):
    """One classified, numbered line of a parsed diff."""
    model_config = {"frozen": True}

    kind: LineKind
    content: str
    oldLineNumber: Optional[int] = Field(default=None, ge=1)
    newLineNumber: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_line_numbers(self):
        has_old = self.oldLineNumber is not None
        has_new = self.newLineNumber is not None
        if self.kind is LineKind.CONTEXT and not (has_old and has_new):
            raise ValueError("context lines need both oldLineNumber and newLineNumber")
        if self.kind is LineKind.ADDITION and (has_old or not has_new):
            raise ValueError("addition lines carry only newLineNumber")
        if self.kind is LineKind.DELETION and (has_new or not has_old):
            raise ValueError("deletion lines carry only oldLineNumber")
        return self

    @classmethod
    def context(cls, content: str, old_line: int, new_line: int) -> "DiffLine":
        return cls(kind=LineKind.CONTEXT, content=content,
                   oldLineNumber=old_line, newLineNumber=new_line)

    @classmethod
    def addition(cls, content: str, new_line: int) -> "DiffLine":
        return cls(kind=LineKind.ADDITION, content=content, newLineNumber=new_line)

    @classmethod
    def deletion(cls, content: str, old_line: int) -> "DiffLine":
        return cls(kind=LineKind.DELETION, content=content, oldLineNumber=old_line)


class DiffStats(BaseModel):
    """Record counts per kind for a parsed diff."""
    hunks: int = 0
    context: int = 0
    additions: int = 0
    deletions: int = 0

    @property
    def total(self) -> int:
        return self.context + self.additions + self.deletions


class ParseDiffRequest(BaseModel):
    diff: str
    collapseIdentical: Optional[bool] = None
    allowNoNewlineMarker: Optional[bool] = None


class ParseDiffResponse(BaseModel):
    lines: List[DiffLine]
    stats: DiffStats
