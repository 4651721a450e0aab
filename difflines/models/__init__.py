"""
Data models for parsed diffs.
"""
from .diff import LineKind, DiffLine, DiffStats, ParseDiffRequest, ParseDiffResponse
