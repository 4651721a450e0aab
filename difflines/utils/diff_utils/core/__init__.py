"""
Core utilities for diff parsing.
"""

from .exceptions import DiffParseError, MalformedHunkHeader, UnrecognizedLineMarker
