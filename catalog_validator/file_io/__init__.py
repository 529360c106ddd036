"""File-backed diagnostics helpers."""

from .source_location import SourceLocation, lookup_source, format_source

__all__ = [
    "SourceLocation",
    "lookup_source",
    "format_source",
]
