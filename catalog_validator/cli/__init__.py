"""Command line interface for catalog validation."""

from .run_validate import main, validate_files, FileReport

__all__ = ["main", "validate_files", "FileReport"]
