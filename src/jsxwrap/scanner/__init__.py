"""File discovery and multi-file runs."""

from .discovery import discover_all, discover_source_files
from .runner import run_check

__all__ = ["discover_all", "discover_source_files", "run_check"]
