"""Output formatting for check results."""

from .stdout import StdoutReporter

__all__ = ["StdoutReporter"]
