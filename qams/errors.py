"""
Exception types raised by the QAMS core.
"""

from __future__ import annotations


class QamsError(Exception):
    """Base class for all QAMS errors."""
    pass


class CsvFormatError(QamsError, ValueError):
    """Raised when scorecard CSV text cannot be split into a valid grid."""
    pass


class InvalidSelectionError(QamsError, IndexError):
    """Raised when a caller selects an option that doesn't exist."""
    pass


class ConfigError(QamsError):
    """Raised when a configuration file cannot be parsed."""
    pass
