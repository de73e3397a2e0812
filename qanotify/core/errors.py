"""Error taxonomy.

Configuration problems are fatal and surface before any report is read.
Malformed report input never raises; it is degraded at the point of use.
Mail transport failures are left as the ``smtplib`` / ``OSError``
exceptions the transport raises.
"""
from __future__ import annotations


class QANotifyError(Exception):
    """Base class for errors raised by qanotify itself."""


class ConfigurationError(QANotifyError):
    """A resource file or setting needed before processing is missing or invalid."""


class ReportsDirectoryError(QANotifyError):
    """The reports root directory does not exist or is not a directory."""
