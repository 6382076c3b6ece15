"""
Exception types raised by nmprune.

Only a bad scan root is fatal to a run. Per-entry scan problems and failed
deletions are recorded instead of raised.
"""

from __future__ import annotations


class NmPruneError(Exception):
    """Base class for all nmprune specific errors."""


class InvalidRootError(NmPruneError):
    """Raised when the scan root is missing or not a directory."""


class SelectionAborted(NmPruneError):
    """Raised by a chooser when the operator cancels the selection."""
