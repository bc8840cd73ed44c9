"""
Engine errors.

Engines never raise for rejected actions (those are no-ops). The only
caller errors are malformed snapshots handed to LOAD.
"""

from __future__ import annotations


class SnapshotError(ValueError):
    """A LOAD snapshot is missing a mandatory field or has a bad shape."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
