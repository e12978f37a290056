"""Engine error type."""

from __future__ import annotations


class TilingError(ValueError):
    """Raised when tiling inputs are invalid or would produce degenerate geometry."""
