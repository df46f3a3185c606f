"""In-memory index structures backing the calendar engine."""

from __future__ import annotations

from .series_index import SeriesIndex
from .uniqueness import UniquenessIndex

__all__ = ["SeriesIndex", "UniquenessIndex"]
