"""API-level constants shared across modules."""
from __future__ import annotations


class AccessTier:
    NONE = "NONE"
    READER = "READER"
    ADMIN = "ADMIN"


DEFAULT_TRACK_GAUGE_MM = 1435
