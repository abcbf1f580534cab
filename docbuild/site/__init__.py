"""Source discovery and publishing of the output directory."""

from .builder import check, clean, copy_assets, publish
from .discovery import classify, discover_entries

__all__ = [
    "check",
    "classify",
    "clean",
    "copy_assets",
    "discover_entries",
    "publish",
]
