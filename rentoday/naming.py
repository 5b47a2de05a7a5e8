"""Timestamp based file name generation."""

from datetime import datetime
from pathlib import Path


# Marker in the prefix that stands for the original base name
PREFIX_WILDCARD = "*"


def format_timestamp(dt: datetime) -> str:
    """Format a point in time as ``yyyyMMdd_HHmmss_fff`` (millisecond resolution)."""
    return f"{dt:%Y%m%d_%H%M%S}_{dt.microsecond // 1000:03d}"


def resolve_prefix(prefix: str | None, base_name: str) -> str:
    """Substitute the original base name for every wildcard in the prefix."""
    if not prefix:
        return ""
    return prefix.replace(PREFIX_WILDCARD, base_name)


def new_file_name(path: Path, prefix: str | None = None, now: datetime | None = None) -> Path:
    """Build the timestamped name for a file.

    Directory and extension are kept, only the base name changes. The clock is read on every
    call, so two calls within the same millisecond produce the same name.

    Args:
        path: Original file path.
        prefix: Optional prefix template, may contain ``*``.
        now: Point in time to embed. Defaults to the current local time.

    Returns:
        Path of the renamed file, e.g. ``data/MyPrefix_20020228_134228_623.txt``.
    """
    if now is None:
        now = datetime.now()
    stem = resolve_prefix(prefix, path.stem) + format_timestamp(now)
    return path.with_name(stem + path.suffix)
