"""
Upload gate for GPX files.

Pure predicates; callers run them before handing content to the parser,
which does not enforce them itself.
"""

from typing import Optional

from tripgpx.config import settings

GPX_EXTENSION = ".gpx"


def is_gpx_by_type(mime_type: Optional[str]) -> bool:
    """True for a MIME type accepted as GPX."""
    if not mime_type:
        return False
    # "text/xml; charset=utf-8" -> "text/xml"
    base_type = mime_type.split(";", 1)[0].strip().lower()
    return base_type in settings.accepted_mime_types


def is_gpx_by_extension(filename: Optional[str]) -> bool:
    """True if the filename ends in .gpx (any case)."""
    return bool(filename) and filename.lower().endswith(GPX_EXTENSION)


def is_gpx_file(filename: Optional[str], mime_type: Optional[str] = None) -> bool:
    """Accept a file if either its MIME type or its extension says GPX."""
    return is_gpx_by_type(mime_type) or is_gpx_by_extension(filename)


def is_within_size_limit(byte_size: int, max_bytes: Optional[int] = None) -> bool:
    """True if the file is no larger than max_bytes (20 MB by default)."""
    limit = settings.max_file_size_bytes if max_bytes is None else max_bytes
    return byte_size <= limit
