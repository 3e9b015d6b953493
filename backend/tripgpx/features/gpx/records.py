"""
Stored GPX records.

Packages parsed metadata into the GpxFile shape persisted on trips and
stages. The storage URL and validity flag come from the caller.
"""

from typing import List, Optional

from .schemas import GpxFile, GpxMetadata, KeyPoint


def to_stored_record(
    metadata: GpxMetadata,
    url: str,
    is_valid: bool,
    key_points: Optional[List[KeyPoint]] = None
) -> GpxFile:
    """Build the persisted GpxFile for an uploaded GPX."""
    return GpxFile(
        **metadata.model_dump(),
        url=url,
        is_valid=is_valid,
        key_points=key_points,
    )
