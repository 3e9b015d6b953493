"""
GPX processing module.

Usage:
    from tripgpx.features.gpx import GPXParserService, to_stored_record
    from tripgpx.features.gpx import is_gpx_file, is_within_size_limit

Components:
- GPXParserService: Parse GPX text/files into geometry and metadata
- validators: Type/extension/size gate run before parsing
- to_stored_record: Metadata -> GpxFile persisted on trips/stages
- extract_key_points: Start, every N km, finish
- summarize: Counts for upload previews
- to_gpx_xml: Write a parse result back to GPX 1.1
"""

from .exceptions import GpxError, InvalidDocument, UnsupportedInput
from .export import to_gpx, to_gpx_xml
from .key_points import extract_key_points
from .parser import GPXParserService, build_metadata
from .records import to_stored_record
from .schemas import (
    GeoPoint,
    GpxFile,
    GpxMetadata,
    GpxParseResult,
    GpxSummary,
    KeyPoint,
    KeyPointType,
    Route,
    Track,
    Waypoint,
)
from .summary import summarize
from .validators import (
    is_gpx_by_extension,
    is_gpx_by_type,
    is_gpx_file,
    is_within_size_limit,
)
from .xml_adapter import normalize_to_array

__all__ = [
    # Errors
    "GpxError",
    "InvalidDocument",
    "UnsupportedInput",
    # Services
    "GPXParserService",
    "build_metadata",
    "normalize_to_array",
    "to_stored_record",
    "extract_key_points",
    "summarize",
    "to_gpx",
    "to_gpx_xml",
    # Validators
    "is_gpx_by_type",
    "is_gpx_by_extension",
    "is_gpx_file",
    "is_within_size_limit",
    # Schemas
    "GeoPoint",
    "Waypoint",
    "Track",
    "Route",
    "GpxMetadata",
    "GpxParseResult",
    "GpxFile",
    "KeyPoint",
    "KeyPointType",
    "GpxSummary",
]
