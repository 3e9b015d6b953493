"""
GPX Parser Service

Parses GPX files into tracks, routes and waypoints and derives the trip
metadata (distance, elevation profile, time range) stored on trips.
"""

import inspect
import logging
from pathlib import Path
from typing import Any, Optional, Union

from tripgpx.config import settings
from tripgpx.shared.elevation import round_half_up

from .assemblers import assemble_routes, assemble_tracks, assemble_waypoints, count_waypoints
from .exceptions import InvalidDocument, UnsupportedInput
from .metrics import PathMetrics
from .schemas import GpxMetadata, GpxParseResult
from .xml_adapter import parse_document

logger = logging.getLogger(__name__)


def build_metadata(filename: str, waypoint_count: int, metrics: PathMetrics) -> GpxMetadata:
    """
    Fold document totals into a GpxMetadata.

    Optional fields are set only when the source supported them:
    gain/loss when positive, bounds when any elevation was read,
    duration when the time range is positive.
    """
    duration_seconds = None
    if metrics.start_time and metrics.end_time:
        span = (metrics.end_time.date - metrics.start_time.date).total_seconds()
        if span > 0:
            duration_seconds = int(round_half_up(span))

    def _rounded(value: Optional[float]) -> Optional[float]:
        return round_half_up(value) if value is not None else None

    return GpxMetadata(
        filename=filename,
        distance_km=round_half_up(metrics.distance_km, 2),
        waypoint_count=waypoint_count,
        elevation_gain_m=_rounded(metrics.elevation_gain_m) if metrics.elevation_gain_m > 0 else None,
        elevation_loss_m=_rounded(metrics.elevation_loss_m) if metrics.elevation_loss_m > 0 else None,
        max_elevation_m=_rounded(metrics.max_elevation_m),
        min_elevation_m=_rounded(metrics.min_elevation_m),
        start_time=metrics.start_time.iso_string if metrics.start_time else None,
        end_time=metrics.end_time.iso_string if metrics.end_time else None,
        duration_seconds=duration_seconds,
    )


def _decode(content: Union[bytes, bytearray]) -> str:
    try:
        return bytes(content).decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnsupportedInput(f"GPX content is not UTF-8: {e}") from e


def _coerce_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, (bytes, bytearray)):
        return _decode(content)
    raise UnsupportedInput(
        f"Expected text or bytes from file input, got {type(content).__name__}"
    )


def _source_name(source: Any) -> Optional[str]:
    for attr in ("filename", "name"):
        value = getattr(source, attr, None)
        if isinstance(value, str) and value:
            return Path(value).name
    return None


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def parse(
        content: Union[str, bytes],
        filename: Optional[str] = None
    ) -> GpxParseResult:
        """
        Parse GPX content into tracks, routes, waypoints and metadata.

        Points with invalid coordinates are skipped; a structurally valid
        document without usable points gives empty collections.

        Args:
            content: GPX document as text (bytes are decoded as UTF-8)
            filename: Name recorded in the metadata

        Returns:
            GpxParseResult

        Raises:
            InvalidDocument: If the content is not XML or the root is not <gpx>
        """
        filename = filename or settings.default_filename
        text = _coerce_text(content)

        try:
            doc = parse_document(text)
        except InvalidDocument as e:
            logger.warning(f"Failed to parse GPX {filename}: {e}")
            raise

        tracks, track_metrics = assemble_tracks(doc)
        routes, route_metrics = assemble_routes(doc)
        waypoints = assemble_waypoints(doc)

        metadata = build_metadata(
            filename,
            count_waypoints(doc),
            track_metrics.merge(route_metrics),
        )

        logger.debug(
            f"Parsed {filename}: {len(tracks)} tracks, {len(routes)} routes, "
            f"{len(waypoints)} waypoints, {metadata.distance_km} km"
        )

        return GpxParseResult(
            tracks=tracks,
            routes=routes,
            waypoints=waypoints,
            metadata=metadata,
        )

    @staticmethod
    def read_text(source: Any) -> str:
        """
        Get GPX text from a string, bytes or a file-like object.

        Raises:
            UnsupportedInput: If the source has no synchronous read()
                or reading it fails
        """
        if isinstance(source, (str, bytes, bytearray)):
            return _coerce_text(source)

        read = getattr(source, "read", None)
        if not callable(read):
            raise UnsupportedInput(
                f"Invalid file input: {type(source).__name__} has no read() method"
            )

        try:
            content = read()
        except (OSError, ValueError) as e:
            raise UnsupportedInput(f"Unable to read file content: {e}") from e

        if inspect.isawaitable(content):
            if inspect.iscoroutine(content):
                content.close()
            raise UnsupportedInput("Asynchronous uploads must go through read_upload()")

        return _coerce_text(content)

    @staticmethod
    async def read_upload(upload: Any) -> str:
        """
        Await an upload's read() (e.g. a Starlette UploadFile) and return its text.

        Raises:
            UnsupportedInput: If the upload cannot be read
        """
        read = getattr(upload, "read", None)
        if not callable(read):
            raise UnsupportedInput(
                f"Invalid file input: {type(upload).__name__} has no read() method"
            )

        try:
            content = read()
            if inspect.isawaitable(content):
                content = await content
        except (OSError, ValueError) as e:
            raise UnsupportedInput(f"Unable to read file content: {e}") from e

        return _coerce_text(content)

    @staticmethod
    def parse_metadata(source: Any, filename: Optional[str] = None) -> GpxMetadata:
        """
        Parse only the metadata of a GPX file.

        Args:
            source: GPX text, bytes or a file-like object with read()
            filename: Name recorded in the metadata; defaults to the
                source's own name

        Returns:
            GpxMetadata

        Raises:
            UnsupportedInput: If no text can be read from source
            InvalidDocument: If the content is not a GPX document
        """
        text = GPXParserService.read_text(source)
        name = filename or _source_name(source) or settings.default_filename
        return GPXParserService.parse(text, name).metadata

    @staticmethod
    async def parse_upload(upload: Any, filename: Optional[str] = None) -> GpxMetadata:
        """Async variant of parse_metadata for uploaded files."""
        text = await GPXParserService.read_upload(upload)
        name = filename or _source_name(upload) or settings.default_filename
        return GPXParserService.parse(text, name).metadata
