"""
GPX-related schemas.

Pydantic models for parsed GPX geometry and the metadata stored on trips.
All models are immutable; build new ones instead of mutating.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Base for engine records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """JSON-ready dict using stored field names, absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GeoPoint(_Record):
    """Single point of a track or route."""

    lat: float
    lon: float
    elevation: Optional[float] = None


class Waypoint(GeoPoint):
    """Standalone point of interest (<wpt>)."""

    name: Optional[str] = None


class Track(_Record):
    """One recorded path, built from a single <trkseg>."""

    name: str
    points: List[GeoPoint] = Field(default_factory=list)


class Route(_Record):
    """Planned path from <rte>."""

    name: str
    points: List[GeoPoint] = Field(default_factory=list)


class GpxMetadata(_Record):
    """
    Summary of a GPX file.

    Aliases are the field names of records already stored on trips and
    stages; keep them stable.
    """

    filename: str

    # Metrics
    distance_km: float = Field(default=0.0, alias="distance")
    waypoint_count: int = Field(default=0, ge=0, alias="waypoints")
    elevation_gain_m: Optional[float] = Field(default=None, alias="elevationGain")
    elevation_loss_m: Optional[float] = Field(default=None, alias="elevationLoss")
    max_elevation_m: Optional[float] = Field(default=None, alias="maxElevation")
    min_elevation_m: Optional[float] = Field(default=None, alias="minElevation")

    # Time range (ISO 8601, UTC)
    start_time: Optional[str] = Field(default=None, alias="startTime")
    end_time: Optional[str] = Field(default=None, alias="endTime")
    duration_seconds: Optional[int] = Field(default=None, ge=0, alias="duration")


class GpxParseResult(_Record):
    """Full parse output: geometry plus metadata."""

    tracks: List[Track] = Field(default_factory=list)
    routes: List[Route] = Field(default_factory=list)
    waypoints: List[Waypoint] = Field(default_factory=list)
    metadata: GpxMetadata


class KeyPointType(str, Enum):
    """Role of a key point along the path."""
    START = "start"
    INTERMEDIATE = "intermediate"
    END = "end"


class KeyPoint(_Record):
    """Notable point along the path (start, every N km, finish)."""

    lat: float
    lon: float
    elevation: Optional[float] = None
    distance_from_start_km: float = Field(alias="distanceFromStart")
    point_type: KeyPointType = Field(alias="type")
    description: str


class GpxFile(GpxMetadata):
    """GPX attachment as persisted on a trip or stage."""

    url: str
    is_valid: bool = Field(alias="isValid")
    key_points: Optional[List[KeyPoint]] = Field(default=None, alias="keyPoints")


class GpxSummary(_Record):
    """Counts over a parse result."""

    total_points: int = 0
    total_tracks: int = 0
    total_routes: int = 0
    total_waypoints: int = 0
    has_elevation: bool = False
