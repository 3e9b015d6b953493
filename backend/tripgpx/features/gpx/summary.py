"""Counts over a parse result, for upload previews."""

from .schemas import GpxParseResult, GpxSummary


def summarize(result: GpxParseResult) -> GpxSummary:
    """Totals of the parsed collections. Points and elevation refer to tracks."""
    track_points = [p for track in result.tracks for p in track.points]
    return GpxSummary(
        total_points=len(track_points),
        total_tracks=len(result.tracks),
        total_routes=len(result.routes),
        total_waypoints=len(result.waypoints),
        has_elevation=any(p.elevation is not None for p in track_points),
    )
