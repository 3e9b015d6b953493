"""
GPX export.

Writes a parse result back out as a clean GPX 1.1 document, holding only
the points the parser accepted. Timestamps are not part of the parsed
geometry and are not written.
"""

import gpxpy.gpx

from .schemas import GpxParseResult

DEFAULT_CREATOR = "tripgpx"


def to_gpx(result: GpxParseResult, creator: str = DEFAULT_CREATOR) -> gpxpy.gpx.GPX:
    """Build a gpxpy document; each Track becomes its own <trk>."""
    gpx = gpxpy.gpx.GPX()
    gpx.creator = creator

    for waypoint in result.waypoints:
        gpx.waypoints.append(gpxpy.gpx.GPXWaypoint(
            latitude=waypoint.lat,
            longitude=waypoint.lon,
            elevation=waypoint.elevation,
            name=waypoint.name,
        ))

    for track in result.tracks:
        gpx_track = gpxpy.gpx.GPXTrack(name=track.name)
        segment = gpxpy.gpx.GPXTrackSegment()
        for point in track.points:
            segment.points.append(gpxpy.gpx.GPXTrackPoint(
                latitude=point.lat,
                longitude=point.lon,
                elevation=point.elevation,
            ))
        gpx_track.segments.append(segment)
        gpx.tracks.append(gpx_track)

    for route in result.routes:
        gpx_route = gpxpy.gpx.GPXRoute(name=route.name)
        for point in route.points:
            gpx_route.points.append(gpxpy.gpx.GPXRoutePoint(
                latitude=point.lat,
                longitude=point.lon,
                elevation=point.elevation,
            ))
        gpx.routes.append(gpx_route)

    return gpx


def to_gpx_xml(result: GpxParseResult, creator: str = DEFAULT_CREATOR) -> str:
    """Serialize a parse result as GPX 1.1 XML."""
    return to_gpx(result, creator).to_xml(version="1.1")
