"""
Shared GPX fixtures.

Documents mirror what trip creators upload: a mixed file with waypoints,
a timed track and a planned route, plus a few degenerate shapes.
"""

import pytest


MIXED_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Test">
  <wpt lat="43.6142" lon="13.5173">
    <name>Waypoint 1</name>
    <ele>100</ele>
  </wpt>
  <wpt lat="43.6152" lon="13.5183">
    <name>Waypoint 2</name>
    <ele>110</ele>
  </wpt>
  <trk>
    <name>Test Track</name>
    <trkseg>
      <trkpt lat="43.6142" lon="13.5173">
        <ele>100</ele>
        <time>2024-01-01T10:00:00Z</time>
      </trkpt>
      <trkpt lat="43.6152" lon="13.5183">
        <ele>110</ele>
        <time>2024-01-01T10:05:00Z</time>
      </trkpt>
      <trkpt lat="43.6162" lon="13.5193">
        <ele>120</ele>
        <time>2024-01-01T10:10:00Z</time>
      </trkpt>
    </trkseg>
  </trk>
  <rte>
    <name>Test Route</name>
    <rtept lat="43.6172" lon="13.5203">
      <ele>130</ele>
    </rtept>
    <rtept lat="43.6182" lon="13.5213">
      <ele>140</ele>
    </rtept>
  </rte>
</gpx>"""

TRACK_ONLY_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Track Only</name>
    <trkseg>
      <trkpt lat="43.6142" lon="13.5173">
        <ele>100</ele>
      </trkpt>
      <trkpt lat="43.6152" lon="13.5183">
        <ele>110</ele>
      </trkpt>
    </trkseg>
  </trk>
</gpx>"""

WAYPOINTS_ONLY_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Test">
  <wpt lat="45.0" lon="7.0"><name>Rifugio</name><ele>2100</ele></wpt>
  <wpt lat="45.1" lon="7.1"><name>Colle</name></wpt>
  <wpt lat="45.2" lon="7.2"/>
</gpx>"""

NOT_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<notgpx>
  <invalid>content</invalid>
</notgpx>"""


def build_track_gpx(points, name=None):
    """
    GPX with one track and one segment.

    Args:
        points: (lat, lon, ele, time) tuples; ele/time may be None
        name: Optional track name
    """
    rows = []
    for lat, lon, ele, time in points:
        children = ""
        if ele is not None:
            children += f"<ele>{ele}</ele>"
        if time is not None:
            children += f"<time>{time}</time>"
        rows.append(f'<trkpt lat="{lat}" lon="{lon}">{children}</trkpt>')

    name_tag = f"<name>{name}</name>" if name else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<gpx version="1.1" creator="Test">'
        f"<trk>{name_tag}<trkseg>{''.join(rows)}</trkseg></trk>"
        "</gpx>"
    )


@pytest.fixture
def mixed_gpx():
    return MIXED_GPX


@pytest.fixture
def track_only_gpx():
    return TRACK_ONLY_GPX


@pytest.fixture
def waypoints_only_gpx():
    return WAYPOINTS_ONLY_GPX


@pytest.fixture
def track_gpx():
    return build_track_gpx
