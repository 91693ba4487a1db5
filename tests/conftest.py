"""
Shared fixtures: GPX documents as exporters actually write them.
"""

from datetime import datetime, timezone

import pytest


GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1"\n'
    '  xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1"\n'
    '  xmlns:ns3="http://www.garmin.com/xmlschemas/TrackPointExtension/v2">\n'
)

GARMIN_GPX = b"""<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1"
  xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">
  <trk>
    <name>Morning Ride</name>
    <trkseg>
      <trkpt lat="50.7700" lon="6.0900">
        <ele>120.5</ele>
        <time>2026-02-15T08:00:00Z</time>
        <extensions>
          <gpxtpx:TrackPointExtension>
            <gpxtpx:hr>145</gpxtpx:hr>
            <gpxtpx:cad>88</gpxtpx:cad>
          </gpxtpx:TrackPointExtension>
        </extensions>
      </trkpt>
      <trkpt lat="50.7710" lon="6.0910">
        <ele>122.0</ele>
        <time>2026-02-15T08:00:30Z</time>
        <extensions>
          <gpxtpx:TrackPointExtension>
            <gpxtpx:hr>148</gpxtpx:hr>
            <gpxtpx:cad>90</gpxtpx:cad>
          </gpxtpx:TrackPointExtension>
        </extensions>
      </trkpt>
    </trkseg>
  </trk>
</gpx>
"""

# Fixed "now" for tracks without timestamps
FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def build_gpx(body: str, header: str = GPX_HEADER) -> bytes:
    """Wrap track markup into a full GPX document."""
    return (header + body + "\n</gpx>\n").encode("utf-8")


@pytest.fixture
def garmin_gpx() -> bytes:
    """Two-point Garmin export with HR and cadence extensions."""
    return GARMIN_GPX


@pytest.fixture
def gpx_document():
    """Builder: track markup -> GPX bytes."""
    return build_gpx


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fixed_clock():
    """Clock returning FIXED_NOW."""
    return lambda: FIXED_NOW
