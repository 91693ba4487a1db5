"""
GPX Parser Service

Parses uploaded GPX files into an ordered list of track points.

Heart rate and cadence live inside vendor <extensions> blocks whose
namespace prefixes differ between exporters (gpxtpx:, ns3:, none...).
They are matched by local name on the rebuilt extension markup rather
than by qualified name, otherwise data from common devices goes missing.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional
from xml.sax.saxutils import escape, quoteattr

import gpxpy
import gpxpy.gpx
from pydantic import ValidationError

from gpx_analyzer.features.gpx.schemas import ParsedTrack, TrackPoint
from gpx_analyzer.shared.constants import (
    DEFAULT_TRACK_NAME,
    MIN_TRACK_POINTS,
    SENSOR_TAG_CADENCE,
    SENSOR_TAG_HEART_RATE,
)
from gpx_analyzer.shared.timestamps import parse_timestamp, to_utc

logger = logging.getLogger(__name__)

# Always read with the 1.1 field set: 1.0 has no <extensions> on points
GPX_SCHEMA_VERSION = "1.1"


class MalformedGPXError(ValueError):
    """Upload is not a usable GPX track (bad XML, no track, too few points)."""


def _compile_sensor_pattern(tag: str) -> "re.Pattern[str]":
    """<hr>145</hr>, <gpxtpx:hr> 145 </gpxtpx:hr>, <ns3:hr>...</ns3:hr>"""
    tag = re.escape(tag)
    return re.compile(
        rf"<(?:[a-zA-Z0-9_]+:)?{tag}>\s*([0-9]{{1,3}})\s*</(?:[a-zA-Z0-9_]+:)?{tag}>"
    )


_SENSOR_PATTERNS = {
    SENSOR_TAG_HEART_RATE: _compile_sensor_pattern(SENSOR_TAG_HEART_RATE),
    SENSOR_TAG_CADENCE: _compile_sensor_pattern(SENSOR_TAG_CADENCE),
}


def extract_sensor_value(tag: str, markup: str) -> Optional[int]:
    """
    Find the first `<prefix:tag>NNN</prefix:tag>` reading in markup.

    Args:
        tag: Local tag name ("hr", "cad")
        markup: Inner markup of a point's <extensions>

    Returns:
        Integer reading, or None when there is no match
    """
    if not markup:
        return None
    pattern = _SENSOR_PATTERNS.get(tag) or _compile_sensor_pattern(tag)
    match = pattern.search(markup)
    if match is None:
        return None
    return int(match.group(1))


def _qualified_name(qname: Any, nsmap: Dict[str, str]) -> Optional[str]:
    """Convert {namespace}tag back into prefix:tag using the document nsmap."""
    if not isinstance(qname, str):
        # comments and processing instructions
        return None
    if not qname.startswith("{"):
        return qname
    uri, _, local_name = qname[1:].partition("}")
    for prefix, namespace in nsmap.items():
        if namespace == uri:
            return f"{prefix}:{local_name}"
    return local_name


def _element_to_markup(element: Any, nsmap: Dict[str, str]) -> str:
    tail = escape(element.tail or "")
    name = _qualified_name(element.tag, nsmap)
    if name is None:
        return tail

    attrs = "".join(
        f" {_qualified_name(key, nsmap)}={quoteattr(value)}"
        for key, value in element.attrib.items()
    )
    children = "".join(_element_to_markup(child, nsmap) for child in element)
    text = escape(element.text or "")

    return f"<{name}{attrs}>{text}{children}</{name}>{tail}"


def extensions_to_markup(elements: Iterable[Any], nsmap: Dict[str, str]) -> str:
    """
    Rebuild the inner markup of an <extensions> block.

    Args:
        elements: Child elements of <extensions> as returned by gpxpy
        nsmap: Prefix -> namespace URI map of the document

    Returns:
        Markup text with the document's own namespace prefixes
    """
    return "".join(_element_to_markup(element, nsmap) for element in elements)


_TIME_ELEMENT = re.compile(r"<time>([^<]*)</time>")
_ELEMENT_PREFIX = re.compile(r"</?([A-Za-z_][\w.-]*):[A-Za-z_]")
_ATTRIBUTE_PREFIX = re.compile(r"\s([A-Za-z_][\w.-]*):[A-Za-z_][\w.-]*\s*=")
_DECLARED_PREFIX = re.compile(r"\sxmlns:([A-Za-z_][\w.-]*)\s*=")
_ROOT_START = re.compile(r"<gpx\b")
UNDECLARED_NAMESPACE = "urn:gpx-analyzer:undeclared:"


def _normalize_time(match: "re.Match[str]") -> str:
    value = parse_timestamp(match.group(1))
    if value is None:
        # dropped, so the point ends up without a time
        return ""
    stamp = value.replace(tzinfo=None).isoformat(timespec="microseconds")
    return f"<time>{stamp}Z</time>"


def normalize_times(text: str) -> str:
    """
    Rewrite every <time> element as canonical UTC before gpxpy reads it.

    Values are trimmed and must be offset-aware RFC 3339. Elements whose
    value does not qualify are removed, so gpxpy never guesses a zone
    for them.
    """
    return _TIME_ELEMENT.sub(_normalize_time, text)


def declare_missing_prefixes(text: str) -> str:
    """
    Declare namespace prefixes that are used but never bound.

    Some exporters write <ns3:hr> without an xmlns:ns3 declaration. A
    placeholder namespace is added on the root element so the document
    stays parseable and the prefix survives into the extension markup.
    """
    used = set(_ELEMENT_PREFIX.findall(text)) | set(_ATTRIBUTE_PREFIX.findall(text))
    missing = sorted(used - set(_DECLARED_PREFIX.findall(text)) - {"xml", "xmlns"})
    if not missing:
        return text

    logger.debug(f"Declaring unbound namespace prefixes: {', '.join(missing)}")
    declarations = "".join(
        f' xmlns:{prefix}="{UNDECLARED_NAMESPACE}{prefix}"' for prefix in missing
    )
    return _ROOT_START.sub(lambda m: m.group(0) + declarations, text, count=1)


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def parse(content: bytes) -> ParsedTrack:
        """
        Parse GPX content into the first track's name and points.

        Args:
            content: GPX file content as bytes

        Returns:
            ParsedTrack with at least two points

        Raises:
            MalformedGPXError: If the XML is invalid, there is no track,
                or the track has fewer than two points
        """
        gpx = GPXParserService._load(content)

        if not gpx.tracks:
            logger.warning("Rejected GPX upload: no track found")
            raise MalformedGPXError("no track found in GPX")

        track = gpx.tracks[0]
        name = (track.name or "").strip() or DEFAULT_TRACK_NAME

        points: List[TrackPoint] = []
        try:
            for segment in track.segments:
                for point in segment.points:
                    points.append(GPXParserService._to_track_point(point, gpx.nsmap))
        except ValidationError as e:
            logger.warning(f"Rejected GPX upload: invalid track point: {e}")
            raise MalformedGPXError(f"invalid track point: {e}") from e

        if len(points) < MIN_TRACK_POINTS:
            logger.warning(f"Rejected GPX upload: only {len(points)} track point(s)")
            raise MalformedGPXError(
                f"GPX must contain at least {MIN_TRACK_POINTS} track points"
            )

        logger.debug(f"Parsed GPX track '{name}' with {len(points)} points")
        return ParsedTrack(name=name, points=points)

    @staticmethod
    def _load(content: bytes) -> gpxpy.gpx.GPX:
        """Decode and parse the raw upload with gpxpy."""
        try:
            text = content.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            logger.warning(f"Rejected GPX upload: not UTF-8: {e}")
            raise MalformedGPXError(f"invalid GPX file: {e}") from e

        text = normalize_times(declare_missing_prefixes(text))

        try:
            return gpxpy.parse(text, version=GPX_SCHEMA_VERSION)
        except gpxpy.gpx.GPXXMLSyntaxException as e:
            logger.warning(f"Rejected GPX upload: {e}")
            raise MalformedGPXError(f"invalid GPX file: {e}") from e
        except gpxpy.gpx.GPXException as e:
            logger.warning(f"Rejected GPX upload: {e}")
            raise MalformedGPXError(f"invalid GPX data: {e}") from e

    @staticmethod
    def _to_track_point(
        point: gpxpy.gpx.GPXTrackPoint,
        nsmap: Dict[str, str]
    ) -> TrackPoint:
        """Map one gpxpy <trkpt> onto a TrackPoint."""
        markup = extensions_to_markup(point.extensions, nsmap)

        return TrackPoint(
            lat=point.latitude,
            lon=point.longitude,
            ele=point.elevation if point.elevation is not None else 0.0,
            # already canonical UTC or removed by normalize_times
            time=to_utc(point.time),
            hr=extract_sensor_value(SENSOR_TAG_HEART_RATE, markup),
            cadence=extract_sensor_value(SENSOR_TAG_CADENCE, markup),
        )
