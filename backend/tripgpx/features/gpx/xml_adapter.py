"""
XML to GPX structure adapter.

Turns GPX text into a loose tree (one dict per GPX element the engine
reads, attributes under "@_" keys, repeated children as lists) and then
resolves that tree into typed raw records. Only this module knows about
the loose shape; everything downstream works on GpxDocument.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from .exceptions import InvalidDocument

logger = logging.getLogger(__name__)

ATTRIBUTE_PREFIX = "@_"
TEXT_KEY = "#text"
ROOT_TAG = "gpx"

# Elements the typed document is built from
READ_TAGS = frozenset({
    "wpt", "trk", "trkseg", "trkpt", "rte", "rtept",
    "name", "ele", "time",
})


# =============================================================================
# Raw records
# =============================================================================

@dataclass(frozen=True)
class RawPoint:
    """A <wpt>, <trkpt> or <rtept> before validation. Values are raw text."""
    lat: Optional[str] = None
    lon: Optional[str] = None
    ele: Optional[str] = None
    time: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class RawSegment:
    """A <trkseg>."""
    points: Tuple[RawPoint, ...] = ()


@dataclass(frozen=True)
class RawTrack:
    """A <trk>."""
    name: Optional[str] = None
    segments: Tuple[RawSegment, ...] = ()


@dataclass(frozen=True)
class RawRoute:
    """A <rte>."""
    name: Optional[str] = None
    points: Tuple[RawPoint, ...] = ()


@dataclass(frozen=True)
class GpxDocument:
    """Top-level content of a <gpx> element."""
    waypoints: Tuple[RawPoint, ...] = ()
    tracks: Tuple[RawTrack, ...] = ()
    routes: Tuple[RawRoute, ...] = ()


# =============================================================================
# Loose tree
# =============================================================================

def normalize_to_array(value: Any) -> List[Any]:
    """
    Erase the single-vs-repeated ambiguity of the loose tree.

    None gives [], a list passes through, anything else is wrapped.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _local_name(tag: str) -> str:
    # "{http://www.topografix.com/GPX/1/1}trkpt" -> "trkpt"
    return tag.rsplit("}", 1)[-1]


def _element_to_node(root: Element) -> Any:
    """
    Convert an element and its read children into a loose node.

    Walks with an explicit stack so nesting depth is bounded only by
    memory. Children outside READ_TAGS (e.g. <extensions>) are skipped.
    """
    nodes: Dict[int, Any] = {}
    stack: List[Tuple[Element, bool]] = [(root, False)]

    while stack:
        element, expanded = stack.pop()
        children = [child for child in element if _local_name(child.tag) in READ_TAGS]

        if not expanded:
            stack.append((element, True))
            stack.extend((child, False) for child in reversed(children))
            continue

        node: Dict[str, Any] = {}
        for name, value in element.attrib.items():
            node[ATTRIBUTE_PREFIX + _local_name(name)] = value.strip()

        for child in children:
            key = _local_name(child.tag)
            value = nodes.pop(id(child))
            if key not in node:
                node[key] = value
            elif isinstance(node[key], list):
                node[key].append(value)
            else:
                node[key] = [node[key], value]

        text = (element.text or "").strip()
        if not node:
            nodes[id(element)] = text
        else:
            if text:
                node[TEXT_KEY] = text
            nodes[id(element)] = node

    return nodes[id(root)]


def load_tree(text: str) -> Dict[str, Any]:
    """
    Parse XML text into a loose tree keyed by the root element name.

    Raises:
        InvalidDocument: If the text is not well-formed XML
    """
    try:
        root = ET.fromstring(text.lstrip("\ufeff"))
    except (ParseError, DefusedXmlException) as e:
        raise InvalidDocument(f"Invalid GPX file: {e}") from e

    return {_local_name(root.tag): _element_to_node(root)}


# =============================================================================
# Typed document
# =============================================================================

def _as_element(node: Any) -> Dict[str, Any]:
    # Empty elements like <trkseg/> come through as ""
    return node if isinstance(node, dict) else {}


def _text(node: Any) -> Optional[str]:
    if isinstance(node, list):
        node = node[0] if node else None
    if isinstance(node, dict):
        node = node.get(TEXT_KEY)
    if node is None or node == "":
        return None
    return str(node)


def _raw_point(node: Any) -> RawPoint:
    element = _as_element(node)
    return RawPoint(
        lat=element.get(ATTRIBUTE_PREFIX + "lat"),
        lon=element.get(ATTRIBUTE_PREFIX + "lon"),
        ele=_text(element.get("ele")),
        time=_text(element.get("time")),
        name=_text(element.get("name")),
    )


def _raw_points(node: Any, key: str) -> Tuple[RawPoint, ...]:
    return tuple(
        _raw_point(point)
        for point in normalize_to_array(_as_element(node).get(key))
    )


def build_document(gpx: Any) -> GpxDocument:
    """Resolve the loose <gpx> node into a GpxDocument."""
    root = _as_element(gpx)

    tracks = tuple(
        RawTrack(
            name=_text(_as_element(track).get("name")),
            segments=tuple(
                RawSegment(points=_raw_points(segment, "trkpt"))
                for segment in normalize_to_array(_as_element(track).get("trkseg"))
            ),
        )
        for track in normalize_to_array(root.get("trk"))
    )

    routes = tuple(
        RawRoute(
            name=_text(_as_element(route).get("name")),
            points=_raw_points(route, "rtept"),
        )
        for route in normalize_to_array(root.get("rte"))
    )

    return GpxDocument(
        waypoints=_raw_points(root, "wpt"),
        tracks=tracks,
        routes=routes,
    )


def parse_document(text: str) -> GpxDocument:
    """
    Parse GPX text into a GpxDocument.

    Raises:
        InvalidDocument: If the text is not XML or the root is not <gpx>
    """
    tree = load_tree(text)

    if ROOT_TAG not in tree:
        root_tag = next(iter(tree))
        logger.warning(f"Rejected document with root <{root_tag}>")
        raise InvalidDocument(f"Invalid GPX file: root element is <{root_tag}>, expected <gpx>")

    return build_document(tree[ROOT_TAG])
