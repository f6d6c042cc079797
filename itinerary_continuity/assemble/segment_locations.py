"""Where each kind of segment starts and ends."""

from typing import Callable, Dict, List, Optional

from itinerary_continuity.assemble.location_matcher import is_same_location
from itinerary_continuity.models import Location, Segment, SegmentKind

# Every SegmentKind must appear in both tables
_START_LOCATION: Dict[SegmentKind, Callable[[Segment], Optional[Location]]] = {
    SegmentKind.FLIGHT: lambda s: s.origin,
    SegmentKind.TRANSFER: lambda s: s.pickup_location,
    SegmentKind.HOTEL: lambda s: s.location,
    SegmentKind.ACTIVITY: lambda s: s.location,
    SegmentKind.MEETING: lambda s: s.location,
    SegmentKind.CUSTOM: lambda s: s.location,
}

_END_LOCATION: Dict[SegmentKind, Callable[[Segment], Optional[Location]]] = {
    SegmentKind.FLIGHT: lambda s: s.destination,
    SegmentKind.TRANSFER: lambda s: s.dropoff_location,
    # Stays end where they start
    SegmentKind.HOTEL: lambda s: s.location,
    SegmentKind.ACTIVITY: lambda s: s.location,
    SegmentKind.MEETING: lambda s: s.location,
    SegmentKind.CUSTOM: lambda s: s.location,
}

CONNECTOR_KINDS = (SegmentKind.FLIGHT, SegmentKind.TRANSFER)
GROUND_KINDS = (SegmentKind.HOTEL, SegmentKind.ACTIVITY, SegmentKind.MEETING)


def _usable(location: Optional[Location]) -> Optional[Location]:
    if location is None or not location.is_usable():
        return None
    return location


def get_start_location(segment: Segment) -> Optional[Location]:
    return _usable(_START_LOCATION[segment.kind](segment))


def get_end_location(segment: Segment) -> Optional[Location]:
    return _usable(_END_LOCATION[segment.kind](segment))


def is_connector(segment: Segment) -> bool:
    """FLIGHT and TRANSFER segments move travelers between two places."""
    return segment.kind in CONNECTOR_KINDS


def is_airport_segment(segment: Segment) -> bool:
    if segment.kind == SegmentKind.FLIGHT:
        return True
    if segment.kind == SegmentKind.TRANSFER:
        pickup = segment.pickup_location
        dropoff = segment.dropoff_location
        return bool((pickup and pickup.is_airport()) or (dropoff and dropoff.is_airport()))
    return False


def find_bridge(segments: List[Segment], start: Optional[Location], end: Optional[Location]) -> Optional[Segment]:
    """First flight/transfer already moving travelers from `start` to `end`."""
    if start is None or end is None:
        return None
    for segment in segments:
        if not is_connector(segment):
            continue
        if is_same_location(get_start_location(segment), start) and is_same_location(get_end_location(segment), end):
            return segment
    return None
