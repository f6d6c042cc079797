"""Classify the relationship between two adjacent segments' locations and
score how likely the discontinuity is a genuinely missing segment."""

from enum import Enum
from typing import Dict, Optional, Tuple

from itinerary_continuity.assemble.segment_locations import GROUND_KINDS, is_airport_segment
from itinerary_continuity.config import DEFAULT_GAP_CONFIDENCE
from itinerary_continuity.models import GapType, Location, Segment, SegmentKind
from itinerary_continuity.normalize.airports import iata_to_city, iata_to_country
from itinerary_continuity.normalize.city_resolver import normalize_country, resolve_city
from itinerary_continuity.normalize.text import normalize_name


class SegmentPairing(str, Enum):
    AIRPORT_TO_AIRPORT = "AIRPORT_TO_AIRPORT"
    AIRPORT_TO_GROUND = "AIRPORT_TO_GROUND"  # either direction
    HOTEL_TO_HOTEL = "HOTEL_TO_HOTEL"
    HOTEL_TO_ACTIVITY = "HOTEL_TO_ACTIVITY"  # either direction
    ACTIVITY_TO_ACTIVITY = "ACTIVITY_TO_ACTIVITY"


LOCAL = GapType.LOCAL_TRANSFER
DOMESTIC = GapType.DOMESTIC_GAP
INTERNATIONAL = GapType.INTERNATIONAL_GAP

# Tunable false-positive policy. Pairs missing here score DEFAULT_GAP_CONFIDENCE.
CONFIDENCE_TABLE: Dict[Tuple[SegmentPairing, GapType], int] = {
    (SegmentPairing.AIRPORT_TO_AIRPORT, LOCAL): 80,
    (SegmentPairing.AIRPORT_TO_AIRPORT, DOMESTIC): 95,
    (SegmentPairing.AIRPORT_TO_AIRPORT, INTERNATIONAL): 95,
    (SegmentPairing.AIRPORT_TO_GROUND, LOCAL): 95,
    (SegmentPairing.AIRPORT_TO_GROUND, DOMESTIC): 95,
    (SegmentPairing.AIRPORT_TO_GROUND, INTERNATIONAL): 95,
    (SegmentPairing.HOTEL_TO_HOTEL, LOCAL): 80,
    (SegmentPairing.HOTEL_TO_HOTEL, DOMESTIC): 90,
    (SegmentPairing.HOTEL_TO_HOTEL, INTERNATIONAL): 90,
    (SegmentPairing.HOTEL_TO_ACTIVITY, LOCAL): 85,
    (SegmentPairing.HOTEL_TO_ACTIVITY, DOMESTIC): 85,
    (SegmentPairing.HOTEL_TO_ACTIVITY, INTERNATIONAL): 85,
    (SegmentPairing.ACTIVITY_TO_ACTIVITY, LOCAL): 80,
    (SegmentPairing.ACTIVITY_TO_ACTIVITY, DOMESTIC): 60,
    (SegmentPairing.ACTIVITY_TO_ACTIVITY, INTERNATIONAL): 60,
}


# ---------------------------------------------------------------------------
# Geographic classification
# ---------------------------------------------------------------------------

def resolve_country(location: Location) -> str:
    """ISO country from the address, else from the airport code, else ""."""
    if location.address and location.address.country:
        return normalize_country(location.address.country)
    return iata_to_country(location.code) or ""


def resolve_city_key(location: Location) -> str:
    """Comparable city key: address city, airport city, or the name itself."""
    city = ""
    if location.address and location.address.city:
        city = resolve_city(location.address.city) or location.address.city
    if not city and location.code:
        city = iata_to_city(location.code) or ""
    if not city and location.name:
        city = resolve_city(location.name) or location.name
    return normalize_name(city)


def classify_gap(end: Location, start: Location) -> GapType:
    """Classify the move from `end` (previous segment) to `start` (next one).

    Unknown countries never produce INTERNATIONAL_GAP; a known country on
    both sides that differs always does, whatever the cities say.
    """
    end_country = resolve_country(end)
    start_country = resolve_country(start)
    if end_country and start_country and end_country != start_country:
        return INTERNATIONAL

    end_code = (end.code or "").strip().upper()
    start_code = (start.code or "").strip().upper()
    if end_code and start_code and end_code == start_code:
        return LOCAL

    end_city = resolve_city_key(end)
    start_city = resolve_city_key(start)
    if end_city and end_city == start_city:
        return LOCAL
    return DOMESTIC


def suggest_segment_type(gap_type: GapType) -> SegmentKind:
    if gap_type == LOCAL:
        return SegmentKind.TRANSFER
    return SegmentKind.FLIGHT


# ---------------------------------------------------------------------------
# Confidence scoring
# ---------------------------------------------------------------------------

def classify_pairing(before: Segment, after: Segment) -> SegmentPairing:
    before_airport = is_airport_segment(before)
    after_airport = is_airport_segment(after)
    before_hotel = before.kind == SegmentKind.HOTEL
    after_hotel = after.kind == SegmentKind.HOTEL

    if before_airport and after_airport:
        return SegmentPairing.AIRPORT_TO_AIRPORT
    if (before_airport and after.kind in GROUND_KINDS) or (after_airport and before.kind in GROUND_KINDS):
        return SegmentPairing.AIRPORT_TO_GROUND
    if before_hotel and after_hotel:
        return SegmentPairing.HOTEL_TO_HOTEL
    if (before_hotel and not after_airport) or (after_hotel and not before_airport):
        return SegmentPairing.HOTEL_TO_ACTIVITY
    return SegmentPairing.ACTIVITY_TO_ACTIVITY


def gap_confidence(gap_type: GapType, before: Segment, after: Segment) -> int:
    return CONFIDENCE_TABLE.get((classify_pairing(before, after), gap_type), DEFAULT_GAP_CONFIDENCE)


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

def display_name(location: Optional[Location]) -> str:
    if location is None:
        return "unknown location"
    name = location.name or location.code
    if location.code and location.code != name:
        return f"{name} ({location.code})"
    if location.address and location.address.city:
        return f"{name}, {location.address.city}"
    return name


_DESCRIPTIONS = {
    LOCAL: "Local transfer needed from {end} to {start}",
    DOMESTIC: "Domestic transportation needed from {end} to {start}",
    INTERNATIONAL: "International flight needed from {end} to {start}",
}


def describe_gap(end: Location, start: Location, gap_type: GapType) -> str:
    return _DESCRIPTIONS[gap_type].format(end=display_name(end), start=display_name(start))
