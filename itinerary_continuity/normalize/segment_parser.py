"""Convert upstream JSON-shaped drafts (camelCase keys) into typed segments."""

from typing import Callable, Dict, Optional

from itinerary_continuity.models import (
    Address,
    Coordinates,
    Itinerary,
    Location,
    SEGMENT_TYPES,
    Segment,
    SegmentKind,
    SegmentSource,
    SegmentStatus,
    SourceDetails,
    new_segment_id,
)
from itinerary_continuity.normalize.date_parser import parse_datetime


def _str(raw: Dict, key: str) -> str:
    value = raw.get(key)
    return str(value).strip() if value is not None else ""


def _enum(enum_cls, value, default):
    if value is None:
        return default
    for candidate in (value, str(value).upper(), str(value).lower()):
        try:
            return enum_cls(candidate)
        except ValueError:
            continue
    return default


def _coordinates(raw) -> Optional[Coordinates]:
    if not isinstance(raw, dict):
        return None
    lat = raw.get("lat", raw.get("latitude"))
    lon = raw.get("lon", raw.get("lng", raw.get("longitude")))
    try:
        return Coordinates(lat=float(lat), lon=float(lon))
    except (TypeError, ValueError):
        return None


def _address(raw) -> Optional[Address]:
    if not isinstance(raw, dict):
        return None
    return Address(
        street=_str(raw, "street"),
        city=_str(raw, "city"),
        state=_str(raw, "state"),
        postal_code=_str(raw, "postalCode"),
        country=_str(raw, "country"),
    )


def _named(raw) -> str:
    """Plain string, or the `name` of an object like {"name": "Delta", "code": "DL"}."""
    if isinstance(raw, dict):
        return _str(raw, "name")
    return str(raw).strip() if raw is not None else ""


def location_from_dict(raw) -> Optional[Location]:
    if not isinstance(raw, dict):
        return None
    return Location(
        name=_str(raw, "name"),
        code=_str(raw, "code").upper(),
        address=_address(raw.get("address")),
        coordinates=_coordinates(raw.get("coordinates")),
        location_type=_str(raw, "type").upper(),
    )


def _source_details(raw) -> Optional[SourceDetails]:
    if not isinstance(raw, dict):
        return None
    confidence = raw.get("confidence")
    try:
        confidence = float(confidence) if confidence is not None else None
    except (TypeError, ValueError):
        confidence = None
    return SourceDetails(
        confidence=confidence,
        mode=_str(raw, "mode"),
        model=_str(raw, "model"),
        timestamp=parse_datetime(raw.get("timestamp")),
    )


# Per-kind fields beyond the shared base
_KIND_FIELDS: Dict[SegmentKind, Callable[[Dict], Dict]] = {
    SegmentKind.FLIGHT: lambda r: dict(
        origin=location_from_dict(r.get("origin")),
        destination=location_from_dict(r.get("destination")),
        flight_number=_str(r, "flightNumber"),
        airline=_named(r.get("airline")),
    ),
    SegmentKind.HOTEL: lambda r: dict(
        location=location_from_dict(r.get("location")),
        check_in=parse_datetime(r.get("checkIn")),
        check_out=parse_datetime(r.get("checkOut")),
        property_name=_str(r, "propertyName") or _named(r.get("property")),
    ),
    SegmentKind.ACTIVITY: lambda r: dict(
        location=location_from_dict(r.get("location")),
        name=_str(r, "name"),
        description=_str(r, "description"),
        category=_str(r, "category"),
    ),
    SegmentKind.MEETING: lambda r: dict(
        location=location_from_dict(r.get("location")),
        title=_str(r, "title"),
        agenda=_str(r, "agenda"),
    ),
    SegmentKind.TRANSFER: lambda r: dict(
        pickup_location=location_from_dict(r.get("pickupLocation")),
        dropoff_location=location_from_dict(r.get("dropoffLocation")),
        transfer_type=_str(r, "transferType").upper() or "PRIVATE",
    ),
    SegmentKind.CUSTOM: lambda r: dict(
        location=location_from_dict(r.get("location")),
        title=_str(r, "title"),
    ),
}


def segment_from_dict(raw) -> Optional[Segment]:
    """Build a typed segment, or None for an unknown type or missing start.

    A missing end defaults to the start (no explicit end).
    """
    if not isinstance(raw, dict):
        return None

    kind = _enum(SegmentKind, raw.get("type"), None)
    if kind is None:
        return None

    start = parse_datetime(raw.get("startDatetime"))
    if start is None:
        return None
    end = parse_datetime(raw.get("endDatetime")) or start

    traveler_ids = raw.get("travelerIds") or []
    metadata = raw.get("metadata") or {}

    return SEGMENT_TYPES[kind](
        id=_str(raw, "id") or new_segment_id(),
        start_datetime=start,
        end_datetime=end,
        status=_enum(SegmentStatus, raw.get("status"), SegmentStatus.CONFIRMED),
        traveler_ids=[str(t) for t in traveler_ids] if isinstance(traveler_ids, list) else [],
        source=_enum(SegmentSource, raw.get("source"), SegmentSource.IMPORT),
        source_details=_source_details(raw.get("sourceDetails")),
        metadata=dict(metadata) if isinstance(metadata, dict) else {},
        notes=_str(raw, "notes"),
        inferred=bool(raw.get("inferred", False)),
        inferred_reason=_str(raw, "inferredReason"),
        **_KIND_FIELDS[kind](raw),
    )


def itinerary_from_dict(raw: Dict) -> Itinerary:
    """Build an itinerary, skipping segments that cannot be parsed."""
    segments = []
    for seg_raw in raw.get("segments") or []:
        segment = segment_from_dict(seg_raw)
        if segment is not None:
            segments.append(segment)

    metadata = raw.get("metadata") or {}
    return Itinerary(
        id=_str(raw, "id"),
        title=_str(raw, "title"),
        segments=segments,
        metadata=dict(metadata) if isinstance(metadata, dict) else {},
    )
