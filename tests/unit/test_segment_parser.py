"""Tests for draft ingestion: datetimes, locations and typed segments."""

from datetime import date, datetime, timedelta, timezone

from itinerary_continuity.assemble.review import review_itinerary
from itinerary_continuity.models import (
    FlightSegment,
    HotelSegment,
    IssueType,
    SegmentKind,
    SegmentSource,
    SegmentStatus,
    TransferSegment,
)
from itinerary_continuity.normalize.date_parser import parse_datetime
from itinerary_continuity.normalize.segment_parser import (
    itinerary_from_dict,
    location_from_dict,
    segment_from_dict,
)


def test_parse_datetime_formats() -> None:
    assert parse_datetime("2025-06-10T16:30:00") == datetime(2025, 6, 10, 16, 30)
    assert parse_datetime("2025-06-10T16:30:00Z") == datetime(2025, 6, 10, 16, 30)
    assert parse_datetime("2025-06-10T16:30:00+02:00") == datetime(2025, 6, 10, 16, 30)
    assert parse_datetime(datetime(2025, 6, 10, 9, tzinfo=timezone.utc)) == datetime(2025, 6, 10, 9)
    assert parse_datetime("10 June 2025 4:30pm") == datetime(2025, 6, 10, 16, 30)
    assert parse_datetime(date(2025, 6, 10)) == datetime(2025, 6, 10)

    moment = datetime(2025, 6, 10, 9)
    assert parse_datetime(moment) is moment


def test_parse_datetime_blank_or_garbage() -> None:
    assert parse_datetime(None) is None
    assert parse_datetime("") is None
    assert parse_datetime("unknown") is None
    assert parse_datetime("not a date at all") is None
    assert parse_datetime(42) is None


def test_location_from_dict() -> None:
    loc = location_from_dict({
        "name": "John F. Kennedy International Airport",
        "code": "jfk",
        "type": "airport",
        "address": {"city": "New York", "country": "US", "postalCode": "11430"},
        "coordinates": {"lat": "40.6413", "lng": -73.7781},
    })

    assert loc.code == "JFK"
    assert loc.location_type == "AIRPORT"
    assert loc.is_airport()
    assert loc.address.postal_code == "11430"
    assert loc.coordinates.lat == 40.6413
    assert loc.coordinates.lon == -73.7781


def test_location_from_dict_tolerates_bad_input() -> None:
    assert location_from_dict(None) is None
    assert location_from_dict("JFK") is None
    assert location_from_dict({"name": "Somewhere", "coordinates": {"lat": "north"}}).coordinates is None


def test_flight_from_dict() -> None:
    segment = segment_from_dict({
        "id": "seg_1",
        "type": "FLIGHT",
        "status": "confirmed",
        "startDatetime": "2025-06-10T08:00:00",
        "endDatetime": "2025-06-10T16:30:00",
        "origin": {"name": "SFO", "code": "SFO"},
        "destination": {"name": "JFK", "code": "JFK"},
        "flightNumber": "UA100",
        "airline": {"name": "United", "code": "UA"},
        "source": "agent",
        "sourceDetails": {"confidence": "0.8", "mode": "dream"},
    })

    assert isinstance(segment, FlightSegment)
    assert segment.id == "seg_1"
    assert segment.status == SegmentStatus.CONFIRMED
    assert segment.source == SegmentSource.AGENT
    assert segment.source_details.confidence == 0.8
    assert segment.airline == "United"
    assert segment.destination.code == "JFK"
    assert segment.end_datetime - segment.start_datetime == timedelta(hours=8, minutes=30)


def test_missing_end_defaults_to_start() -> None:
    segment = segment_from_dict({
        "type": "ACTIVITY",
        "startDatetime": "2025-06-10T19:00:00",
        "name": "Dinner",
        "location": {"name": "Le Jules Verne"},
    })

    assert segment.end_datetime == segment.start_datetime
    assert segment.id.startswith("seg_")
    assert segment.status == SegmentStatus.CONFIRMED
    assert segment.source == SegmentSource.IMPORT


def test_hotel_and_transfer_fields() -> None:
    stay = segment_from_dict({
        "type": "HOTEL",
        "startDatetime": "2025-06-10T15:00:00",
        "endDatetime": "2025-06-13T11:00:00",
        "location": {"name": "Park Hyatt New York"},
        "property": {"name": "Park Hyatt"},
        "checkIn": "2025-06-10T15:00:00",
    })
    ride = segment_from_dict({
        "type": "transfer",
        "startDatetime": "2025-06-10T17:00:00",
        "pickupLocation": {"name": "JFK", "code": "JFK"},
        "dropoffLocation": {"name": "Park Hyatt New York"},
        "transferType": "taxi",
    })

    assert isinstance(stay, HotelSegment)
    assert stay.property_name == "Park Hyatt"
    assert stay.check_in == datetime(2025, 6, 10, 15)
    assert stay.check_out is None
    assert isinstance(ride, TransferSegment)
    assert ride.transfer_type == "TAXI"
    assert ride.pickup_location.code == "JFK"


def test_bad_segments_return_none() -> None:
    assert segment_from_dict({"type": "CRUISE", "startDatetime": "2025-06-10T08:00:00"}) is None
    assert segment_from_dict({"type": "FLIGHT", "startDatetime": "whenever"}) is None
    assert segment_from_dict({"type": "FLIGHT"}) is None
    assert segment_from_dict(["FLIGHT"]) is None


def test_itinerary_from_dict_skips_bad_segments() -> None:
    trip = itinerary_from_dict({
        "id": "itin_1",
        "title": "New York",
        "segments": [
            {"type": "FLIGHT", "startDatetime": "2025-06-10T08:00:00"},
            {"type": "CRUISE", "startDatetime": "2025-06-11T08:00:00"},
            {"type": "HOTEL", "startDatetime": "2025-06-10T18:00:00"},
        ],
    })

    assert trip.id == "itin_1"
    assert trip.title == "New York"
    assert [s.kind.value for s in trip.segments] == ["FLIGHT", "HOTEL"]


def test_mixed_offsets_and_naive_times_review_cleanly() -> None:
    """Test that drafts mixing Z, offset and naive times sort and review."""
    trip = itinerary_from_dict({
        "segments": [
            {
                "type": "ACTIVITY",
                "startDatetime": "2025-06-10T20:00:00-04:00",
                "name": "Dinner",
                "location": {"name": "Park Hyatt New York"},
            },
            {
                "type": "HOTEL",
                "startDatetime": "2025-06-10T18:00:00",
                "endDatetime": "2025-06-13T11:00:00",
                "location": {"name": "Park Hyatt New York"},
            },
            {
                "type": "FLIGHT",
                "startDatetime": "2025-06-10T08:00:00Z",
                "endDatetime": "2025-06-10T16:30:00Z",
                "origin": {"name": "San Francisco International Airport", "code": "SFO"},
                "destination": {"name": "John F. Kennedy International Airport", "code": "JFK"},
            },
        ],
    })

    assert all(s.start_datetime.tzinfo is None for s in trip.segments)

    result = review_itinerary(trip)

    assert [i.type for i in result.issues] == [IssueType.MISSING_AIRPORT_TRANSFER, IssueType.OVERLAPPING_TIMES]
    assert result.issues[0].segment_indices == [0, 1]
    assert result.issues[0].suggested_fix.start_datetime == datetime(2025, 6, 10, 17)
    assert result.issues[0].suggested_fix.kind == SegmentKind.TRANSFER
