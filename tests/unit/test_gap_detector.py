"""Tests for location gap detection."""

from itinerary_continuity.assemble.gap_detector import detect_location_gaps, is_overnight_gap
from itinerary_continuity.models import GapType, Location, SegmentKind
from tests.builders import activity, airport, dt, flight, hotel, meeting, place, transfer


def test_connected_flight_transfer_hotel_has_no_gaps(jfk, manhattan_hotel) -> None:
    """Test that a transfer already bridging airport and hotel leaves nothing to fill."""
    segments = [
        flight(airport("SFO"), jfk, dt(10, 8), dt(10, 16, 30)),
        transfer(jfk, manhattan_hotel, dt(10, 17), dt(10, 17, 45)),
        hotel(manhattan_hotel, dt(10, 18), dt(13, 11)),
    ]

    assert detect_location_gaps(segments) == []


def test_flight_into_hotel_without_transfer_is_a_gap(jfk, manhattan_hotel) -> None:
    segments = [
        flight(airport("SFO"), jfk, dt(10, 8), dt(10, 16, 30)),
        hotel(manhattan_hotel, dt(10, 18), dt(13, 11)),
    ]

    gaps = detect_location_gaps(segments)

    assert len(gaps) == 1
    gap = gaps[0]
    assert (gap.before_index, gap.after_index) == (0, 1)
    assert gap.gap_type == GapType.LOCAL_TRANSFER
    assert gap.suggested_type == SegmentKind.TRANSFER
    assert gap.confidence == 95
    assert gap.end_location.code == "JFK"
    assert gap.start_location.name == "Park Hyatt New York"


def test_hotel_to_hotel_in_another_country_needs_a_flight() -> None:
    segments = [
        hotel(place("Hotel Grande Bretagne", city="Athens", country="GR"), dt(1, 15), dt(4, 11)),
        hotel(place("Hotel Danieli", city="Venice", country="IT"), dt(4, 18), dt(7, 11)),
    ]

    gaps = detect_location_gaps(segments)

    assert len(gaps) == 1
    assert gaps[0].gap_type == GapType.INTERNATIONAL_GAP
    assert gaps[0].suggested_type == SegmentKind.FLIGHT
    assert gaps[0].confidence == 90


def test_same_city_activities_are_reported() -> None:
    """Test that a same-city activity hop (confidence 80) meets the threshold."""
    segments = [
        activity(place("Louvre Museum", city="Paris", country="FR"), dt(1, 10), dt(1, 12)),
        activity(place("Cafe de Flore", city="Paris", country="FR"), dt(1, 13), name="Lunch"),
    ]

    gaps = detect_location_gaps(segments)

    assert len(gaps) == 1
    assert gaps[0].confidence == 80


def test_cross_city_activities_fall_below_threshold() -> None:
    """Test that a cross-city activity hop (confidence 60) is dropped."""
    segments = [
        activity(place("Louvre Museum", city="Paris", country="FR"), dt(1, 10), dt(1, 12)),
        activity(place("Bouchon Daniel et Denise", city="Lyon", country="FR"), dt(1, 16), name="Tasting"),
    ]

    assert detect_location_gaps(segments) == []


def test_dinner_then_lunch_next_day_is_overnight() -> None:
    """Test that a 7 PM dinner followed by lunch elsewhere at noon is skipped."""
    segments = [
        activity(place("Le Jules Verne", city="Paris", country="FR"), dt(1, 19), name="Dinner at Le Jules Verne"),
        activity(place("Cafe de Flore", city="Paris", country="FR"), dt(2, 12), name="Lunch"),
    ]

    assert detect_location_gaps(segments) == []


def test_hotel_moves_are_reported_across_nights() -> None:
    """Test that overnight suppression never hides a change of hotel."""
    segments = [
        activity(place("Acropolis", city="Athens", country="GR"), dt(1, 19), dt(1, 21)),
        hotel(place("Hotel Danieli", city="Venice", country="IT"), dt(2, 12), dt(4, 11)),
    ]

    gaps = detect_location_gaps(segments)

    assert len(gaps) == 1
    assert gaps[0].gap_type == GapType.INTERNATIONAL_GAP


def test_missing_locations_are_skipped() -> None:
    segments = [
        meeting(Location(name=""), dt(1, 9), title="Standup"),
        meeting(place("Acme HQ", city="Boston"), dt(1, 11), title="Review"),
    ]

    assert detect_location_gaps(segments) == []


def test_detection_is_pure_and_repeatable(jfk, manhattan_hotel) -> None:
    segments = [
        flight(airport("SFO"), jfk, dt(10, 8), dt(10, 16, 30)),
        hotel(manhattan_hotel, dt(10, 18), dt(13, 11)),
    ]
    before = list(segments)

    first = detect_location_gaps(segments)
    second = detect_location_gaps(segments)

    assert segments == before
    assert [(g.before_index, g.gap_type, g.confidence) for g in first] == [
        (g.before_index, g.gap_type, g.confidence) for g in second
    ]


def test_is_overnight_gap() -> None:
    assert is_overnight_gap(dt(1, 21), dt(2, 12))  # long wait
    assert is_overnight_gap(dt(1, 23), dt(2, 6))  # evening to next morning
    assert not is_overnight_gap(dt(1, 12), dt(1, 14))
    assert not is_overnight_gap(dt(1, 17), dt(2, 0, 30))  # ends before evening
