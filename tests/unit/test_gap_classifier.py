"""Tests for gap classification and confidence scoring."""

import pytest

from itinerary_continuity.assemble.gap_classifier import (
    CONFIDENCE_TABLE,
    SegmentPairing,
    classify_gap,
    classify_pairing,
    describe_gap,
    gap_confidence,
    suggest_segment_type,
)
from itinerary_continuity.models import GapType, SegmentKind
from tests.builders import activity, airport, dt, flight, hotel, place, transfer


@pytest.mark.parametrize(
    "end,start",
    [
        (place("Louvre", city="Paris", country="FR"), place("Palais des Papes", city="Avignon", country="France")),
        (airport("ATH"), airport("HER")),
        (place("Golden Gate Park", city="San Francisco", country="US"), airport("JFK")),
    ],
)
def test_same_country_is_never_international(end, start) -> None:
    """Test that a shared country never classifies as international."""
    assert classify_gap(end, start) != GapType.INTERNATIONAL_GAP


@pytest.mark.parametrize(
    "end,start",
    [
        (airport("JFK"), airport("LHR")),
        (place("Louvre", city="Paris", country="FR"), place("Big Ben", city="London", country="GB")),
        (place("Times Square", city="New York", country="United States"), airport("CDG")),
    ],
)
def test_different_known_countries_are_always_international(end, start) -> None:
    assert classify_gap(end, start) == GapType.INTERNATIONAL_GAP


def test_same_city_is_local() -> None:
    end = place("Louvre Museum", city="Paris", country="FR")
    start = place("Cafe de Flore", city="Paris", country="FR")

    assert classify_gap(end, start) == GapType.LOCAL_TRANSFER


def test_airports_in_the_same_city_are_local() -> None:
    assert classify_gap(airport("JFK"), airport("LGA")) == GapType.LOCAL_TRANSFER


def test_city_aliases_resolve_to_one_city() -> None:
    end = place("Park Hyatt", city="Manhattan", country="US")
    start = place("Barclays Center", city="Brooklyn", country="US")

    assert classify_gap(end, start) == GapType.LOCAL_TRANSFER


def test_unknown_country_falls_back_to_domestic() -> None:
    end = place("Somewhere", city="Springfield")
    start = place("Elsewhere", city="Shelbyville")

    assert classify_gap(end, start) == GapType.DOMESTIC_GAP


def test_suggested_segment_type() -> None:
    assert suggest_segment_type(GapType.LOCAL_TRANSFER) == SegmentKind.TRANSFER
    assert suggest_segment_type(GapType.DOMESTIC_GAP) == SegmentKind.FLIGHT
    assert suggest_segment_type(GapType.INTERNATIONAL_GAP) == SegmentKind.FLIGHT


def test_pairings() -> None:
    paris = place("Louvre", city="Paris")
    cdg = airport("CDG")
    fl = flight(airport("JFK"), cdg, dt(1, 8), dt(1, 20))
    to_airport = transfer(paris, cdg, dt(1, 5), dt(1, 6))
    stay = hotel(paris, dt(1, 22))
    visit = activity(paris, dt(2, 10))

    assert classify_pairing(to_airport, fl) == SegmentPairing.AIRPORT_TO_AIRPORT
    assert classify_pairing(fl, stay) == SegmentPairing.AIRPORT_TO_GROUND
    assert classify_pairing(stay, fl) == SegmentPairing.AIRPORT_TO_GROUND
    assert classify_pairing(stay, hotel(paris, dt(3, 15))) == SegmentPairing.HOTEL_TO_HOTEL
    assert classify_pairing(visit, stay) == SegmentPairing.HOTEL_TO_ACTIVITY
    assert classify_pairing(visit, activity(paris, dt(2, 14))) == SegmentPairing.ACTIVITY_TO_ACTIVITY


def test_confidence_table_covers_every_pairing_and_gap_type() -> None:
    for pairing in SegmentPairing:
        for gap_type in GapType:
            assert (pairing, gap_type) in CONFIDENCE_TABLE


def test_activity_confidence_depends_on_distance() -> None:
    """Test that cross-city activity hops score below same-city ones."""
    a = activity(place("Louvre", city="Paris"), dt(1, 10))
    b = activity(place("Musee d'Orsay", city="Paris"), dt(1, 14))

    assert gap_confidence(GapType.LOCAL_TRANSFER, a, b) == 80
    assert gap_confidence(GapType.DOMESTIC_GAP, a, b) == 60


def test_describe_gap_names_both_ends() -> None:
    text = describe_gap(airport("JFK", "JFK Airport"), place("Park Hyatt", city="New York"), GapType.LOCAL_TRANSFER)

    assert text == "Local transfer needed from JFK Airport (JFK) to Park Hyatt, New York"
