"""Shared pytest fixtures for all test suites."""

import pytest

from itinerary_continuity.models import Itinerary, Location
from tests.builders import airport, dt, flight, hotel, itinerary, place


@pytest.fixture
def jfk() -> Location:
    return airport("JFK", "John F. Kennedy International Airport")


@pytest.fixture
def manhattan_hotel() -> Location:
    return place("Park Hyatt New York", city="Manhattan", country="US")


@pytest.fixture
def arrival_itinerary(jfk: Location, manhattan_hotel: Location) -> Itinerary:
    """Land at JFK at 16:30, check in at a Manhattan hotel at 18:00, no transfer."""
    return itinerary(
        flight(airport("SFO", "San Francisco International Airport"), jfk, dt(10, 8), dt(10, 16, 30)),
        hotel(manhattan_hotel, dt(10, 18), dt(13, 11)),
    )
