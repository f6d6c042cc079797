"""Decide whether two place references denote the same physical location.

Rules are evaluated in priority order and the first one that matches wins:

1. Code veto: when both sides carry a code, codes decide outright.
2. Normalized name equality or containment.
3. Fuzzy word overlap on significant tokens.
4. One side's street address equals the other's name.
5. Coordinates within COORDINATE_MATCH_METERS.
"""

import math
from typing import List, Optional

from rapidfuzz.distance import Levenshtein

from itinerary_continuity.config import (
    COORDINATE_MATCH_METERS,
    FUZZY_WORD_MIN_LENGTH,
    MAX_WORD_EDIT_DISTANCE,
    MIN_CONTAINMENT_LENGTH,
    WORD_OVERLAP_THRESHOLD,
)
from itinerary_continuity.models import Coordinates, Location
from itinerary_continuity.normalize.text import normalize_name, tokenize

EARTH_RADIUS_METERS = 6371e3

# Ignored when comparing words, but never block a match on their own
_STOP_WORDS = {
    "the", "at", "in", "on", "of", "and", "a", "an", "to", "for", "by",
    "resort", "hotel", "inn", "suites", "lodge", "airport", "international",
    "intl", "st", "ave", "blvd", "rd", "street", "avenue", "boulevard", "road",
    "drive", "lane", "way", "place", "collection", "luxury",
}


def is_same_location(a: Optional[Location], b: Optional[Location]) -> bool:
    if a is None or b is None or not a.is_usable() or not b.is_usable():
        return False

    # 1. Codes are authoritative (airports): differing codes never match
    code_a = (a.code or "").strip().upper()
    code_b = (b.code or "").strip().upper()
    if code_a and code_b:
        return code_a == code_b

    # 2. Normalized names
    name_a = normalize_name(a.name)
    name_b = normalize_name(b.name)
    if name_a and name_b:
        if name_a == name_b:
            return True
        shorter, longer = sorted((name_a, name_b), key=len)
        if len(shorter) >= MIN_CONTAINMENT_LENGTH and shorter in longer:
            return True

        # 3. "King George Hotel" ~ "George Hotel"
        if have_similar_words(name_a, name_b):
            return True

    # 4. Hotel name on one side, its street address on the other
    if is_address_match(a, b):
        return True

    # 5. Geographic proximity
    return are_coordinates_close(a, b)


def significant_words(normalized: str) -> List[str]:
    return [w for w in tokenize(normalized) if len(w) >= 3 and w not in _STOP_WORDS]


def have_similar_words(name_a: str, name_b: str) -> bool:
    """True when more than 70% of the smaller set of significant words match."""
    words_a = significant_words(normalize_name(name_a))
    words_b = significant_words(normalize_name(name_b))
    if not words_a or not words_b:
        return False

    matched = 0
    for word_a in words_a:
        if any(are_words_similar(word_a, word_b) for word_b in words_b):
            matched += 1

    overlap = matched / min(len(words_a), len(words_b))
    return overlap > WORD_OVERLAP_THRESHOLD


def are_words_similar(word_a: str, word_b: str) -> bool:
    if word_a == word_b:
        return True
    if word_a in word_b or word_b in word_a:
        return True
    if len(word_a) > FUZZY_WORD_MIN_LENGTH and len(word_b) > FUZZY_WORD_MIN_LENGTH:
        return Levenshtein.distance(word_a, word_b) <= MAX_WORD_EDIT_DISTANCE
    return False


def is_address_match(a: Location, b: Location) -> bool:
    for loc, other in ((a, b), (b, a)):
        street = loc.address.street if loc.address else ""
        if street and normalize_name(street) == normalize_name(other.name):
            return True
    return False


def haversine_meters(c1: Coordinates, c2: Coordinates) -> float:
    phi1 = math.radians(c1.lat)
    phi2 = math.radians(c2.lat)
    d_phi = math.radians(c2.lat - c1.lat)
    d_lambda = math.radians(c2.lon - c1.lon)

    h = (math.sin(d_phi / 2) ** 2
         + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2)
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def are_coordinates_close(a: Location, b: Location, max_meters: float = COORDINATE_MATCH_METERS) -> bool:
    if a.coordinates is None or b.coordinates is None:
        return False
    return haversine_meters(a.coordinates, b.coordinates) <= max_meters
