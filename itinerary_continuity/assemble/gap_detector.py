"""Detect location gaps between consecutive segments of a sorted itinerary."""

from datetime import datetime
from typing import List

from itinerary_continuity.assemble.duration import get_effective_end_time
from itinerary_continuity.assemble.gap_classifier import (
    classify_gap,
    describe_gap,
    gap_confidence,
    suggest_segment_type,
)
from itinerary_continuity.assemble.location_matcher import is_same_location
from itinerary_continuity.assemble.segment_locations import (
    get_end_location,
    get_start_location,
    is_airport_segment,
)
from itinerary_continuity.config import (
    GAP_CONFIDENCE_THRESHOLD,
    LONG_GAP_HOURS,
    OVERNIGHT_EVENING_HOUR,
    OVERNIGHT_MORNING_HOUR,
)
from itinerary_continuity.models import Gap, Segment, SegmentKind


def is_overnight_gap(end_time: datetime, next_start: datetime) -> bool:
    """True when travelers have most likely gone back to their base in between.

    Either the wait is longer than LONG_GAP_HOURS, or the earlier segment
    ends in the evening and the next one starts the following morning or
    early afternoon (dinner at 9 PM, lunch at noon the next day).
    """
    hours = (next_start - end_time).total_seconds() / 3600
    if hours > LONG_GAP_HOURS:
        return True

    if end_time.date() != next_start.date():
        if end_time.hour >= OVERNIGHT_EVENING_HOUR and next_start.hour <= OVERNIGHT_MORNING_HOUR:
            return True

    return False


def _is_travel_transition(current: Segment, nxt: Segment) -> bool:
    """Hotel changes and airport legs are real travel even across nights."""
    if current.kind == SegmentKind.HOTEL or nxt.kind == SegmentKind.HOTEL:
        return True
    return is_airport_segment(current) or is_airport_segment(nxt)


def detect_location_gaps(segments: List[Segment]) -> List[Gap]:
    """Detect gaps between consecutive segments.

    Expects segments already sorted chronologically. Only gaps scoring at
    least GAP_CONFIDENCE_THRESHOLD are returned, in sequence order, with
    indices into `segments`.
    """
    gaps: List[Gap] = []

    for i in range(len(segments) - 1):
        current = segments[i]
        nxt = segments[i + 1]

        end_location = get_end_location(current)
        start_location = get_start_location(nxt)
        if end_location is None or start_location is None:
            continue

        if is_same_location(end_location, start_location):
            continue

        if not _is_travel_transition(current, nxt):
            if is_overnight_gap(get_effective_end_time(current), nxt.start_datetime):
                continue

        gap_type = classify_gap(end_location, start_location)
        confidence = gap_confidence(gap_type, current, nxt)
        if confidence < GAP_CONFIDENCE_THRESHOLD:
            continue

        gaps.append(Gap(
            before_index=i,
            after_index=i + 1,
            before_segment=current,
            after_segment=nxt,
            end_location=end_location,
            start_location=start_location,
            gap_type=gap_type,
            suggested_type=suggest_segment_type(gap_type),
            confidence=confidence,
            description=describe_gap(end_location, start_location, gap_type),
        ))

    return gaps
