"""Semantic review of an itinerary: missing airport transfers and overlaps,
plus auto-fixing of the HIGH severity findings."""

import copy
import dataclasses
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from itinerary_continuity.assemble.continuity import sort_segments
from itinerary_continuity.assemble.duration import get_effective_end_time
from itinerary_continuity.assemble.gap_classifier import display_name
from itinerary_continuity.assemble.location_matcher import is_same_location
from itinerary_continuity.assemble.segment_locations import (
    find_bridge,
    get_end_location,
    get_start_location,
    is_connector,
)
from itinerary_continuity.config import (
    ARRIVAL_BUFFER_MINUTES,
    AUTO_FIX_CONFIDENCE,
    DEPARTURE_LEAD_HOURS,
    TRANSFER_MAX_MINUTES,
    TRANSFER_MIN_MINUTES,
)
from itinerary_continuity.models import (
    Issue,
    IssueSeverity,
    IssueType,
    Itinerary,
    Location,
    ReviewResult,
    Segment,
    SegmentKind,
    SegmentSource,
    SegmentStatus,
    SourceDetails,
    TransferSegment,
    new_segment_id,
)


# ---------------------------------------------------------------------------
# Suggested transfers
# ---------------------------------------------------------------------------

def _draft_transfer(start: datetime, end: datetime, pickup: Location, dropoff: Location) -> TransferSegment:
    return TransferSegment(
        id="",
        start_datetime=start,
        end_datetime=end,
        status=SegmentStatus.TENTATIVE,
        source=SegmentSource.AGENT,
        source_details=SourceDetails(confidence=AUTO_FIX_CONFIDENCE, mode="dream"),
        pickup_location=copy.deepcopy(pickup),
        dropoff_location=copy.deepcopy(dropoff),
        notes="Auto-generated transfer for airport connection",
        inferred=True,
        inferred_reason=f"Semantic review detected missing transfer between {pickup.name or pickup.code} and {dropoff.name or dropoff.code}",
    )


def _arrival_window(arrival: datetime, next_start: datetime) -> Tuple[datetime, datetime]:
    """Leave the airport after baggage/customs, 30-60 min on the road.

    On a tight connection the buffer is dropped first, then the ride is
    shortened, so the transfer never runs past `next_start` when the flight
    lands before it.
    """
    buffer = timedelta(minutes=ARRIVAL_BUFFER_MINUTES)
    shortest = timedelta(minutes=TRANSFER_MIN_MINUTES)
    start = arrival + buffer
    if start + shortest > next_start:
        start = max(arrival, next_start - shortest)

    available = next_start - buffer - start
    duration = max(shortest, min(available, timedelta(minutes=TRANSFER_MAX_MINUTES)))
    end = start + duration
    if start < next_start:
        end = min(end, next_start)
    return start, end


def _departure_window(previous_end: datetime, departure: datetime) -> Tuple[datetime, datetime]:
    """Reach the airport well ahead of the flight."""
    start = departure - timedelta(hours=DEPARTURE_LEAD_HOURS)
    if start < previous_end < departure:
        start = previous_end
    end = min(start + timedelta(minutes=TRANSFER_MAX_MINUTES), departure)
    return start, end


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def check_flight_arrivals(segments: List[Segment]) -> List[Issue]:
    """A landing followed by something elsewhere needs a transfer in between."""
    issues: List[Issue] = []

    for i in range(len(segments) - 1):
        flight = segments[i]
        nxt = segments[i + 1]
        if flight.kind != SegmentKind.FLIGHT or nxt.kind == SegmentKind.TRANSFER:
            continue

        airport = get_end_location(flight)
        next_location = get_start_location(nxt)
        if airport is None or next_location is None or not airport.is_airport():
            continue
        if is_same_location(airport, next_location):
            continue

        start, end = _arrival_window(get_effective_end_time(flight), nxt.start_datetime)
        issues.append(Issue(
            type=IssueType.MISSING_AIRPORT_TRANSFER,
            severity=IssueSeverity.HIGH,
            description=(
                f"Flight arrival at {display_name(airport)} is not followed by "
                f"a transfer to {display_name(next_location)}"
            ),
            segment_indices=[i, i + 1],
            suggested_fix=_draft_transfer(start, end, airport, next_location),
        ))

    return issues


def check_flight_departures(segments: List[Segment]) -> List[Issue]:
    """A take-off preceded by something elsewhere needs a transfer first."""
    issues: List[Issue] = []

    for i in range(1, len(segments)):
        prev = segments[i - 1]
        flight = segments[i]
        if flight.kind != SegmentKind.FLIGHT or is_connector(prev):
            continue

        airport = get_start_location(flight)
        prev_location = get_end_location(prev)
        if airport is None or prev_location is None or not airport.is_airport():
            continue
        if is_same_location(prev_location, airport):
            continue

        start, end = _departure_window(get_effective_end_time(prev), flight.start_datetime)
        issues.append(Issue(
            type=IssueType.MISSING_AIRPORT_TRANSFER,
            severity=IssueSeverity.HIGH,
            description=(
                f"Flight departure from {display_name(airport)} is not preceded by "
                f"a transfer from {display_name(prev_location)}"
            ),
            segment_indices=[i - 1, i],
            suggested_fix=_draft_transfer(start, end, prev_location, airport),
        ))

    return issues


def format_time_diff(delta: timedelta) -> str:
    minutes = int(abs(delta.total_seconds()) // 60)
    hours, remaining = divmod(minutes, 60)
    if hours:
        return f"{hours}h {remaining}m"
    return f"{minutes}m"


def check_time_overlaps(segments: List[Segment]) -> List[Issue]:
    issues: List[Issue] = []

    for i in range(len(segments) - 1):
        current = segments[i]
        nxt = segments[i + 1]
        current_end = get_effective_end_time(current)
        if current_end > nxt.start_datetime:
            issues.append(Issue(
                type=IssueType.OVERLAPPING_TIMES,
                severity=IssueSeverity.MEDIUM,
                description=(
                    f"Segment {i + 2} starts before segment {i + 1} ends "
                    f"(overlap: {format_time_diff(current_end - nxt.start_datetime)})"
                ),
                segment_indices=[i, i + 1],
            ))

    return issues


def build_summary(issues: List[Issue]) -> str:
    if not issues:
        return "No semantic issues detected. Itinerary structure is valid."

    lines = [f"Found {len(issues)} semantic issue(s):"]
    labels = {
        IssueSeverity.HIGH: "requires immediate attention",
        IssueSeverity.MEDIUM: "should be reviewed",
        IssueSeverity.LOW: "minor issues",
    }
    for severity, label in labels.items():
        count = sum(1 for issue in issues if issue.severity == severity)
        if count:
            lines.append(f"  - {count} {severity.value} severity ({label})")

    lines.append("")
    lines.append("Issues:")
    for n, issue in enumerate(issues, start=1):
        lines.append(f"  {n}. [{issue.severity.value}] {issue.description}")
    return "\n".join(lines)


def review_itinerary(itinerary: Itinerary, check_departures: bool = False) -> ReviewResult:
    """Review an itinerary's segments in chronological order.

    Issue segment indices refer to the sorted order.
    """
    if itinerary is None:
        raise ValueError("itinerary is required")

    segments = sort_segments(itinerary.segments)
    issues = check_flight_arrivals(segments)
    if check_departures:
        issues += check_flight_departures(segments)
    issues += check_time_overlaps(segments)

    return ReviewResult(valid=not issues, issues=issues, summary=build_summary(issues))


# ---------------------------------------------------------------------------
# Auto-fix
# ---------------------------------------------------------------------------

def _materialize(issue: Issue) -> Segment:
    return dataclasses.replace(
        copy.deepcopy(issue.suggested_fix),
        id=new_segment_id(),
        source=SegmentSource.AGENT,
        inferred=True,
        inferred_reason=issue.description,
    )


def auto_fix_issues(itinerary: Itinerary, review_result: Optional[ReviewResult] = None) -> Itinerary:
    """Return a new itinerary with every HIGH severity fix inserted.

    MEDIUM and LOW issues are never fixed. A fix is skipped when a flight or
    transfer next to the affected segments already covers the same two
    places. The input itinerary is left untouched.
    """
    if itinerary is None:
        raise ValueError("itinerary is required")
    if review_result is None:
        review_result = review_itinerary(itinerary)

    segments = sort_segments(itinerary.segments)
    planned: List[Tuple[int, Segment]] = []

    for issue in review_result.issues:
        if issue.severity != IssueSeverity.HIGH or issue.suggested_fix is None:
            continue

        fix = issue.suggested_fix
        indices = issue.segment_indices or [len(segments) - 1]
        nearby = segments[max(min(indices) - 1, 0):max(indices) + 2]
        nearby += [segment for _, segment in planned]
        if find_bridge(nearby, get_start_location(fix), get_end_location(fix)):
            continue
        planned.append((max(indices), _materialize(issue)))

    merged = list(segments)
    for index, segment in sorted(planned, key=lambda p: p[0], reverse=True):
        merged.insert(index, segment)
    return dataclasses.replace(itinerary, segments=sort_segments(merged))
