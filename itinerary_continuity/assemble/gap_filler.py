"""Synthesize placeholder segments that bridge detected location gaps."""

import copy
import dataclasses
from datetime import timedelta
from typing import List, Tuple

from itinerary_continuity.assemble.continuity import sort_segments
from itinerary_continuity.assemble.duration import get_effective_end_time
from itinerary_continuity.assemble.gap_detector import detect_location_gaps
from itinerary_continuity.assemble.segment_locations import find_bridge
from itinerary_continuity.config import (
    DOMESTIC_FLIGHT_HOURS,
    INTERNATIONAL_FLIGHT_HOURS,
    TRANSFER_MIN_MINUTES,
)
from itinerary_continuity.models import (
    FlightSegment,
    Gap,
    GapType,
    Itinerary,
    Segment,
    SegmentKind,
    SegmentSource,
    SegmentStatus,
    SourceDetails,
    TransferSegment,
    new_segment_id,
)


def _default_duration(gap: Gap) -> timedelta:
    if gap.suggested_type == SegmentKind.TRANSFER:
        return timedelta(minutes=TRANSFER_MIN_MINUTES)
    if gap.gap_type == GapType.INTERNATIONAL_GAP:
        return timedelta(hours=INTERNATIONAL_FLIGHT_HOURS)
    return timedelta(hours=DOMESTIC_FLIGHT_HOURS)


def create_filler_segment(gap: Gap) -> Segment:
    """Placeholder FLIGHT or TRANSFER for one gap.

    Starts when the previous segment effectively ends and never runs past
    the start of the next one.
    """
    after_start = gap.after_segment.start_datetime
    start = min(get_effective_end_time(gap.before_segment), after_start)
    end = min(start + _default_duration(gap), after_start)

    common = dict(
        id=new_segment_id(),
        start_datetime=start,
        end_datetime=end,
        status=SegmentStatus.TENTATIVE,
        source=SegmentSource.AGENT,
        source_details=SourceDetails(confidence=gap.confidence / 100, mode="dream"),
        inferred=True,
        inferred_reason=gap.description,
    )

    if gap.suggested_type == SegmentKind.FLIGHT:
        return FlightSegment(
            origin=copy.deepcopy(gap.end_location),
            destination=copy.deepcopy(gap.start_location),
            flight_number="XX0000",
            airline="Unknown",
            notes="Placeholder flight - please verify and update with actual flight details",
            **common,
        )
    return TransferSegment(
        pickup_location=copy.deepcopy(gap.end_location),
        dropoff_location=copy.deepcopy(gap.start_location),
        notes="Placeholder transfer - please verify and update with actual transfer details",
        **common,
    )


def fill_gaps(itinerary: Itinerary) -> Itinerary:
    """Return a copy of the itinerary with a filler inserted for every gap.

    A filler is skipped when a neighbouring flight/transfer (or a filler
    already planned) connects the same two places.
    """
    if itinerary is None:
        raise ValueError("itinerary is required")

    segments = sort_segments(itinerary.segments)
    planned: List[Tuple[int, Segment]] = []
    for gap in detect_location_gaps(segments):
        nearby = segments[max(gap.before_index - 1, 0):gap.after_index + 2]
        nearby += [filler for _, filler in planned]
        if find_bridge(nearby, gap.end_location, gap.start_location):
            continue
        planned.append((gap.after_index, create_filler_segment(gap)))

    # Insert back to front so earlier indices stay valid; the stable sort
    # then keeps a filler ahead of a successor that starts at the same time.
    merged = list(segments)
    for index, filler in reversed(planned):
        merged.insert(index, filler)
    return dataclasses.replace(itinerary, segments=sort_segments(merged))
