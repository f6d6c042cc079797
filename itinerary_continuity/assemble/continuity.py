"""Continuity validation: sort an itinerary and report its location gaps."""

from typing import List

from itinerary_continuity.assemble.gap_detector import detect_location_gaps
from itinerary_continuity.models import ContinuityResult, Gap, Itinerary, Segment


def sort_segments(segments: List[Segment]) -> List[Segment]:
    """Stable chronological sort; returns a new list."""
    return sorted(segments, key=lambda s: s.start_datetime)


def find_location_gaps(segments: List[Segment]) -> List[Gap]:
    """Sort, then detect gaps. Gap indices refer to the sorted order."""
    return detect_location_gaps(sort_segments(segments))


def summarize_gaps(gaps: List[Gap]) -> str:
    if not gaps:
        return "All segments are geographically continuous. No transportation gaps detected."
    lines = [f"Found {len(gaps)} geographic gap(s):"]
    for n, gap in enumerate(gaps, start=1):
        lines.append(f"{n}. {gap.description} (suggested: {gap.suggested_type.value})")
    return "\n".join(lines)


def validate_continuity(itinerary: Itinerary) -> ContinuityResult:
    if itinerary is None:
        raise ValueError("itinerary is required")

    sorted_segments = sort_segments(itinerary.segments)
    gaps = detect_location_gaps(sorted_segments)
    return ContinuityResult(
        valid=not gaps,
        gaps=gaps,
        segment_count=len(sorted_segments),
        summary=summarize_gaps(gaps),
    )
