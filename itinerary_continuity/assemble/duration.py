"""Infer plausible durations for segments that carry no real end time.

Upstream producers mark "no explicit end" by setting end_datetime equal to
start_datetime. For those segments the duration is guessed from keywords in
the segment's name, description and location, first match wins.
"""

import re
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from itinerary_continuity.models import (
    ActivitySegment,
    CustomSegment,
    DurationConfidence,
    DurationInference,
    MeetingSegment,
    Segment,
    SegmentKind,
)
from itinerary_continuity.normalize.text import normalize_name

HIGH = DurationConfidence.HIGH
MEDIUM = DurationConfidence.MEDIUM
LOW = DurationConfidence.LOW

# (keywords, hours, confidence, reason), first match wins
_KEYWORD_RULES: List[Tuple[Tuple[str, ...], float, DurationConfidence, str]] = [
    # Meals
    (("breakfast",), 1.0, HIGH, "Standard breakfast duration"),
    (("brunch",), 1.5, HIGH, "Standard brunch duration"),
    (("lunch",), 1.5, HIGH, "Standard lunch duration"),
    (("dinner",), 2.0, HIGH, "Standard dinner duration"),
    (("cocktail", "cocktails", "drinks"), 1.5, MEDIUM, "Standard cocktail/drinks duration"),
    # Entertainment: "movie" is checked before "show"
    (("movie", "film", "cinema"), 2.0, HIGH, "Standard movie duration"),
    (("show", "broadway", "theatre", "theater"), 2.5, HIGH, "Standard show/theater duration"),
    (("concert",), 2.5, HIGH, "Standard concert duration"),
    (("opera", "ballet"), 3.0, HIGH, "Standard opera/ballet duration"),
    # Activities
    (("tour",), 3.0, MEDIUM, "Standard tour duration"),
    (("museum", "gallery", "exhibition"), 2.0, MEDIUM, "Standard museum/gallery visit duration"),
    (("spa", "massage"), 2.0, MEDIUM, "Standard spa/massage duration"),
    (("golf",), 4.0, MEDIUM, "Standard golf round duration"),
    (("hike", "hiking"), 3.0, MEDIUM, "Standard hiking duration"),
    (("wine tasting", "vineyard"), 2.0, MEDIUM, "Standard wine tasting duration"),
    (("cooking class", "culinary"), 3.0, MEDIUM, "Standard cooking class duration"),
    (("shopping",), 2.0, MEDIUM, "Standard shopping duration"),
]

# Checked after the kind-specific meeting default
_LATE_KEYWORD_RULES: List[Tuple[Tuple[str, ...], float, DurationConfidence, str]] = [
    (("workshop", "class", "lesson"), 2.0, MEDIUM, "Standard workshop/class duration"),
    (("game", "match", "sporting"), 3.0, MEDIUM, "Standard sporting event duration"),
]

MEETING_HOURS = 1.0
DEFAULT_HOURS = 2.0


def _searchable_text(segment: Segment) -> str:
    parts: List[str] = []
    if isinstance(segment, ActivitySegment):
        parts += [segment.name, segment.description, segment.category]
    elif isinstance(segment, MeetingSegment):
        parts += [segment.title, segment.agenda]
    elif isinstance(segment, CustomSegment):
        parts.append(segment.title)

    location = getattr(segment, "location", None)
    if location is not None:
        parts.append(location.name)
    parts.append(segment.notes)

    return normalize_name(" ".join(p for p in parts if p))


def _contains_keyword(text: str, keyword: str) -> bool:
    return re.search(rf"\b{re.escape(keyword)}\b", text) is not None


def _match_rules(text: str, rules) -> Optional[DurationInference]:
    for keywords, hours, confidence, reason in rules:
        if any(_contains_keyword(text, k) for k in keywords):
            return DurationInference(hours, confidence, reason)
    return None


def has_explicit_end(segment: Segment) -> bool:
    return (
        segment.end_datetime is not None
        and segment.start_datetime is not None
        and segment.end_datetime != segment.start_datetime
    )


def infer_activity_duration(segment: Segment) -> DurationInference:
    """Infer how long a segment lasts, preferring its real timestamps."""
    if has_explicit_end(segment) and segment.end_datetime > segment.start_datetime:
        hours = (segment.end_datetime - segment.start_datetime).total_seconds() / 3600
        return DurationInference(hours, HIGH, "Actual duration from segment timestamps")

    text = _searchable_text(segment)

    inferred = _match_rules(text, _KEYWORD_RULES)
    if inferred:
        return inferred
    if segment.kind == SegmentKind.MEETING:
        return DurationInference(MEETING_HOURS, MEDIUM, "Standard meeting duration")
    inferred = _match_rules(text, _LATE_KEYWORD_RULES)
    if inferred:
        return inferred
    return DurationInference(DEFAULT_HOURS, LOW, "Default duration for unknown activity type.")


def get_effective_end_time(segment: Segment) -> datetime:
    """Real end time when supplied, otherwise start plus the inferred duration."""
    if has_explicit_end(segment):
        return segment.end_datetime
    hours = infer_activity_duration(segment).hours
    return segment.start_datetime + timedelta(hours=hours)
