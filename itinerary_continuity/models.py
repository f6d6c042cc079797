"""Data models for itinerary continuity analysis."""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Type


class SegmentKind(str, Enum):
    FLIGHT = "FLIGHT"
    HOTEL = "HOTEL"
    ACTIVITY = "ACTIVITY"
    TRANSFER = "TRANSFER"
    MEETING = "MEETING"
    CUSTOM = "CUSTOM"


class SegmentStatus(str, Enum):
    TENTATIVE = "TENTATIVE"
    CONFIRMED = "CONFIRMED"
    WAITLISTED = "WAITLISTED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class SegmentSource(str, Enum):
    IMPORT = "import"
    AGENT = "agent"
    USER = "user"


class GapType(str, Enum):
    LOCAL_TRANSFER = "LOCAL_TRANSFER"  # same city, different places
    DOMESTIC_GAP = "DOMESTIC_GAP"  # different cities, same (or unknown) country
    INTERNATIONAL_GAP = "INTERNATIONAL_GAP"


class IssueType(str, Enum):
    MISSING_AIRPORT_TRANSFER = "MISSING_AIRPORT_TRANSFER"
    OVERLAPPING_TIMES = "OVERLAPPING_TIMES"


class IssueSeverity(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class DurationConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


AIRPORT_LOCATION_TYPE = "AIRPORT"


def new_segment_id() -> str:
    return f"seg_{uuid.uuid4().hex[:12]}"


@dataclass
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""  # ISO 3166-1 alpha-2 preferred, full names tolerated


@dataclass
class Coordinates:
    lat: float
    lon: float


@dataclass
class Location:
    name: str = ""
    code: str = ""  # IATA airport code if applicable
    address: Optional[Address] = None
    coordinates: Optional[Coordinates] = None
    location_type: str = ""  # e.g. "AIRPORT"

    def is_usable(self) -> bool:
        return bool((self.name or "").strip() or (self.code or "").strip())

    def is_airport(self) -> bool:
        return (self.location_type or "").upper() == AIRPORT_LOCATION_TYPE or bool((self.code or "").strip())


@dataclass
class SourceDetails:
    confidence: Optional[float] = None  # 0-1
    mode: str = ""
    model: str = ""
    timestamp: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Segments: one dataclass per kind, discriminated by the class-level `kind`
# ---------------------------------------------------------------------------

@dataclass
class Segment:
    id: str
    start_datetime: datetime
    end_datetime: datetime  # equal to start_datetime when no real end is known
    status: SegmentStatus = SegmentStatus.CONFIRMED
    traveler_ids: List[str] = field(default_factory=list)
    source: SegmentSource = SegmentSource.IMPORT
    source_details: Optional[SourceDetails] = None
    metadata: dict = field(default_factory=dict)
    notes: str = ""
    inferred: bool = False
    inferred_reason: str = ""

    kind: ClassVar[SegmentKind]


@dataclass
class FlightSegment(Segment):
    kind: ClassVar[SegmentKind] = SegmentKind.FLIGHT

    origin: Optional[Location] = None
    destination: Optional[Location] = None
    flight_number: str = ""
    airline: str = ""


@dataclass
class HotelSegment(Segment):
    kind: ClassVar[SegmentKind] = SegmentKind.HOTEL

    location: Optional[Location] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    property_name: str = ""


@dataclass
class ActivitySegment(Segment):
    kind: ClassVar[SegmentKind] = SegmentKind.ACTIVITY

    location: Optional[Location] = None
    name: str = ""
    description: str = ""
    category: str = ""


@dataclass
class MeetingSegment(Segment):
    kind: ClassVar[SegmentKind] = SegmentKind.MEETING

    location: Optional[Location] = None
    title: str = ""
    agenda: str = ""


@dataclass
class TransferSegment(Segment):
    kind: ClassVar[SegmentKind] = SegmentKind.TRANSFER

    pickup_location: Optional[Location] = None
    dropoff_location: Optional[Location] = None
    transfer_type: str = "PRIVATE"


@dataclass
class CustomSegment(Segment):
    kind: ClassVar[SegmentKind] = SegmentKind.CUSTOM

    location: Optional[Location] = None
    title: str = ""


SEGMENT_TYPES: Dict[SegmentKind, Type[Segment]] = {
    SegmentKind.FLIGHT: FlightSegment,
    SegmentKind.HOTEL: HotelSegment,
    SegmentKind.ACTIVITY: ActivitySegment,
    SegmentKind.MEETING: MeetingSegment,
    SegmentKind.TRANSFER: TransferSegment,
    SegmentKind.CUSTOM: CustomSegment,
}


@dataclass
class Itinerary:
    id: str = ""
    title: str = ""
    segments: List[Segment] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Analysis results
# ---------------------------------------------------------------------------

@dataclass
class Gap:
    """A discontinuity between one segment's end and the next one's start."""
    before_index: int
    after_index: int
    before_segment: Segment
    after_segment: Segment
    end_location: Location
    start_location: Location
    gap_type: GapType
    suggested_type: SegmentKind  # TRANSFER or FLIGHT
    confidence: int  # 0-100
    description: str = ""


@dataclass
class Issue:
    type: IssueType
    severity: IssueSeverity
    description: str
    segment_indices: List[int] = field(default_factory=list)
    suggested_fix: Optional[Segment] = None


@dataclass
class DurationInference:
    hours: float
    confidence: DurationConfidence
    reason: str


@dataclass
class ReviewResult:
    valid: bool
    issues: List[Issue] = field(default_factory=list)
    summary: str = ""


@dataclass
class ContinuityResult:
    valid: bool
    gaps: List[Gap] = field(default_factory=list)
    segment_count: int = 0
    summary: str = ""
