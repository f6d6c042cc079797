"""Output formatters: JSON-ready records and human-readable gap lists."""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from itinerary_continuity.assemble.gap_classifier import display_name
from itinerary_continuity.models import (
    Gap,
    Issue,
    Itinerary,
    Location,
    ReviewResult,
    Segment,
    SegmentKind,
)


def _dt_str(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.isoformat()


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def location_to_dict(loc: Optional[Location]) -> Optional[dict]:
    if loc is None:
        return None
    data = {"name": loc.name}
    if loc.code:
        data["code"] = loc.code
    if loc.location_type:
        data["type"] = loc.location_type
    if loc.address:
        data["address"] = {
            "street": loc.address.street,
            "city": loc.address.city,
            "state": loc.address.state,
            "postalCode": loc.address.postal_code,
            "country": loc.address.country,
        }
    if loc.coordinates:
        data["coordinates"] = {"lat": loc.coordinates.lat, "lon": loc.coordinates.lon}
    return data


def _kind_fields(s: Segment) -> dict:
    if s.kind == SegmentKind.FLIGHT:
        return {
            "origin": location_to_dict(s.origin),
            "destination": location_to_dict(s.destination),
            "flightNumber": s.flight_number,
            "airline": s.airline,
        }
    if s.kind == SegmentKind.HOTEL:
        return {
            "location": location_to_dict(s.location),
            "checkIn": _dt_str(s.check_in),
            "checkOut": _dt_str(s.check_out),
            "propertyName": s.property_name,
        }
    if s.kind == SegmentKind.ACTIVITY:
        return {
            "location": location_to_dict(s.location),
            "name": s.name,
            "description": s.description,
            "category": s.category,
        }
    if s.kind == SegmentKind.MEETING:
        return {"location": location_to_dict(s.location), "title": s.title, "agenda": s.agenda}
    if s.kind == SegmentKind.TRANSFER:
        return {
            "pickupLocation": location_to_dict(s.pickup_location),
            "dropoffLocation": location_to_dict(s.dropoff_location),
            "transferType": s.transfer_type,
        }
    return {"location": location_to_dict(s.location), "title": s.title}


def segment_to_dict(s: Segment) -> dict:
    data = {
        "id": s.id,
        "type": s.kind.value,
        "status": s.status.value,
        "startDatetime": _dt_str(s.start_datetime),
        "endDatetime": _dt_str(s.end_datetime),
        "travelerIds": list(s.traveler_ids),
        "source": s.source.value,
        "notes": s.notes,
        "metadata": dict(s.metadata),
    }
    if s.source_details:
        data["sourceDetails"] = {
            "confidence": s.source_details.confidence,
            "mode": s.source_details.mode,
            "model": s.source_details.model,
            "timestamp": _dt_str(s.source_details.timestamp),
        }
    if s.inferred:
        data["inferred"] = True
        data["inferredReason"] = s.inferred_reason
    data.update(_kind_fields(s))
    return data


def gap_to_dict(g: Gap) -> dict:
    return {
        "beforeIndex": g.before_index,
        "afterIndex": g.after_index,
        "beforeSegmentId": g.before_segment.id,
        "afterSegmentId": g.after_segment.id,
        "endLocation": location_to_dict(g.end_location),
        "startLocation": location_to_dict(g.start_location),
        "gapType": g.gap_type.value,
        "suggestedType": g.suggested_type.value,
        "confidence": g.confidence,
        "description": g.description,
    }


def issue_to_dict(i: Issue) -> dict:
    return {
        "type": i.type.value,
        "severity": i.severity.value,
        "description": i.description,
        "segmentIndices": list(i.segment_indices),
        "suggestedFix": segment_to_dict(i.suggested_fix) if i.suggested_fix else None,
    }


def review_to_dict(r: ReviewResult) -> dict:
    return {
        "valid": r.valid,
        "issues": [issue_to_dict(i) for i in r.issues],
        "summary": r.summary,
    }


def itinerary_to_dict(itinerary: Itinerary) -> dict:
    return {
        "id": itinerary.id,
        "title": itinerary.title,
        "segments": [segment_to_dict(s) for s in itinerary.segments],
        "metadata": dict(itinerary.metadata),
    }


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

def to_json(
    itinerary: Itinerary,
    gaps: List[Gap],
    review: Optional[ReviewResult] = None,
    path: Optional[Path] = None,
) -> str:
    """Serialize an analysed itinerary; also written to `path` when given."""
    data = {
        "itinerary": itinerary_to_dict(itinerary),
        "gaps": [gap_to_dict(g) for g in gaps],
        "review": review_to_dict(review) if review else None,
        "summary": {
            "totalSegments": len(itinerary.segments),
            "inferredSegments": sum(1 for s in itinerary.segments if s.inferred),
            "totalGaps": len(gaps),
            "totalIssues": len(review.issues) if review else 0,
        },
    }
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return text


# ---------------------------------------------------------------------------
# Human-readable gaps
# ---------------------------------------------------------------------------

def format_gaps(gaps: List[Gap]) -> str:
    lines = []
    lines.append("=" * 72)
    lines.append("  LOCATION GAPS")
    lines.append("=" * 72)

    for n, g in enumerate(gaps, start=1):
        lines.append(
            f"\n  {n}. {display_name(g.end_location)}  →  {display_name(g.start_location)}"
            f"  |  {g.gap_type.value}  [{g.confidence}%]"
        )
        lines.append(
            f"     After segment {g.before_index + 1} "
            f"({_dt_str(g.before_segment.end_datetime)}), "
            f"before segment {g.after_index + 1} ({_dt_str(g.after_segment.start_datetime)})"
        )
        lines.append(f"     Suggested: {g.suggested_type.value}")
        if g.description:
            lines.append(f"     {g.description}")

    lines.append(f"\n{'=' * 72}")
    lines.append(f"  Total: {len(gaps)} gaps")
    lines.append("=" * 72)

    return "\n".join(lines)
