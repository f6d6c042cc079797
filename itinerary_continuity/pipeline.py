"""Orchestrates the full pass: validate → fill gaps → review → auto-fix."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from itinerary_continuity.assemble.continuity import validate_continuity
from itinerary_continuity.assemble.gap_filler import fill_gaps
from itinerary_continuity.assemble.review import auto_fix_issues, review_itinerary
from itinerary_continuity.models import Gap, Itinerary, ReviewResult

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    itinerary: Itinerary
    gaps: List[Gap] = field(default_factory=list)  # gaps found in the input, before filling
    review: Optional[ReviewResult] = None


def run_pipeline(
    itinerary: Itinerary,
    fill: bool = True,
    auto_fix: bool = True,
    check_departures: bool = False,
) -> PipelineResult:
    """Run every continuity check over one itinerary.

    Args:
        itinerary: The itinerary to analyze. Never modified.
        fill: Insert placeholder flights/transfers for detected location gaps.
        auto_fix: Insert the suggested transfer for every HIGH severity issue.
        check_departures: Also flag flights not preceded by a transfer.

    Returns:
        PipelineResult holding the (possibly repaired) itinerary, the gaps
        found in the input, and the review taken before auto-fixing.
    """
    if itinerary is None:
        raise ValueError("itinerary is required")

    # Step 1: Continuity
    continuity = validate_continuity(itinerary)
    logger.info(
        "Itinerary %s: %d segments, %d location gaps",
        itinerary.id or "<unsaved>", continuity.segment_count, len(continuity.gaps),
    )
    for gap in continuity.gaps:
        logger.debug("  gap %d→%d: %s (confidence %d)",
                     gap.before_index, gap.after_index, gap.description, gap.confidence)

    # Step 2: Fill gaps
    current = itinerary
    if fill and continuity.gaps:
        current = fill_gaps(current)
        added = len(current.segments) - len(itinerary.segments)
        logger.info("  Inserted %d filler segments", added)

    # Step 3: Review
    review = review_itinerary(current, check_departures=check_departures)
    logger.info("  Review found %d issues", len(review.issues))
    for issue in review.issues:
        logger.debug("  [%s] %s", issue.severity.value, issue.description)

    # Step 4: Auto-fix
    if auto_fix and not review.valid:
        before = len(current.segments)
        current = auto_fix_issues(current, review)
        logger.info("  Auto-fixed %d issues", len(current.segments) - before)

    return PipelineResult(itinerary=current, gaps=continuity.gaps, review=review)
