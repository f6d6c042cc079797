"""Global pytest configuration."""

import os

# Pin tunables before any imports so a local .env cannot shift test expectations
os.environ.setdefault("GAP_CONFIDENCE_THRESHOLD", "80")
os.environ.setdefault("LONG_GAP_HOURS", "8")
os.environ.setdefault("OVERNIGHT_EVENING_HOUR", "18")
os.environ.setdefault("OVERNIGHT_MORNING_HOUR", "15")
os.environ.setdefault("COORDINATE_MATCH_METERS", "100")
os.environ.setdefault("ARRIVAL_BUFFER_MINUTES", "30")
os.environ.setdefault("DEPARTURE_LEAD_HOURS", "3")
