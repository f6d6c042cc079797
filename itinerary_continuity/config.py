"""Configuration: .env loading, thresholds, constants."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of itinerary_continuity/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Gap detection ---
GAP_CONFIDENCE_THRESHOLD = int(os.getenv("GAP_CONFIDENCE_THRESHOLD", "80"))  # gaps below this are dropped
DEFAULT_GAP_CONFIDENCE = 50  # unresolved / overnight-adjacent pairings
LONG_GAP_HOURS = float(os.getenv("LONG_GAP_HOURS", "8"))  # assume a return to base after this
OVERNIGHT_EVENING_HOUR = int(os.getenv("OVERNIGHT_EVENING_HOUR", "18"))
OVERNIGHT_MORNING_HOUR = int(os.getenv("OVERNIGHT_MORNING_HOUR", "15"))

# --- Location matching ---
COORDINATE_MATCH_METERS = float(os.getenv("COORDINATE_MATCH_METERS", "100"))
WORD_OVERLAP_THRESHOLD = 0.7
MIN_CONTAINMENT_LENGTH = 3
FUZZY_WORD_MIN_LENGTH = 4  # both words must be longer than this for edit distance
MAX_WORD_EDIT_DISTANCE = 2

# --- Synthesized segments ---
ARRIVAL_BUFFER_MINUTES = int(os.getenv("ARRIVAL_BUFFER_MINUTES", "30"))  # customs/baggage
TRANSFER_MIN_MINUTES = 30
TRANSFER_MAX_MINUTES = 60
DEPARTURE_LEAD_HOURS = float(os.getenv("DEPARTURE_LEAD_HOURS", "3"))
DOMESTIC_FLIGHT_HOURS = 1
INTERNATIONAL_FLIGHT_HOURS = 2
AUTO_FIX_CONFIDENCE = 0.95
