"""Normalize city and country names to canonical forms."""

import re

from itinerary_continuity.normalize.airports import iata_to_city
from itinerary_continuity.normalize.text import strip_diacritics

# Maps raw variations → canonical city name
_ALIASES = {
    # New York variants
    "new york city": "New York",
    "new york, ny": "New York",
    "new york/newark": "New York",
    "nyc": "New York",
    "manhattan": "New York",
    "brooklyn": "New York",
    "queens": "New York",
    "newark": "New York",
    "newark, nj": "New York",
    "jfk, new york": "New York",
    "laguardia, new york": "New York",
    # Los Angeles variants
    "los angeles, ca": "Los Angeles",
    "la": "Los Angeles",
    "santa monica": "Los Angeles",
    "santa monica, ca": "Los Angeles",
    "hollywood": "Los Angeles",
    "burbank": "Los Angeles",
    "burbank, ca": "Los Angeles",
    # San Francisco
    "san francisco, ca": "San Francisco",
    "sf": "San Francisco",
    # Europe
    "barcelona, es": "Barcelona",
    "barcelona, spain": "Barcelona",
    "london, uk": "London",
    "london, gb": "London",
    "london, england": "London",
    "paris, france": "Paris",
    "paris, fr": "Paris",
    "roma": "Rome",
    "milano": "Milan",
    "firenze": "Florence",
    "venezia": "Venice",
    "lisboa": "Lisbon",
    "munchen": "Munich",
    "wien": "Vienna",
    "praha": "Prague",
    "athina": "Athens",
    "palma": "Palma de Mallorca",
    "warszawa": "Warsaw",
    # Other common
    "washington, dc": "Washington DC",
    "washington dc": "Washington DC",
    "washington d.c.": "Washington DC",
    "dallas/fort worth": "Dallas",
    "minneapolis/st. paul": "Minneapolis",
    "bengaluru": "Bangalore",
    "ciudad de mexico": "Mexico City",
    "cdmx": "Mexico City",
}

# Words that indicate a string is a hotel/property name, not a city
_HOTEL_INDICATORS = re.compile(
    r'\b(hotel|inn|resort|suites?|motel|hostel|lodge|bnb|airbnb|'
    r'collection|marriott|hilton|hyatt|wyndham|sheraton|westin|'
    r'aloft|courtyard|four seasons|ritz)\b',
    re.I,
)

# Maps raw country names → ISO 3166-1 alpha-2
_COUNTRY_ALIASES = {
    "united states": "US",
    "united states of america": "US",
    "usa": "US",
    "u.s.": "US",
    "u.s.a.": "US",
    "america": "US",
    "united kingdom": "GB",
    "uk": "GB",
    "great britain": "GB",
    "england": "GB",
    "scotland": "GB",
    "wales": "GB",
    "france": "FR",
    "italy": "IT",
    "italia": "IT",
    "spain": "ES",
    "espana": "ES",
    "germany": "DE",
    "deutschland": "DE",
    "portugal": "PT",
    "netherlands": "NL",
    "the netherlands": "NL",
    "holland": "NL",
    "belgium": "BE",
    "switzerland": "CH",
    "austria": "AT",
    "ireland": "IE",
    "greece": "GR",
    "turkey": "TR",
    "turkiye": "TR",
    "israel": "IL",
    "united arab emirates": "AE",
    "uae": "AE",
    "qatar": "QA",
    "denmark": "DK",
    "sweden": "SE",
    "norway": "NO",
    "finland": "FI",
    "iceland": "IS",
    "czech republic": "CZ",
    "czechia": "CZ",
    "hungary": "HU",
    "poland": "PL",
    "canada": "CA",
    "mexico": "MX",
    "costa rica": "CR",
    "colombia": "CO",
    "peru": "PE",
    "argentina": "AR",
    "brazil": "BR",
    "japan": "JP",
    "south korea": "KR",
    "korea": "KR",
    "china": "CN",
    "hong kong": "HK",
    "taiwan": "TW",
    "singapore": "SG",
    "thailand": "TH",
    "malaysia": "MY",
    "indonesia": "ID",
    "philippines": "PH",
    "india": "IN",
    "australia": "AU",
    "new zealand": "NZ",
    "egypt": "EG",
    "morocco": "MA",
    "south africa": "ZA",
}


def normalize_country(raw: str) -> str:
    """Normalize a country string to an upper-case ISO alpha-2 code.

    Two-letter inputs are trusted as codes; known names map through the alias
    table; anything else comes back upper-cased so that equal inputs still
    compare equal.
    """
    if not raw:
        return ""
    cleaned = strip_diacritics(raw).strip()
    if len(cleaned) == 2 and cleaned.isalpha():
        return cleaned.upper()
    lowered = cleaned.lower()
    if lowered in _COUNTRY_ALIASES:
        return _COUNTRY_ALIASES[lowered]
    return cleaned.upper()


def resolve_city(raw: str) -> str:
    """Normalize a raw city/location string to a canonical city name.

    Tries in order:
    1. Exact alias match (case-insensitive, diacritics ignored)
    2. IATA code match (if input looks like a 3-letter code)
    3. Strip ", STATE" / ", COUNTRY" suffixes and try again
    4. "Property - City" style names
    5. Hotel/property names without a recognizable city → ""
    6. Airport names like "Kennedy Intl, New York"
    7. Return the cleaned-up original
    """
    if not raw:
        return ""

    cleaned = strip_diacritics(raw).strip()
    lowered = cleaned.lower()

    # 1. Direct alias
    if lowered in _ALIASES:
        return _ALIASES[lowered]

    # 2. IATA code
    if re.match(r'^[A-Z]{3}$', cleaned):
        city = iata_to_city(cleaned)
        if city:
            return city

    # 3. Strip ", STATE" or ", COUNTRY" suffixes
    base = re.sub(r',\s*[A-Z]{2}(\s+\d{5})?$', '', cleaned).strip()
    if base.lower() in _ALIASES:
        return _ALIASES[base.lower()]

    # 4. "The Ambrose - Santa Monica" → try "Santa Monica"
    if " - " in cleaned:
        after_dash = cleaned.split(" - ")[-1].strip()
        if after_dash.lower() in _ALIASES:
            return _ALIASES[after_dash.lower()]
        if after_dash and len(after_dash.split()) <= 3 and after_dash[0].isupper() and not _HOTEL_INDICATORS.search(after_dash):
            return after_dash

    # 5. Hotel/property names are NOT cities
    if _HOTEL_INDICATORS.search(cleaned):
        if ", " in cleaned:
            for part in reversed(cleaned.split(", ")):
                part = part.strip()
                if part.lower() in _ALIASES:
                    return _ALIASES[part.lower()]
                if re.match(r'^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?$', part) and not _HOTEL_INDICATORS.search(part):
                    return part
        return ""

    # 6. Airport names like "Kennedy Intl, New York"
    airport_match = re.match(r'^(.+?)\s+(?:Intl|International|Airport|Apt),?\s+(.+)$', cleaned, re.I)
    if airport_match:
        city_part = airport_match.group(2).strip()
        return _ALIASES.get(city_part.lower(), city_part)

    # 7. Title-case cleanup if it looks like a city
    if not any(c.isdigit() for c in cleaned) and len(cleaned) < 50:
        return cleaned.title() if cleaned.islower() else cleaned

    return cleaned
