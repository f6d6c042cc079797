"""IATA airport code lookups: code → (city, ISO country)."""

from typing import Optional, Tuple

_AIRPORTS = {
    # --- United States ---
    "ATL": ("Atlanta", "US"),
    "AUS": ("Austin", "US"),
    "BNA": ("Nashville", "US"),
    "BOS": ("Boston", "US"),
    "BUR": ("Los Angeles", "US"),
    "BWI": ("Baltimore", "US"),
    "CLT": ("Charlotte", "US"),
    "DCA": ("Washington DC", "US"),
    "DEN": ("Denver", "US"),
    "DFW": ("Dallas", "US"),
    "DAL": ("Dallas", "US"),
    "DTW": ("Detroit", "US"),
    "EWR": ("New York", "US"),
    "FLL": ("Fort Lauderdale", "US"),
    "HNL": ("Honolulu", "US"),
    "IAD": ("Washington DC", "US"),
    "IAH": ("Houston", "US"),
    "HOU": ("Houston", "US"),
    "JFK": ("New York", "US"),
    "LAS": ("Las Vegas", "US"),
    "LAX": ("Los Angeles", "US"),
    "LGA": ("New York", "US"),
    "MCO": ("Orlando", "US"),
    "MDW": ("Chicago", "US"),
    "MIA": ("Miami", "US"),
    "MSP": ("Minneapolis", "US"),
    "MSY": ("New Orleans", "US"),
    "OAK": ("Oakland", "US"),
    "OGG": ("Maui", "US"),
    "ORD": ("Chicago", "US"),
    "PDX": ("Portland", "US"),
    "PHL": ("Philadelphia", "US"),
    "PHX": ("Phoenix", "US"),
    "SAN": ("San Diego", "US"),
    "SEA": ("Seattle", "US"),
    "SFO": ("San Francisco", "US"),
    "SJC": ("San Jose", "US"),
    "SLC": ("Salt Lake City", "US"),
    "SMF": ("Sacramento", "US"),
    "TPA": ("Tampa", "US"),
    # --- Canada / Latin America ---
    "YUL": ("Montreal", "CA"),
    "YVR": ("Vancouver", "CA"),
    "YYZ": ("Toronto", "CA"),
    "CUN": ("Cancun", "MX"),
    "MEX": ("Mexico City", "MX"),
    "PVR": ("Puerto Vallarta", "MX"),
    "LIR": ("Liberia", "CR"),
    "SJO": ("San Jose", "CR"),
    "BOG": ("Bogota", "CO"),
    "LIM": ("Lima", "PE"),
    "EZE": ("Buenos Aires", "AR"),
    "GRU": ("Sao Paulo", "BR"),
    "GIG": ("Rio de Janeiro", "BR"),
    "SJU": ("San Juan", "PR"),
    # --- United Kingdom / Ireland ---
    "LHR": ("London", "GB"),
    "LGW": ("London", "GB"),
    "LCY": ("London", "GB"),
    "STN": ("London", "GB"),
    "MAN": ("Manchester", "GB"),
    "EDI": ("Edinburgh", "GB"),
    "DUB": ("Dublin", "IE"),
    # --- Western Europe ---
    "CDG": ("Paris", "FR"),
    "ORY": ("Paris", "FR"),
    "NCE": ("Nice", "FR"),
    "LYS": ("Lyon", "FR"),
    "BOD": ("Bordeaux", "FR"),
    "AMS": ("Amsterdam", "NL"),
    "BRU": ("Brussels", "BE"),
    "FRA": ("Frankfurt", "DE"),
    "MUC": ("Munich", "DE"),
    "BER": ("Berlin", "DE"),
    "HAM": ("Hamburg", "DE"),
    "ZRH": ("Zurich", "CH"),
    "GVA": ("Geneva", "CH"),
    "VIE": ("Vienna", "AT"),
    "BCN": ("Barcelona", "ES"),
    "MAD": ("Madrid", "ES"),
    "AGP": ("Malaga", "ES"),
    "PMI": ("Palma de Mallorca", "ES"),
    "FUE": ("Fuerteventura", "ES"),
    "LIS": ("Lisbon", "PT"),
    "OPO": ("Porto", "PT"),
    # --- Italy ---
    "MXP": ("Milan", "IT"),
    "LIN": ("Milan", "IT"),
    "FCO": ("Rome", "IT"),
    "CIA": ("Rome", "IT"),
    "VCE": ("Venice", "IT"),
    "FLR": ("Florence", "IT"),
    "NAP": ("Naples", "IT"),
    # --- Nordics / Central & Eastern Europe ---
    "CPH": ("Copenhagen", "DK"),
    "ARN": ("Stockholm", "SE"),
    "OSL": ("Oslo", "NO"),
    "HEL": ("Helsinki", "FI"),
    "KEF": ("Reykjavik", "IS"),
    "PRG": ("Prague", "CZ"),
    "BUD": ("Budapest", "HU"),
    "WAW": ("Warsaw", "PL"),
    # --- Greece / Turkey / Middle East ---
    "ATH": ("Athens", "GR"),
    "HER": ("Heraklion", "GR"),
    "JTR": ("Santorini", "GR"),
    "JMK": ("Mykonos", "GR"),
    "IST": ("Istanbul", "TR"),
    "AYT": ("Antalya", "TR"),
    "TLV": ("Tel Aviv", "IL"),
    "DXB": ("Dubai", "AE"),
    "AUH": ("Abu Dhabi", "AE"),
    "DOH": ("Doha", "QA"),
    # --- Africa ---
    "CAI": ("Cairo", "EG"),
    "RAK": ("Marrakech", "MA"),
    "CPT": ("Cape Town", "ZA"),
    "JNB": ("Johannesburg", "ZA"),
    # --- Asia / Pacific ---
    "NRT": ("Tokyo", "JP"),
    "HND": ("Tokyo", "JP"),
    "KIX": ("Osaka", "JP"),
    "ICN": ("Seoul", "KR"),
    "PEK": ("Beijing", "CN"),
    "PVG": ("Shanghai", "CN"),
    "CAN": ("Guangzhou", "CN"),
    "HKG": ("Hong Kong", "HK"),
    "TPE": ("Taipei", "TW"),
    "SIN": ("Singapore", "SG"),
    "BKK": ("Bangkok", "TH"),
    "HKT": ("Phuket", "TH"),
    "KUL": ("Kuala Lumpur", "MY"),
    "CGK": ("Jakarta", "ID"),
    "DPS": ("Bali", "ID"),
    "MNL": ("Manila", "PH"),
    "DEL": ("Delhi", "IN"),
    "BOM": ("Mumbai", "IN"),
    "BLR": ("Bangalore", "IN"),
    "GOI": ("Goa", "IN"),
    "SYD": ("Sydney", "AU"),
    "MEL": ("Melbourne", "AU"),
    "AKL": ("Auckland", "NZ"),
}


def lookup_airport(code: str) -> Optional[Tuple[str, str]]:
    """Return (city, country) for an IATA code, or None if unknown."""
    if not code or len(code.strip()) != 3:
        return None
    return _AIRPORTS.get(code.strip().upper())


def iata_to_city(code: str) -> Optional[str]:
    entry = lookup_airport(code)
    return entry[0] if entry else None


def iata_to_country(code: str) -> Optional[str]:
    entry = lookup_airport(code)
    return entry[1] if entry else None
