import math

UNKNOWN_PROVINCE = "N/A"


def parse_coordinates(text: str) -> tuple[float, float]:
    """Parse a "latitude, longitude" string. Raises ValueError on malformed input."""
    if not text or "," not in text:
        raise ValueError('Coordinates must be in the form "latitude, longitude"')
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise ValueError("Coordinates must contain exactly two numbers")
    try:
        lat, lng = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Coordinates are not numeric: {text!r}") from None
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError("Coordinates must be finite numbers")
    return lat, lng


def derive_province(location_name: str) -> str:
    # "Kab. Bogor, Jawa Barat" -> "Jawa Barat"
    if not location_name or "," not in location_name:
        return UNKNOWN_PROVINCE
    tail = location_name.rsplit(",", 1)[1].strip()
    return tail or UNKNOWN_PROVINCE
