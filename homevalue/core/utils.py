import hashlib
import math
import re

# Decoration tolerated around typed-in amounts: "$450,000", "1 022 400"
_NUMBER_NOISE = re.compile(r"[\s,$]")

def normalize_address(addr: str) -> str:
    """
    Minimal normalization so cache keys & seeds are stable:
    - trim whitespace
    - lowercase
    - collapse multiple spaces
    """
    return " ".join(addr.strip().lower().split())

def fnv1a_32(s: str) -> int:
    """Deterministic, fast hash for seed generation."""
    h = 0x811c9dc5
    for c in s.encode("utf-8"):
        h ^= c
        h = (h * 0x01000193) & 0xFFFFFFFF
    return h

def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(x + 0.5))

def parse_int(value) -> int | None:
    """
    Lenient integer parse for form input.
    Returns None for empty or non-numeric input.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    cleaned = _NUMBER_NOISE.sub("", str(value))
    if not cleaned:
        return None
    try:
        return int(cleaned)
    except ValueError:
        return None

def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())

def weak_etag(payload_bytes: bytes) -> str:
    """Weak ETag for client-side conditional requests."""
    h = hashlib.sha256(payload_bytes).hexdigest()[:24]
    return f'W/"{h}"'
