import logging
import math
import random
import re
from datetime import date, timedelta
from typing import List, Optional

from .base import CompsClient, ComparableProperty, RandomSource, LISTED, SOLD
from ..core.config import settings
from ..core.metrics import COMPARABLES
from ..core.utils import fnv1a_32, normalize_address, round_half_up

log = logging.getLogger(__name__)

# "500 Rue Test, Montreal" -> ("500", "Rue Test")
_ADDRESS_RE = re.compile(r"^(\d+)\s+(.+?)(?:,|$)")

# (street number offset, price multiplier)
COMPARABLE_OFFSETS = [
    (-150, 0.92),
    (-75, 1.05),
    (100, 0.97),
    (200, 1.08),
]

_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

def split_address(address: str) -> Optional[tuple[int, str]]:
    """Leading street number and street name, or None if the address has no number."""
    m = _ADDRESS_RE.match(address)
    if not m:
        return None
    return int(m.group(1)), m.group(2)

def recent_sold_label(rng: RandomSource, today: date) -> str:
    """Month/year of a sale 1..90 days before today."""
    days_ago = math.floor(rng.random() * 90) + 1
    d = today - timedelta(days=days_ago)
    return f"{_MONTHS[d.month - 1]} {d.year}"

def generate_comparables(
    address: str,
    calculated_value: int,
    bedrooms: int = 3,
    bathrooms: float = 2,
    rng: Optional[RandomSource] = None,
    today: Optional[date] = None,
) -> List[ComparableProperty]:
    """
    Synthesize four nearby properties around the subject address.

    Street numbers are shifted by fixed offsets and prices scaled by fixed
    multipliers; status, days on market, sold month, room bumps and size come
    from ``rng``. Returns an empty list when the address has no leading
    street number.
    """
    parts = split_address(address)
    if parts is None:
        log.info("address has no street number, skipping comparables")
        return []
    base_number, street = parts
    rng = rng or random.Random()
    today = today or date.today()

    out: List[ComparableProperty] = []
    for offset, multiplier in COMPARABLE_OFFSETS:
        number = max(1, base_number + offset)
        price = round_half_up(calculated_value * multiplier)

        is_sold = rng.random() > 0.5
        days_on_market = None
        sold_date = None
        if is_sold:
            sold_date = recent_sold_label(rng, today)
        else:
            days_on_market = math.floor(rng.random() * 60) + 5  # 5..64

        beds = bedrooms + (1 if rng.random() > 0.7 else 0)
        baths = bathrooms + (0.5 if rng.random() > 0.8 else 0)
        sqft = round_half_up(1200 + rng.random() * 800)

        status = SOLD if is_sold else LISTED
        COMPARABLES.labels(status=status).inc()
        out.append(ComparableProperty(
            address=f"{number} {street}",
            price=price,
            status=status,
            bedrooms=beds,
            bathrooms=baths,
            square_feet=sqft,
            days_on_market=days_on_market,
            sold_date=sold_date,
        ))
    return out

class SyntheticComps(CompsClient):
    """
    Illustrative comparables; there is no listings feed behind this.
    With ``deterministic`` the generator is seeded from the address so the
    same subject always gets the same neighbours.
    """
    def __init__(self, deterministic: bool = False, rng: Optional[RandomSource] = None):
        self.deterministic = deterministic
        self.rng = rng

    def _rng_for(self, address: str) -> RandomSource:
        if self.rng is not None:
            return self.rng
        if self.deterministic:
            return random.Random(fnv1a_32(normalize_address(address)))
        return random.Random()

    def comparables(
        self, address: str, calculated_value: int, bedrooms: int = 3, bathrooms: float = 2
    ) -> List[ComparableProperty]:
        return generate_comparables(
            address, calculated_value, bedrooms, bathrooms, rng=self._rng_for(address)
        )

def comps_client() -> CompsClient:
    return SyntheticComps(deterministic=settings.COMPS_DETERMINISTIC)
