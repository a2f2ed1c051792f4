import json
import logging
from dataclasses import asdict
from typing import Any, Mapping, Optional

import httpx

from ..core.config import settings
from ..core.cache import cache
from ..core.metrics import VALUATIONS
from ..core.utils import is_blank, normalize_address, parse_int, weak_etag
from ..data.base import AGE_ALIASES, GeoPoint, PropertyRecord
from ..data.comps_client import comps_client
from ..data.geocode_client import geocode_client
from ..models.adjustment_model import AdjustmentModel
from .market import summarize_market
from .validation import validate_municipal_value, visible_errors

log = logging.getLogger(__name__)

DEFAULT_BEDROOMS = 3
DEFAULT_BATHROOMS = 2

def _parse_bathrooms(value: Any) -> Optional[float]:
    if is_blank(value):
        return None
    try:
        return float(str(value).replace(",", "."))
    except ValueError:
        return None

def to_record(form: Mapping[str, Any], coordinates: Optional[GeoPoint] = None) -> PropertyRecord:
    """Typed, immutable view of the raw wizard answers."""
    return PropertyRecord(
        address=(form.get("address") or "").strip(),
        coordinates=coordinates,
        municipal_value=parse_int(form.get("municipal_value")),
        land_value=parse_int(form.get("land_value")),
        lot_size=parse_int(form.get("lot_size")),
        year_built=parse_int(form.get("year_built")),
        bedrooms=parse_int(form.get("bedrooms")),
        bathrooms=_parse_bathrooms(form.get("bathrooms")),
        roof_age=AGE_ALIASES.get(form.get("roof_age"), form.get("roof_age")),
        windows_age=AGE_ALIASES.get(form.get("windows_age"), form.get("windows_age")),
        flooring_type=form.get("flooring_type"),
        bathroom_renovated=form.get("bathroom_renovated"),
        kitchen_renovated=form.get("kitchen_renovated"),
    )

def is_ready(record: PropertyRecord) -> bool:
    """
    Only an in-range municipal value gives a meaningful estimate; missing,
    zero or out-of-range values still compute but are not ready.
    """
    return validate_municipal_value(record.municipal_value) is None

class ValuationService:
    """
    Orchestrates:
      form → validation → record (+ geocode) → adjustment model
           → synthetic comparables → market metrics
    Handles caching and ETag generation for repeat submissions.
    """
    def __init__(self, model=None, comps=None, geo=None):
        self.model = model or AdjustmentModel()
        self.comps = comps or comps_client()
        self.geo = geo if geo is not None else geocode_client()

    async def locate(self, address: str) -> Optional[GeoPoint]:
        if self.geo is None or is_blank(address):
            return None
        try:
            result = await self.geo.resolve(normalize_address(address))
        except (httpx.HTTPError, KeyError, ValueError) as exc:
            log.warning("geocoding failed for %r: %s", address, exc)
            return None
        return result.point

    async def estimate(self, form: Mapping[str, Any]) -> tuple[dict, bool, str]:
        form_key = json.dumps(dict(form), sort_keys=True, separators=(',',':'), default=str)
        cache_key = f"valuation:{weak_etag(form_key.encode('utf-8'))}"
        cached = cache.get(cache_key)
        if cached:
            payload = json.loads(cached)
            etag = weak_etag(cached.encode("utf-8"))
            return payload, True, etag

        # 1) Record from raw answers
        errors = visible_errors(form)
        coordinates = await self.locate(form.get("address") or "")
        record = to_record(form, coordinates)

        # 2) Condition adjustments
        valuation = self.model.predict(record)
        ready = is_ready(record)
        VALUATIONS.labels(ready=str(ready).lower()).inc()

        # 3) Comparables + market summary, only once there is a value to compare
        comparables = []
        if ready and record.address:
            comparables = self.comps.comparables(
                record.address,
                valuation.value,
                DEFAULT_BEDROOMS if record.bedrooms is None else record.bedrooms,
                DEFAULT_BATHROOMS if record.bathrooms is None else record.bathrooms,
            )
        metrics = summarize_market(comparables, valuation.value)

        log.info(
            "valuation ready=%s value=%s comps=%s trend=%s confidence=%s",
            ready, valuation.value, len(comparables), metrics.market_trend, metrics.confidence,
        )

        payload = {
            "address": record.address,
            "currency": settings.DEFAULT_CURRENCY,
            "ready": ready,
            "base_value": valuation.base,
            "valuation": valuation.value,
            "range": {"low": valuation.low, "high": valuation.high},
            "adjustments": valuation.adjustments,
            "coordinates": asdict(coordinates) if coordinates else None,
            "comparables": [asdict(c) for c in comparables],
            "market": {**asdict(metrics), "has_data": metrics.has_data},
            "errors": errors,
            "disclaimer": "This estimate is illustrative and not a professional appraisal.",
            "cached": False,
        }

        body = json.dumps(payload, separators=(',',':'))
        cache.set(cache_key, body)
        etag = weak_etag(body.encode("utf-8"))
        return payload, False, etag
