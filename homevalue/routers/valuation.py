from dataclasses import asdict
from fastapi import APIRouter, Depends, Header, Response
from ..schemas import (
    PropertyForm, ValuationResponse, ValidationResponse,
    ComparablesRequest, Comparable, MarketMetricsRequest, MarketMetricsOut,
)
from ..data.base import ComparableProperty
from ..data.comps_client import comps_client
from ..services.market import summarize_market
from ..services.validation import is_property_data_valid, visible_errors
from ..services.valuation_service import ValuationService
from ..core.security import rate_limit

router = APIRouter()

def service_dep() -> ValuationService:
    # Cheap factory; adapters hold no connections.
    return ValuationService()

@router.post("/validate", response_model=ValidationResponse)
def post_validate(body: PropertyForm, _lim = Depends(rate_limit)):
    form = body.model_dump()
    return {"valid": is_property_data_valid(form), "errors": visible_errors(form)}

@router.post("/valuation", response_model=ValuationResponse)
async def post_valuation(
    body: PropertyForm,
    response: Response,
    if_none_match: str | None = Header(default=None),
    _lim  = Depends(rate_limit),          # Rate limiting
    svc: ValuationService = Depends(service_dep),
):
    payload, from_cache, etag = await svc.estimate(body.model_dump())
    if if_none_match and if_none_match == etag:
        return Response(status_code=304, headers={"ETag": etag})
    payload["cached"] = from_cache
    payload["etag"] = etag
    response.headers["ETag"] = etag
    return payload

@router.post("/comparables", response_model=list[Comparable])
def post_comparables(body: ComparablesRequest, _lim = Depends(rate_limit)):
    comps = comps_client().comparables(body.address, body.estimate, body.bedrooms, body.bathrooms)
    return [asdict(c) for c in comps]

@router.post("/market-metrics", response_model=MarketMetricsOut)
def post_market_metrics(body: MarketMetricsRequest, _lim = Depends(rate_limit)):
    comps = [ComparableProperty(**c.model_dump()) for c in body.comparables]
    metrics = summarize_market(comps, body.estimate)
    return {**asdict(metrics), "has_data": metrics.has_data}
