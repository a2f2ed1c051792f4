from fastapi import HTTPException, Request
from starlette.status import HTTP_429_TOO_MANY_REQUESTS
from datetime import datetime, timezone
from .config import settings
from .cache import cache

def rate_limit(request: Request):
    """
    Basic RPM limiter keyed by client IP and the current minute.
    Redis INCR when configured, in-process counters otherwise.
    """
    rpm = max(1, settings.RATE_LIMIT_RPM)
    client_ip = request.client.host if request.client else "unknown"
    minute_bucket = datetime.now(timezone.utc).strftime("%Y%m%d%H%M")
    if cache.incr(f"rate:{client_ip}:{minute_bucket}") > rpm:
        raise HTTPException(status_code=HTTP_429_TOO_MANY_REQUESTS, detail="Rate limit exceeded")
