import os
from pydantic import BaseModel

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    DEFAULT_CURRENCY: str = os.getenv("CURRENCY", "CAD")
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "43200"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Geocoding (address -> coordinates)
    GEO_PROVIDER: str = os.getenv("GEO_PROVIDER", "mock")          # mock | http | off
    GEO_BASE_URL: str | None = os.getenv("GEO_BASE_URL")

    # Comparables: seed the generator from the address so repeats match
    COMPS_DETERMINISTIC: bool = os.getenv("COMPS_DETERMINISTIC", "false").lower() == "true"

    # Uploads
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

    # Abuse protection
    RATE_LIMIT_RPM: int = int(os.getenv("RATE_LIMIT_RPM", "60"))

    # CORS
    ALLOW_ORIGINS: str = os.getenv("ALLOW_ORIGINS", "*")

    # Cache
    USE_REDIS: bool = os.getenv("USE_REDIS", "false").lower() == "true"
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

settings = Settings()
