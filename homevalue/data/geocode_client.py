from typing import Optional
from .base import GeocodeClient, GeocodeResult, GeoPoint
from ..core.config import settings
from ..core.utils import fnv1a_32
import httpx

class MockGeocode(GeocodeClient):
    """
    Mock geocoder that turns the address string into a stable lat/lon on the
    island of Montreal. Entirely deterministic and free of external dependencies.
    """
    async def resolve(self, address: str) -> GeocodeResult:
        seed = fnv1a_32(address)
        # Two independent 16-bit fractions from the hash
        fy = (seed & 0xFFFF) / 65535.0
        fx = (seed >> 16) / 65535.0
        lat = 45.41 + fy * (45.70 - 45.41)
        lon = -73.97 + fx * (-73.47 + 73.97)
        point = GeoPoint(lat=round(lat, 6), lon=round(lon, 6))
        return GeocodeResult(point=point, formatted_address=address, city="Montréal", province="QC")

class HttpGeocode(GeocodeClient):
    """
    Client for a geocoding service you control.
    Expects a simple JSON API at GEO_BASE_URL that returns point + address.
    """
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    async def resolve(self, address: str) -> GeocodeResult:
        async with httpx.AsyncClient(timeout=10) as client:
            r = await client.get(f"{self.base_url}/resolve", params={"address": address})
            r.raise_for_status()
            j = r.json()
            return GeocodeResult(
                point=GeoPoint(lat=j["point"]["lat"], lon=j["point"]["lon"]),
                formatted_address=j.get("formatted_address", address),
                city=j.get("city"), province=j.get("province"), country=j.get("country", "Canada")
            )

def geocode_client() -> Optional[GeocodeClient]:
    """
    Factory picks mock or http based on env flags; "off" disables lookups.
    """
    if settings.GEO_PROVIDER == "off":
        return None
    if settings.GEO_PROVIDER == "http" and settings.GEO_BASE_URL:
        return HttpGeocode(settings.GEO_BASE_URL)
    return MockGeocode()
