from cachetools import TTLCache
from .config import settings

try:
    import redis  # Only needed when USE_REDIS=true
except ImportError:
    redis = None

class Cache:
    """
    String key/value store: Redis when USE_REDIS=true, otherwise per-process
    TTL maps. Keys are namespaced so valuations and counters never collide.
    """
    def __init__(self, namespace: str = "homevalue"):
        self.namespace = namespace
        self.redis = None
        if settings.USE_REDIS and redis is not None:
            self.redis = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)
        # One local map per lifetime so short-lived counters don't inherit the long TTL
        self._payloads = TTLCache(maxsize=4096, ttl=settings.CACHE_TTL_SECONDS)
        self._counters = TTLCache(maxsize=16384, ttl=60)

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def get(self, key: str) -> str | None:
        if self.redis:
            return self.redis.get(self._key(key))
        return self._payloads.get(key)

    def set(self, key: str, value: str) -> None:
        if self.redis:
            self.redis.setex(self._key(key), settings.CACHE_TTL_SECONDS, value)
        else:
            self._payloads[key] = value

    def incr(self, key: str, window_seconds: int = 60) -> int:
        """Count a hit in a short-lived window and return the running total."""
        if self.redis:
            pipe = self.redis.pipeline()
            pipe.incr(self._key(key))
            pipe.expire(self._key(key), window_seconds)
            count, _ = pipe.execute()
            return int(count)
        count = self._counters.get(key, 0) + 1
        self._counters[key] = count
        return count

    def clear(self) -> None:
        """Drop in-process entries. Redis keys expire on their own."""
        self._payloads.clear()
        self._counters.clear()

cache = Cache()
