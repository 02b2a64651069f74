# ============================================================================
# FILE: app/core/cache.py
# ============================================================================
import redis
import json
from typing import Optional, Any, Callable
from fastapi.encoders import jsonable_encoder
from app.config import settings
import logging

logger = logging.getLogger(__name__)

class RedisCache:
    """Redis cache helper class"""

    def __init__(self):
        self.redis_client = None
        if not settings.CACHE_ENABLED:
            logger.info("Caching disabled by configuration")
            return
        try:
            self.redis_client = redis.from_url(settings.REDIS_URL, decode_responses=True)
            self.redis_client.ping()
            logger.info("Redis connection established")
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            self.redis_client = None

    def set_cache(self, key: str, value: Any, expire: int = None) -> bool:
        """Set a cache value with optional expiration"""
        if not self.redis_client:
            return False

        try:
            serialized = json.dumps(value)
            if expire:
                self.redis_client.setex(key, expire, serialized)
            else:
                self.redis_client.set(key, serialized)
            return True
        except (redis.RedisError, TypeError) as e:
            logger.error(f"Cache set error: {e}")
            return False

    def get_cache(self, key: str) -> Optional[Any]:
        """Get a cache value"""
        if not self.redis_client:
            return None

        try:
            value = self.redis_client.get(key)
            if value:
                return json.loads(value)
            return None
        except (redis.RedisError, ValueError) as e:
            logger.error(f"Cache get error: {e}")
            return None

    def invalidate_resource(self, resource: str) -> int:
        """Drop every cached read of a resource family (e.g. all "songs:*" keys)"""
        if not self.redis_client:
            return 0

        try:
            keys = list(self.redis_client.scan_iter(match=f"{resource}:*"))
            if keys:
                self.redis_client.delete(*keys)
            return len(keys)
        except redis.RedisError as e:
            logger.error(f"Cache invalidate error for {resource}: {e}")
            return 0

    def cached_read(self, resource: str, key: str, loader: Callable[[], Any]) -> Any:
        """
        Read-through cache for public catalog reads.
        The TTL comes from the per-resource table in settings.CACHE_TTLS;
        resources without an entry are never cached.
        """
        ttl = settings.CACHE_TTLS.get(resource)
        cache_key = f"{resource}:{key}"
        if ttl:
            cached = self.get_cache(cache_key)
            if cached is not None:
                logger.debug(f"Cache hit: {cache_key}")
                return cached

        value = jsonable_encoder(loader(), by_alias=True)
        if ttl:
            self.set_cache(cache_key, value, ttl)
        return value

# Singleton instance
cache = RedisCache()
