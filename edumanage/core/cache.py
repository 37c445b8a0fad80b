# edumanage/core/cache.py
"""Redis caching implementation."""
import json
import logging
from typing import Any, Optional, Union
from datetime import timedelta
import redis.asyncio as redis
from redis.exceptions import RedisError
from .config import settings

logger = logging.getLogger(__name__)

DASHBOARD_STATS_KEY = "dashboard:stats"

class CacheManager:
    """Thin JSON cache over Redis. Every call is a no-op when no Redis URL is configured."""

    def __init__(self, url: Optional[str] = None):
        self.url = url
        self.redis: Optional[redis.Redis] = None

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    async def connect(self):
        """Initialize Redis connection."""
        if self.enabled and not self.redis:
            self.redis = redis.from_url(
                self.url,
                encoding="utf-8",
                decode_responses=True
            )

    async def disconnect(self):
        """Close Redis connection."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache."""
        if not self.enabled:
            return None
        await self.connect()

        try:
            value = await self.redis.get(key)
        except RedisError as e:
            logger.warning(f"Cache get failed for {key}: {e}")
            return None
        return json.loads(value) if value is not None else None

    async def set(
        self,
        key: str,
        value: Any,
        expire: Optional[Union[int, timedelta]] = None
    ) -> bool:
        """Set value in cache."""
        if not self.enabled:
            return False
        await self.connect()

        if isinstance(expire, timedelta):
            expire = int(expire.total_seconds())
        try:
            serialized = json.dumps(value, default=str)
            if expire:
                return bool(await self.redis.setex(key, expire, serialized))
            return bool(await self.redis.set(key, serialized))
        except RedisError as e:
            logger.warning(f"Cache set failed for {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """Delete key from cache."""
        if not self.enabled:
            return False
        await self.connect()

        try:
            return bool(await self.redis.delete(key))
        except RedisError as e:
            logger.warning(f"Cache delete failed for {key}: {e}")
            return False

# Global cache instance
cache = CacheManager(settings.redis_url)
