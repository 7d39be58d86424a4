# polyfaq/services/cache_service.py
import json
import logging
from dataclasses import dataclass

import redis
import redis.asyncio as aioredis

from polyfaq.exceptions import CacheUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheWriteResult:
    """
    Outcome of a best-effort cache write. Callers may ignore a failed result:
    the request that triggered the write must not fail because of the cache.
    """
    ok: bool
    error: str | None = None


class CacheService:
    def __init__(self, client, prefix: str = "faqs", ttl_seconds: int = 3600):
        self.redis = client
        self.prefix = prefix
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_settings(cls, settings) -> "CacheService":
        if settings.REDIS_URL:
            client = aioredis.Redis.from_url(
                settings.REDIS_URL, decode_responses=True, socket_connect_timeout=1
            )
        else:
            client = aioredis.Redis(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=settings.REDIS_DB,
                password=settings.REDIS_PASSWORD,
                decode_responses=True,
                socket_connect_timeout=1,
            )
        return cls(client, prefix=settings.CACHE_KEY_PREFIX, ttl_seconds=settings.CACHE_TTL_SECONDS)

    def key_for(self, lang: str) -> str:
        """faqs:{lang}"""
        return f"{self.prefix}:{lang}"

    # ==========================================
    # 1. FAQ LIST CACHE (per language)
    # ==========================================

    async def _raw_get(self, key: str):
        try:
            return await self.redis.get(key)
        except (redis.RedisError, OSError) as e:
            raise CacheUnavailable(str(e)) from e

    async def get(self, lang: str):
        """Cached projected list for lang, or None on miss / unavailable cache."""
        key = self.key_for(lang)
        try:
            data = await self._raw_get(key)
        except CacheUnavailable as e:
            logger.warning("Cache read failed for %s, treating as miss: %s", key, e)
            return None

        if data is None:
            logger.debug("Cache miss: %s", key)
            return None

        try:
            value = json.loads(data)
        except (TypeError, ValueError):
            logger.warning("Discarding undecodable cache entry %s", key)
            return None

        logger.debug("Cache hit: %s", key)
        return value

    async def set(self, lang: str, value) -> CacheWriteResult:
        key = self.key_for(lang)
        try:
            await self.redis.setex(key, self.ttl_seconds, json.dumps(value, ensure_ascii=False))
        except (redis.RedisError, OSError) as e:
            return CacheWriteResult(ok=False, error=str(e))
        return CacheWriteResult(ok=True)

    async def invalidate(self, langs) -> CacheWriteResult:
        keys = [self.key_for(lang) for lang in dict.fromkeys(langs)]
        if not keys:
            return CacheWriteResult(ok=True)
        try:
            await self.redis.delete(*keys)
        except (redis.RedisError, OSError) as e:
            return CacheWriteResult(ok=False, error=str(e))
        return CacheWriteResult(ok=True)

    # ==========================================
    # 2. UTILITIES
    # ==========================================

    async def clear_all(self) -> int:
        """Deletes every key under the FAQ prefix"""
        deleted = 0
        async for key in self.redis.scan_iter(match=f"{self.prefix}:*"):
            deleted += await self.redis.delete(key)
        return deleted

    async def close(self):
        await self.redis.aclose()
