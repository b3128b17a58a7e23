# faq_service/services/cache_service.py
import json
import logging
import time
from functools import lru_cache
from typing import Protocol

import redis
from faq_service.config import settings

logger = logging.getLogger(__name__)


class ReadCache(Protocol):
    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str, ttl_seconds: int) -> None: ...


class CacheService:
    """
    Redis wrapper that never fails a request. Errors are logged and read as a
    miss (or a skipped write). While Redis is unreachable the client retries
    `ping` at most once every REDIS_RETRY_SECONDS.
    """

    def __init__(self):
        self.redis = redis.Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            decode_responses=True,
            socket_connect_timeout=1
        )
        self.enabled = False
        self._last_attempt = 0.0
        self._connect()

    def _connect(self) -> None:
        self._last_attempt = time.monotonic()
        try:
            self.redis.ping() # Check connection
            self.enabled = True
            logger.info("Redis connected at %s:%s", settings.REDIS_HOST, settings.REDIS_PORT)
        except redis.RedisError:
            logger.warning("Redis not connected. Caching disabled.")
            self.enabled = False

    def _available(self) -> bool:
        if not self.enabled and time.monotonic() - self._last_attempt >= settings.REDIS_RETRY_SECONDS:
            self._connect()
        return self.enabled

    # ==========================================
    # 1. KEY/VALUE (Read Cache contract)
    # ==========================================

    def get(self, key: str) -> str | None:
        if not self._available(): return None
        try:
            return self.redis.get(key)
        except redis.RedisError as e:
            logger.warning("Redis GET %s failed, treating as a miss: %s", key, e)
            self.enabled = False
            return None

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if not self._available(): return
        try:
            self.redis.setex(key, ttl_seconds, value)
        except redis.RedisError as e:
            logger.warning("Redis SETEX %s failed, value not cached: %s", key, e)
            self.enabled = False

    # ==========================================
    # 2. UTILITIES
    # ==========================================

    def clear_all(self):
        """Wipes everything in Redis"""
        if self._available():
            self.redis.flushdb()


# ==========================================
# FAQ LIST HELPERS
# ==========================================

def faq_list_key(language: str) -> str:
    """faqs:{language}"""
    return f"faqs:{language}"


def get_cached_faq_list(cache: ReadCache, language: str) -> list[dict] | None:
    data = cache.get(faq_list_key(language))
    if data is None:
        return None
    return json.loads(data)


def set_cached_faq_list(cache: ReadCache, language: str, faqs: list[dict]) -> None:
    cache.set(faq_list_key(language), json.dumps(faqs), settings.FAQ_CACHE_TTL_SECONDS)


@lru_cache
def get_cache() -> ReadCache:
    """FastAPI dependency. One Redis client per process, created on first use."""
    return CacheService()
