"""Global sliding-window rate limiter backed by Redis."""

import logging
import time
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from meteo_forecast.config import (
    REDIS_URL,
    RATE_LIMIT_REQUESTS_PER_SECOND,
    RATE_LIMIT_REDIS_KEY_PREFIX
)

logger = logging.getLogger(__name__)


class RateLimiter:
    """Counts requests of the last window in a Redis sorted set.

    Requests are allowed when Redis is unavailable.
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        max_requests: int = RATE_LIMIT_REQUESTS_PER_SECOND,
        window_seconds: float = 1.0,
        key_prefix: str = RATE_LIMIT_REDIS_KEY_PREFIX
    ):
        """Initialize rate limiter.

        Args:
            redis_client: Optional Redis client. If None, creates one from REDIS_URL.
            max_requests: Requests allowed per window across all clients
            window_seconds: Length of the sliding window
            key_prefix: Prefix of the sorted set key
        """
        self.redis_client = redis_client or redis.from_url(REDIS_URL)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.key = f"{key_prefix}:global"

    async def is_allowed(self) -> tuple[bool, int]:
        """Record a request and check it against the limit.

        Returns:
            Tuple of (is_allowed, retry_after_seconds); retry_after is 0 when allowed
        """
        now_us = int(time.time() * 1_000_000)
        window_start_us = now_us - int(self.window_seconds * 1_000_000)

        try:
            pipe = self.redis_client.pipeline()
            pipe.zadd(self.key, {str(now_us): now_us})
            pipe.zremrangebyscore(self.key, 0, window_start_us)
            pipe.zcard(self.key)
            pipe.expire(self.key, max(1, int(self.window_seconds * 2)))
            _, _, request_count, _ = await pipe.execute()

        except (RedisError, OSError) as e:
            logger.error(f"Rate limiter unavailable, allowing request: {e}")
            return True, 0

        if request_count > self.max_requests:
            retry_after = max(1, int(self.window_seconds * 2))
            logger.debug(f"Rate limited: count={request_count}, max={self.max_requests}")
            return False, retry_after

        logger.debug(f"Not rate limited: count={request_count}, max={self.max_requests}")
        return True, 0

    async def close(self):
        """Close Redis connection."""
        await self.redis_client.aclose()
