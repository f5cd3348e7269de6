"""Redis pub/sub broadcaster for live bus positions."""

import asyncio
import logging

import orjson
import redis.asyncio as aioredis

from route_planner.config import settings

logger = logging.getLogger(__name__)

CHANNEL = "buses:positions"
STATE_KEY = "buses:state"


class Broadcaster:
    """Publishes bus positions to Redis and manages WebSocket subscribers."""

    def __init__(self, redis_url: str | None = None) -> None:
        self.redis_url = settings.redis_url if redis_url is None else redis_url
        self._redis: aioredis.Redis | None = None
        self._subscribers: set[asyncio.Queue] = set()

    async def connect(self) -> None:
        if not self.redis_url:
            logger.info("No Redis URL configured, bus positions fan out in-process only")
            return
        self._redis = aioredis.from_url(self.redis_url, decode_responses=False)

    async def close(self) -> None:
        if self._redis:
            await self._redis.aclose()

    async def publish(self, positions: dict[str, dict], changed: list[dict]) -> None:
        """Store full state, publish the changed positions, fan out to subscribers."""
        payload = orjson.dumps({"type": "update", "buses": changed})

        if self._redis:
            try:
                await self._redis.set(STATE_KEY, orjson.dumps(positions))
                await self._redis.publish(CHANNEL, payload)
            except Exception:
                logger.exception("Failed to publish to Redis")

        dead = set()
        for q in self._subscribers:
            try:
                q.put_nowait(payload)
            except asyncio.QueueFull:
                dead.add(q)
        self._subscribers -= dead

    def subscribe(self) -> asyncio.Queue:
        """Create a new subscriber queue for WebSocket fan-out."""
        q: asyncio.Queue = asyncio.Queue(maxsize=10)
        self._subscribers.add(q)
        return q

    def unsubscribe(self, q: asyncio.Queue) -> None:
        self._subscribers.discard(q)
