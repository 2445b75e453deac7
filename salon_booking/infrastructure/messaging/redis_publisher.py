from __future__ import annotations

import json
import logging

from redis import Redis
from redis.exceptions import RedisError

from salon_booking.application.ports.event_publisher import EventPublisherPort
from salon_booking.domain.entities.booking_event import BookingEvent


class RedisStreamPublisher(EventPublisherPort):
    """
    Publishes booking events to Redis Streams, one stream per event type
    (e.g. "salon:booking.created"). Consumers own acknowledgement and
    dead-letter handling through their consumer groups.
    """

    def __init__(self, redis_client: Redis, prefix: str = "salon", max_len: int = 10000) -> None:
        self._redis = redis_client
        self._prefix = prefix
        self._max_len = max_len
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_url(cls, url: str, prefix: str = "salon", max_len: int = 10000) -> "RedisStreamPublisher":
        return cls(Redis.from_url(url, decode_responses=True), prefix=prefix, max_len=max_len)

    def stream_key(self, event_type: str) -> str:
        return f"{self._prefix}:{event_type}"

    def publish(self, event: BookingEvent) -> None:
        fields = {
            "event_type": event.event_type,
            "booking_id": event.booking_id,
            "payload": json.dumps(event.payload, default=str),
        }
        try:
            self._redis.xadd(self.stream_key(event.event_type), fields, maxlen=self._max_len, approximate=True)
        except RedisError as e:
            self._logger.error(
                "Event publish failed",
                extra={"event_type": event.event_type, "booking_id": event.booking_id, "reason": str(e)},
            )
            return
        self._logger.info(
            "Event published",
            extra={"event_type": event.event_type, "booking_id": event.booking_id},
        )
