from __future__ import annotations

import logging
from functools import lru_cache

from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.application.ports.event_publisher import EventPublisherPort
from salon_booking.application.ports.salon_directory import SalonDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.user_directory import UserDirectoryPort
from salon_booking.application.use_cases.booking_lifecycle import BookingLifecycle
from salon_booking.application.use_cases.booking_service import BookingService
from salon_booking.core.config import settings
from salon_booking.infrastructure.directory.memory_directory import (
    MemorySalonDirectory,
    MemoryServiceCatalog,
    MemoryUserDirectory,
)
from salon_booking.infrastructure.messaging.logging_publisher import LoggingEventPublisher
from salon_booking.infrastructure.messaging.redis_publisher import RedisStreamPublisher
from salon_booking.infrastructure.remote.catalog_client import ServiceCatalogClient
from salon_booking.infrastructure.remote.http_json import JsonHttpClient
from salon_booking.infrastructure.remote.salon_client import SalonServiceClient
from salon_booking.infrastructure.remote.user_client import UserServiceClient
from salon_booking.infrastructure.store.json_store import JsonBookingStore
from salon_booking.infrastructure.store.memory_store import MemoryBookingStore

logger = logging.getLogger(__name__)

_booking_store: BookingStorePort | None = None


def _is_dev() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


def get_booking_store() -> BookingStorePort:
    global _booking_store
    if _booking_store is None:
        provider = (settings.STORE_PROVIDER or ("json" if _is_dev() else "memory")).lower()
        if provider == "json":
            _booking_store = JsonBookingStore(data_dir=settings.DATA_DIR)
        else:
            _booking_store = MemoryBookingStore()
    return _booking_store


def _remote(base_url: str) -> JsonHttpClient:
    return JsonHttpClient(base_url, timeout=settings.REMOTE_TIMEOUT_SECONDS)


@lru_cache
def get_salon_directory() -> SalonDirectoryPort:
    if settings.SALON_SERVICE_URL:
        return SalonServiceClient(_remote(settings.SALON_SERVICE_URL))
    if not _is_dev():
        raise ValueError("SALON_SERVICE_URL is required outside dev/local.")
    logger.info("Using MemorySalonDirectory (SALON_SERVICE_URL missing, ENV=dev/local)")
    return MemorySalonDirectory()


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    if settings.CATALOG_SERVICE_URL:
        return ServiceCatalogClient(_remote(settings.CATALOG_SERVICE_URL))
    if not _is_dev():
        raise ValueError("CATALOG_SERVICE_URL is required outside dev/local.")
    logger.info("Using MemoryServiceCatalog (CATALOG_SERVICE_URL missing, ENV=dev/local)")
    return MemoryServiceCatalog()


@lru_cache
def get_user_directory() -> UserDirectoryPort:
    if settings.USER_SERVICE_URL:
        return UserServiceClient(_remote(settings.USER_SERVICE_URL))
    if not _is_dev():
        raise ValueError("USER_SERVICE_URL is required outside dev/local.")
    logger.info("Using MemoryUserDirectory (USER_SERVICE_URL missing, ENV=dev/local)")
    return MemoryUserDirectory()


@lru_cache
def get_event_publisher() -> EventPublisherPort:
    if settings.REDIS_URL:
        return RedisStreamPublisher.from_url(
            settings.REDIS_URL,
            prefix=settings.EVENT_STREAM_PREFIX,
            max_len=settings.EVENT_STREAM_MAXLEN,
        )
    logger.info("Using LoggingEventPublisher (REDIS_URL missing)")
    return LoggingEventPublisher()


def get_booking_service() -> BookingService:
    store = get_booking_store()
    return BookingService(
        store=store,
        lifecycle=BookingLifecycle(store, strict_transitions=settings.STRICT_STATUS_TRANSITIONS),
        salons=get_salon_directory(),
        catalog=get_service_catalog(),
        users=get_user_directory(),
        publisher=get_event_publisher(),
    )
