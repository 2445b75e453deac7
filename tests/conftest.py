from __future__ import annotations

from datetime import datetime, time, timedelta
from decimal import Decimal

import pytest

from salon_booking.application.use_cases.booking_lifecycle import BookingLifecycle
from salon_booking.application.use_cases.booking_service import BookingService
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.salon import Salon
from salon_booking.domain.entities.service_offering import ServiceOffering
from salon_booking.infrastructure.directory.memory_directory import (
    MemorySalonDirectory,
    MemoryServiceCatalog,
    MemoryUserDirectory,
)
from salon_booking.infrastructure.messaging.logging_publisher import LoggingEventPublisher
from salon_booking.infrastructure.store.memory_store import MemoryBookingStore


class TickingClock:
    """Returns a strictly increasing timestamp on every call."""

    def __init__(self, start: datetime = datetime(2030, 1, 1, 8, 0)) -> None:
        self._now = start

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


@pytest.fixture
def salon() -> Salon:
    return Salon(id="s1", name="Downtown Studio", open_time=time(9, 0), close_time=time(18, 0), owner_id="owner")


@pytest.fixture
def services() -> dict[str, ServiceOffering]:
    return {
        "cut": ServiceOffering(id="cut", name="Haircut", duration_minutes=30, price=Decimal("50.00")),
        "trim": ServiceOffering(id="trim", name="Beard Trim", duration_minutes=15, price=Decimal("30.00")),
        "color": ServiceOffering(id="color", name="Coloring", duration_minutes=90, price=Decimal("80.00")),
    }


@pytest.fixture
def store() -> MemoryBookingStore:
    return MemoryBookingStore()


@pytest.fixture
def lifecycle(store: MemoryBookingStore) -> BookingLifecycle:
    return BookingLifecycle(store, clock=TickingClock())


@pytest.fixture
def publisher() -> LoggingEventPublisher:
    return LoggingEventPublisher()


@pytest.fixture
def booking_service(store, lifecycle, salon, services, publisher) -> BookingService:
    return BookingService(
        store=store,
        lifecycle=lifecycle,
        salons=MemorySalonDirectory({salon.id: salon}),
        catalog=MemoryServiceCatalog(services),
        users=MemoryUserDirectory({
            "cust": Customer(id="cust", email="cust@example.com"),
            "owner": Customer(id="owner", email="owner@example.com"),
        }),
        publisher=publisher,
    )
