from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime

from salon_booking.application.exceptions import (
    BookingNotFoundError,
    BookingValidationError,
    SalonNotFoundError,
)
from salon_booking.application.ports.booking_store import BookingStorePort
from salon_booking.application.ports.event_publisher import EventPublisherPort
from salon_booking.application.ports.salon_directory import SalonDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.user_directory import UserDirectoryPort
from salon_booking.application.use_cases import report_aggregator
from salon_booking.application.use_cases.booking_lifecycle import BookingLifecycle
from salon_booking.domain.entities.booking import Booking, BookingStatus
from salon_booking.domain.entities.booking_event import (
    BOOKING_CREATED,
    NOTIFICATION_SEND,
    PAYMENT_PROCESS,
    BookingEvent,
)
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.report import ChartPoint, SalonReport
from salon_booking.domain.entities.salon import Salon


class BookingService:
    """Booking operations exposed to the API layer and message consumers."""

    def __init__(
        self,
        store: BookingStorePort,
        lifecycle: BookingLifecycle,
        salons: SalonDirectoryPort,
        catalog: ServiceCatalogPort,
        users: UserDirectoryPort,
        publisher: EventPublisherPort,
    ) -> None:
        self._store = store
        self._lifecycle = lifecycle
        self._salons = salons
        self._catalog = catalog
        self._users = users
        self._publisher = publisher
        self._logger = logging.getLogger(__name__)

    # -- collaborators --------------------------------------------------

    def current_customer(self, token: str) -> Customer | None:
        return self._users.get_user_from_token(token)

    def salon_for_owner(self, token: str) -> Salon | None:
        return self._salons.get_salon_by_owner(token)

    # -- create ---------------------------------------------------------

    def create_booking(
        self,
        customer_id: str,
        salon_id: str,
        start: datetime,
        service_ids: Sequence[str],
        token: str | None = None,
    ) -> Booking:
        requested = {str(s) for s in service_ids}
        if not requested:
            raise BookingValidationError("At least one service must be selected.")

        salon = self._salons.get_salon(salon_id, token)
        if salon is None:
            raise SalonNotFoundError(f"Salon {salon_id} not found")

        services = self._catalog.get_services_by_ids(sorted(requested))
        missing = requested - {s.id for s in services}
        if missing:
            raise BookingValidationError(f"Unknown services: {', '.join(sorted(missing))}")

        booking = self._lifecycle.create(customer_id, salon, start, services)

        payload = _event_payload(booking)
        self._publisher.publish(BookingEvent(BOOKING_CREATED, booking.id, payload))
        self._publisher.publish(BookingEvent(PAYMENT_PROCESS, booking.id, payload))
        return booking

    # -- read -----------------------------------------------------------

    def get_bookings_by_customer(self, customer_id: str) -> list[Booking]:
        return self._store.list_by_customer(customer_id)

    def get_bookings_by_salon(self, salon_id: str) -> list[Booking]:
        return self._store.list_by_salon(salon_id)

    def get_booking_by_id(self, booking_id: str) -> Booking:
        booking = self._store.get(booking_id)
        if booking is None:
            raise BookingNotFoundError(f"Booking {booking_id} not found")
        return booking

    def get_bookings_by_date(self, salon_id: str, day: date | None = None) -> list[Booking]:
        """All salon bookings, or those starting or ending on `day` when given."""
        bookings = self._store.list_by_salon(salon_id)
        if day is None:
            return bookings
        return [b for b in bookings if b.start_time.date() == day or b.end_time.date() == day]

    # -- update ---------------------------------------------------------

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking:
        booking = self._lifecycle.set_status(booking_id, status)
        self._notify(booking)
        return booking

    def on_payment_success(self, booking_id: str, payment_status: str | None = None) -> Booking | None:
        booking = self._lifecycle.mark_confirmed_from_payment(booking_id, payment_status)
        if booking is not None:
            self._notify(booking)
        return booking

    # -- reports --------------------------------------------------------

    def get_salon_report(self, salon_id: str, salon: Salon | None = None) -> SalonReport:
        if salon is None:
            salon = self._salons.get_salon(salon_id)
            if salon is None:
                raise SalonNotFoundError(f"Salon {salon_id} not found")
        return report_aggregator.compute_salon_report(self._store.list_by_salon(salon_id), salon)

    def get_earnings_series(self, salon_id: str) -> list[ChartPoint]:
        return report_aggregator.earnings_series(self._store.list_by_salon(salon_id))

    def get_booking_count_series(self, salon_id: str) -> list[ChartPoint]:
        return report_aggregator.booking_count_series(self._store.list_by_salon(salon_id))

    def _notify(self, booking: Booking) -> None:
        self._publisher.publish(BookingEvent(NOTIFICATION_SEND, booking.id, _event_payload(booking)))


def _event_payload(booking: Booking) -> dict[str, str | None]:
    return {
        "booking_id": booking.id,
        "customer_id": booking.customer_id,
        "salon_id": booking.salon_id,
        "status": booking.status.value,
        "start_time": booking.start_time.isoformat(),
        "end_time": booking.end_time.isoformat(),
        "total_price": str(booking.total_price),
    }
