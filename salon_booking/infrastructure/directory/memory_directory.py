from __future__ import annotations

from collections.abc import Iterable

from salon_booking.application.ports.salon_directory import SalonDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.ports.user_directory import UserDirectoryPort
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.salon import Salon
from salon_booking.domain.entities.service_offering import ServiceOffering
from salon_booking.infrastructure.directory.dev_data import SALONS, SERVICE_OFFERINGS, USERS


def user_id_from_token(token: str) -> str:
    token = token.strip()
    if token.lower().startswith("bearer "):
        token = token[len("bearer "):]
    return token.strip()


class MemoryUserDirectory(UserDirectoryPort):
    def __init__(self, users: dict[str, Customer] | None = None) -> None:
        self._users = USERS if users is None else users

    def get_user_from_token(self, token: str) -> Customer | None:
        return self._users.get(user_id_from_token(token))


class MemorySalonDirectory(SalonDirectoryPort):
    def __init__(self, salons: dict[str, Salon] | None = None) -> None:
        self._salons = SALONS if salons is None else salons

    def get_salon(self, salon_id: str, token: str | None = None) -> Salon | None:
        return self._salons.get(salon_id)

    def get_salon_by_owner(self, token: str) -> Salon | None:
        owner_id = user_id_from_token(token)
        return next((s for s in self._salons.values() if s.owner_id == owner_id), None)


class MemoryServiceCatalog(ServiceCatalogPort):
    def __init__(self, services: dict[str, ServiceOffering] | None = None) -> None:
        self._services = SERVICE_OFFERINGS if services is None else services

    def get_services_by_ids(self, service_ids: Iterable[str]) -> list[ServiceOffering]:
        return [self._services[s] for s in service_ids if s in self._services]
