from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from salon_booking.domain.entities.service_offering import ServiceOffering


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_services_by_ids(self, service_ids: Iterable[str]) -> list[ServiceOffering]:
        """Resolve service offerings. Unknown ids are left out of the result."""
        raise NotImplementedError
