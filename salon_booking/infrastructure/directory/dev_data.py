from __future__ import annotations

from datetime import time
from decimal import Decimal

from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.salon import Salon
from salon_booking.domain.entities.service_offering import ServiceOffering

# Seed data for ENV=dev/local when no collaborator URLs are configured.
# Dev tokens are "Bearer <user id>".

USERS: dict[str, Customer] = {
    "1": Customer(id="1", email="owner@example.com", full_name="Salon Owner"),
    "2": Customer(id="2", email="customer@example.com", full_name="Demo Customer"),
}

SALONS: dict[str, Salon] = {
    "1": Salon(id="1", name="Downtown Studio", open_time=time(9, 0), close_time=time(18, 0), owner_id="1"),
}

SERVICE_OFFERINGS: dict[str, ServiceOffering] = {
    "1": ServiceOffering(id="1", name="Haircut", duration_minutes=30, price=Decimal("25.00"), salon_id="1"),
    "2": ServiceOffering(id="2", name="Beard Trim", duration_minutes=15, price=Decimal("12.50"), salon_id="1"),
    "3": ServiceOffering(id="3", name="Hair Coloring", duration_minutes=90, price=Decimal("80.00"), salon_id="1"),
}
