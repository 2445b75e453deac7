from fastapi import FastAPI

from salon_booking.api.bookings import router as bookings_router
from salon_booking.api.charts import router as charts_router
from salon_booking.api.payments import router as payments_router
from salon_booking.core.config import settings
from salon_booking.core.log_setup import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Salon Booking Service", version="1.0.0")

app.include_router(charts_router, tags=["charts"])
app.include_router(payments_router, tags=["payments"])
app.include_router(bookings_router, tags=["bookings"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
