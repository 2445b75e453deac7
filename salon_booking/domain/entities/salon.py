from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time


@dataclass(frozen=True)
class Salon:
    id: str
    name: str
    open_time: time
    close_time: time
    owner_id: str | None = None

    def opening_window(self, day: date) -> tuple[datetime, datetime]:
        """Absolute open/close instants for the given calendar day."""
        return datetime.combine(day, self.open_time), datetime.combine(day, self.close_time)
