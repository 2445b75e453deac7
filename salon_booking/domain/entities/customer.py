from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    id: str
    email: str | None = None
    full_name: str | None = None
