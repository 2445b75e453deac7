from __future__ import annotations

import logging

CONTEXT_KEYS = ("booking_id", "salon_id", "customer_id", "status", "event_type", "reason")


class ContextFormatter(logging.Formatter):
    """Appends booking context passed via `extra=` as key=value pairs."""

    def __init__(self, fmt: str | None = None, keys: tuple[str, ...] = CONTEXT_KEYS) -> None:
        super().__init__(fmt)
        self._keys = keys

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in self._keys
            if getattr(record, key, None) not in (None, "")
        )
        return f"{base} | {context}" if context else base


def configure_logging(level: str) -> logging.Handler:
    """Install a single stderr handler on the root logger. Unknown level names fall back to INFO."""
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
    return handler
