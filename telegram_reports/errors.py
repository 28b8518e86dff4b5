from __future__ import annotations


class DeliveryError(Exception):
    """Raised when the messaging provider does not accept a message."""

    def __init__(self, description: str, error_code: int | None = None):
        super().__init__(description if error_code is None else f"[{error_code}] {description}")
        self.description = description
        self.error_code = error_code
