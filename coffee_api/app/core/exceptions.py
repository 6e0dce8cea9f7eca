"""
Error taxonomy for coffee storage.

A missing coffee is not an error: lookups return ``None``, upserts
fall through to creation and deletes are no‑ops.  The exceptions below
cover the remaining failure modes and are translated into HTTP status
codes by the endpoint layer.
"""


class CoffeeError(Exception):
    """Base class for coffee storage errors."""


class CoffeeValidationError(CoffeeError):
    """Raised when a coffee record is malformed (e.g. blank name)."""


class DuplicateCoffeeError(CoffeeValidationError):
    """Raised when creating a coffee whose id is already stored."""

    def __init__(self, coffee_id: str) -> None:
        self.coffee_id = coffee_id
        super().__init__(f"Coffee with id '{coffee_id}' already exists")


class CoffeeStorageError(CoffeeError):
    """Raised when the backing store fails to read or write."""
