"""Error types raised by pantry services."""


class PantryError(Exception):
    """Base class for pantry errors."""


class ProductNotFoundError(PantryError):
    """Raised when the product lookup has no match for a barcode."""

    def __init__(self, barcode: str) -> None:
        super().__init__("Product not found")
        self.barcode = barcode


class ProductLookupError(PantryError):
    """Raised when the product lookup fails for reasons other than a miss."""


class ValidationRejectedError(PantryError):
    """Raised when user input is rejected before any state changes."""


class MalformedStoredDataError(PantryError):
    """Raised when a persisted collection cannot be decoded."""
