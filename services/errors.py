"""Error taxonomy for receipt submission and lookup."""

from typing import Optional


class ReceiptPointsError(Exception):
    """Base exception for receipt points failures."""


class InvalidReceiptError(ReceiptPointsError):
    """Raised when a submitted receipt fails validation."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class IdentifierSpaceExhaustedError(ReceiptPointsError):
    """Raised when no unused receipt id could be generated within the attempt limit."""

    def __init__(self, attempts: int, message: Optional[str] = None):
        super().__init__(message or f"failed to generate a unique id after {attempts} attempts")
        self.attempts = attempts
