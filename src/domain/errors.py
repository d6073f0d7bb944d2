"""Domain errors."""


class ValidationError(ValueError):
    """Raised when a ledger entity violates its field constraints."""


__all__ = ["ValidationError"]
