"""Domain errors: each carries a stable code and a human message."""


class TierPriceError(Exception):
    """Base error: code + message, rendered as "[code] message"."""

    code = "TIERPRICE_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.code = code or self.code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class InvalidTierError(TierPriceError):
    """Tier is not one of the recognized tiers."""

    code = "INVALID_TIER"


class InvalidAmountError(TierPriceError):
    code = "INVALID_AMOUNT"


class InvalidRateError(TierPriceError):
    code = "INVALID_RATE"


class DuplicateTierError(TierPriceError):
    code = "DUPLICATE_TIER"


class HandlerNotFoundError(TierPriceError):
    """No handler registered for a command or query type."""

    code = "HANDLER_NOT_FOUND"
