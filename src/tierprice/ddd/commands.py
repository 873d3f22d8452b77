"""Messages sent to Application.execute(): commands compute, queries read."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """Immutable request; the application routes it by its exact type."""
    pass


@dataclass(frozen=True)
class Command(Message):
    """Asks the pricing context to compute a result (e.g. a quote)."""
    pass


@dataclass(frozen=True)
class Query(Message):
    """Reads catalog data without computing anything."""
    pass
