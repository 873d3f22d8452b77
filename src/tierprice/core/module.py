"""Module protocol: a named context that wires itself into an Application."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tierprice.core.app import Application


@runtime_checkable
class Module(Protocol):
    name: str

    def register_into(self, app: Application) -> None:
        """Add container bindings and message handlers to app."""
        ...
