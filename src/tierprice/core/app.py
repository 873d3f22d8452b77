"""Application — composed from modules via app.register(module). Dispatches commands and queries in process."""
from __future__ import annotations

import logging
from typing import Any, Callable

from tierprice.core.container import Container
from tierprice.core.module import Module
from tierprice.domain.errors import HandlerNotFoundError

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Each command or query type has exactly one handler; execute(message) calls it.
    """

    def __init__(self, config: Any = None) -> None:
        self._container = Container()
        self._handlers: dict[type, Callable[[Any], Any]] = {}
        if config is not None:
            self._container.register_instance(type(config), config)

    def register(self, module: Module) -> Application:
        """Register a module (DomainModule or any object with register_into). Returns self for chaining."""
        module.register_into(self)
        logger.debug("registered module %s", module.name)
        return self

    def add_command(self, cmd_type: type, endpoint: Callable[[Any], Any]) -> None:
        self._add_handler(cmd_type, endpoint)

    def add_query(self, query_type: type, endpoint: Callable[[Any], Any]) -> None:
        self._add_handler(query_type, endpoint)

    def _add_handler(self, message_type: type, endpoint: Callable[[Any], Any]) -> None:
        if message_type in self._handlers:
            raise ValueError(f"handler for {message_type.__name__} is already registered")
        self._handlers[message_type] = endpoint

    def execute(self, message: Any) -> Any:
        """Run the handler registered for type(message) and return its result."""
        endpoint = self._handlers.get(type(message))
        if endpoint is None:
            raise HandlerNotFoundError(f"no handler for {type(message).__name__}")
        return endpoint(message)

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container
