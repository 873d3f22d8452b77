from tierprice.core.app import Application
from tierprice.core.container import Container
from tierprice.core.module import Module
from tierprice.core.config import Config, Settings
from tierprice.core.logging_config import configure_logging

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "Settings",
    "configure_logging",
]
