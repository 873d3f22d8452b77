"""
App composition — everything via module objects and app.register().
"""
from __future__ import annotations

from tierprice.core import Application, Settings, configure_logging
from tierprice.pricing import pricing_module


def create_app(settings: Settings | None = None) -> Application:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    app = Application(config=settings)
    app.register(pricing_module(settings=settings))
    return app
