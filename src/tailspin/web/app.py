"""Flask web application for Tailspin Toys.

The app factory builds the campaign store, seeds it once, and registers
the page and API blueprints. Seeding finishes before the app is returned,
so request handlers only ever read from the store.
"""

import logging
import os
import secrets
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Sequence

from flask import Flask, current_app

from tailspin import __version__
from tailspin.campaign.models import CampaignDraft
from tailspin.campaign.seed import resolve_dataset, seed_if_empty
from tailspin.config.models import WebConfig
from tailspin.storage.base import CampaignStore
from tailspin.storage.memory_store import MemoryStore

logger = logging.getLogger(__name__)

EXTENSION_KEY = "tailspin"


def get_services() -> dict[str, Any]:
    """Get the service registry of the current app. Called by blueprints."""
    return current_app.extensions[EXTENSION_KEY]


def get_store() -> CampaignStore:
    return get_services()["store"]


def format_money(value: Decimal, symbol: str = "$") -> str:
    """Format an amount with thousands separators, dropping zero cents."""
    if value == value.to_integral_value():
        return f"{symbol}{value:,.0f}"
    return f"{symbol}{value:,.2f}"


def create_app(
    config: Optional[WebConfig] = None,
    store: Optional[CampaignStore] = None,
    dataset: Optional[Sequence[CampaignDraft]] = None,
) -> Flask:
    """Create the Tailspin Flask application.

    Args:
        config: Web configuration. Defaults to WebConfig().
        store: Campaign store to serve. A fresh MemoryStore when omitted.
        dataset: Seed campaigns. Defaults to the config's seed file, or the
            built-in campaigns when no seed file is configured.

    Raises:
        ConfigError: If the configured seed file cannot be loaded.
    """
    config = config or WebConfig()

    app = Flask(
        __name__,
        template_folder=str(Path(__file__).parent / "templates"),
    )
    app.secret_key = (
        os.environ.get("TAILSPIN_SECRET_KEY")
        or config.secret_key
        or secrets.token_hex(32)
    )

    # --- Store and seed data ---
    store = store if store is not None else MemoryStore()
    if dataset is None:
        dataset = resolve_dataset(config)
    seed_if_empty(store, dataset)

    app.extensions[EXTENSION_KEY] = {
        "config": config,
        "store": store,
    }

    # --- Template helpers ---
    @app.template_filter("money")
    def money_filter(value):
        symbol = app.extensions[EXTENSION_KEY]["config"].currency_symbol
        return format_money(Decimal(value), symbol)

    @app.context_processor
    def inject_version():
        return {"version": __version__}

    # --- Register blueprints ---
    from tailspin.web.api.v1.campaigns import bp as api_campaigns_bp
    from tailspin.web.api.v1.health import bp as health_bp
    from tailspin.web.blueprints.campaigns import bp as campaigns_bp

    app.register_blueprint(campaigns_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(api_campaigns_bp)

    logger.info(f"Tailspin web app created with {store.count()} campaigns")
    return app
