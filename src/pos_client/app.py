"""Application bootstrap and core API entrypoints for the POS client.

Provides a small core API (create_api, create_state, start) for use by
the UI layer or scripts. The UI reads the returned AppState and calls the
ApiClient directly for mutations.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config.constants import API_URL
from .models.state import AppState
from .services import bootstrap
from .services.api import ApiClient
from .services.errors import ApiError
from .services.formatting import notify

logger = logging.getLogger(__name__)


def create_api(base_url: Optional[str] = None) -> ApiClient:
    """Return an ApiClient for base_url (defaults to the configured API_URL)."""
    return ApiClient(base_url or API_URL)


def create_state() -> AppState:
    """Return an empty AppState, ready for load_initial_data."""
    return AppState()


def start(api: Optional[ApiClient] = None, state: Optional[AppState] = None) -> AppState:
    """Load every collection and seed/migrate defaults.

    Args:
        api: Client to use; a default one is created when omitted.
        state: State to populate; a fresh one is created when omitted.

    Returns:
        The populated AppState. Raises ApiError if a required collection
        cannot be loaded or a seed/migration save fails.
    """
    api = api or create_api()
    state = state if state is not None else create_state()
    bootstrap.load_initial_data(api, state)
    bootstrap.initialize_default_data(api, state)
    return state


def main() -> None:
    """Run startup against the configured backend and log a summary."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        state = start()
    except ApiError as exc:
        notify(f"Could not load data from the server: {exc}", "error")
        sys.exit(1)
    logger.info(
        "Loaded %d menu items, %d orders, %d transactions, %d waiters, %d cash closures",
        len(state.menu_items),
        len(state.orders),
        len(state.transactions),
        len(state.waiters),
        len(state.cash_closures),
    )


if __name__ == "__main__":
    main()
