"""Startup routines: load every collection into AppState and seed/migrate defaults."""

from __future__ import annotations

import logging
from typing import Any, List

from pos_client.config.constants import (
    CASH_CLOSURES_TABLE,
    CONFIG_TABLE,
    MENU_ITEMS_TABLE,
    ORDERS_TABLE,
    TRANSACTIONS_TABLE,
    WAITERS_TABLE,
)
from pos_client.models.state import AppState
from pos_client.services.api import ApiClient
from pos_client.services.errors import ApiError, FetchError
from pos_client.services.migrations import (
    build_default_menu_items,
    build_default_waiters,
    migrate_menu_items,
)

logger = logging.getLogger(__name__)


def load_initial_data(api: ApiClient, state: AppState) -> AppState:
    """
    Fetch every collection, one after another, into state.

    cash_closures is optional: if it cannot be fetched it becomes an empty
    list. config is a singleton: the first record of a non-empty array,
    otherwise {} (an empty array or a non-array body). Any other
    failure is logged and re-raised unchanged.

    Returns:
        The same state object, populated.
    """
    try:
        state.menu_items = api.get_all(MENU_ITEMS_TABLE)
        state.orders = api.get_all(ORDERS_TABLE)
        state.transactions = api.get_all(TRANSACTIONS_TABLE)
        state.waiters = api.get_all(WAITERS_TABLE)

        try:
            state.cash_closures = api.get_all(CASH_CLOSURES_TABLE)
        except FetchError:
            logger.warning("Table %s is not available on the server", CASH_CLOSURES_TABLE)
            state.cash_closures = []

        config_records = api.get_all(CONFIG_TABLE)
        state.config = config_records[0] if isinstance(config_records, list) and config_records else {}
    except ApiError as exc:
        logger.error("Error loading initial data: %s", exc)
        raise
    return state


def initialize_default_data(api: ApiClient, state: AppState) -> AppState:
    """
    Seed empty collections and migrate existing menu items.

    Safe to call on every startup: once the data is seeded and migrated,
    further calls issue no writes.
    """
    if not state.menu_items:
        state.menu_items = build_default_menu_items()
        logger.info("Menu is empty; installing %d example items", len(state.menu_items))
        api.save(MENU_ITEMS_TABLE, state.menu_items)
    else:
        migrated, changed = migrate_menu_items(state.menu_items)
        state.menu_items = migrated
        if changed:
            logger.info("Migrated menu items; saving %d records", len(migrated))
            api.save(MENU_ITEMS_TABLE, migrated)

    if not state.waiters:
        state.waiters = build_default_waiters()
        logger.info("No waiters found; installing %d defaults", len(state.waiters))
        api.save(WAITERS_TABLE, state.waiters)
    return state


def load_cash_closures(api: ApiClient) -> List[Any]:
    """Fetch the cash_closures collection. Errors propagate."""
    return api.get_all(CASH_CLOSURES_TABLE)
