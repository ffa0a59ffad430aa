"""Application state: the latest snapshot of every backend collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from pos_client.models.core import CashClosure, Config, MenuItem, Order, Transaction, Waiter

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Owned state object threaded through the bootstrap routines.

    Collections are replaced wholesale on refresh, never merged.
    """

    menu_items: List[MenuItem] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)
    transactions: List[Transaction] = field(default_factory=list)
    waiters: List[Waiter] = field(default_factory=list)
    config: Config = field(default_factory=dict)
    cash_closures: List[CashClosure] = field(default_factory=list)
    is_online: bool = True

    def set_online(self, online: bool) -> None:
        """Record a connectivity change reported by the platform.

        Only the flag changes; in-flight requests are neither aborted nor queued.
        """
        if online == self.is_online:
            return
        self.is_online = online
        if online:
            logger.info("Connection to the server restored")
        else:
            logger.warning("No connection to the server")
