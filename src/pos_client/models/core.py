"""Typed record structures mirrored from the backend collections."""

from __future__ import annotations

from typing import Any, Dict, List, TypedDict


class MenuItem(TypedDict, total=False):
    """A catalogue entry as stored in the menu_items collection.

    Records written before the current shape may lack ``cost``, carry the
    legacy single ``img`` field, or hold a malformed ``images`` value;
    services.migrations brings them up to date.
    """

    id: str
    name: str
    description: str
    cost: int
    price: int
    category: str
    images: List[str]
    img: str  # legacy, removed by migration
    available: bool


class Waiter(TypedDict, total=False):
    """A waiter as stored in the waiters collection."""

    id: str
    name: str
    active: bool


# Orders, transactions, cash closures and config are stored verbatim;
# this layer never looks inside them.
Order = Dict[str, Any]
Transaction = Dict[str, Any]
CashClosure = Dict[str, Any]
Config = Dict[str, Any]
