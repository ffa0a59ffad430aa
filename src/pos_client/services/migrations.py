"""Menu-item migrations and seed records (pure functions, no I/O)."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Tuple

from pos_client.config.constants import (
    CATEGORY_RENAMES,
    CROCHET_CATEGORY,
    DEFAULT_MENU_ITEMS,
    DEFAULT_WAITERS,
    TRAPILLO_KEYWORD,
)
from pos_client.models.core import MenuItem, Waiter
from pos_client.services.formatting import generate_id

logger = logging.getLogger(__name__)


def normalize_category(category: Any) -> Any:
    """Map legacy category labels to their current names; other values pass through."""
    if not isinstance(category, str) or not category:
        return category
    category = CATEGORY_RENAMES.get(category, category)
    if TRAPILLO_KEYWORD in category.lower():
        return CROCHET_CATEGORY
    return category


def _normalize_images(item: Dict[str, Any]) -> bool:
    """Fold the legacy img field into images and make images a list. Returns True if changed."""
    images = item.get("images")
    if isinstance(images, list):
        return False
    if item.get("img") and not images:
        item["images"] = [item.pop("img")]
    elif isinstance(images, str) and images:
        item["images"] = [images]
    else:
        if images is not None:
            logger.warning("Menu item %s: discarding malformed images value %r", item.get("id"), images)
        item["images"] = []
    return True


def migrate_menu_item(item: MenuItem) -> Tuple[MenuItem, bool]:
    """
    Bring one menu item up to the current shape.

    - cost defaults to 0 when missing
    - a legacy single img becomes a one-element images list
    - images is always a list
    - legacy category labels are renamed

    The input is not modified.

    Returns:
        (migrated_item, changed). Running it again on migrated_item
        returns changed=False.
    """
    migrated: Dict[str, Any] = copy.deepcopy(dict(item))
    changed = False
    if "cost" not in migrated:
        migrated["cost"] = 0
        changed = True
    if _normalize_images(migrated):
        changed = True
    category = migrated.get("category")
    renamed = normalize_category(category)
    if renamed != category:
        migrated["category"] = renamed
        changed = True
    return migrated, changed  # type: ignore[return-value]


def migrate_menu_items(items: List[MenuItem]) -> Tuple[List[MenuItem], bool]:
    """Migrate a whole collection. Returns (items, changed) where changed is True if any record changed."""
    migrated: List[MenuItem] = []
    any_changed = False
    for item in items:
        new_item, changed = migrate_menu_item(item)
        migrated.append(new_item)
        any_changed = any_changed or changed
    return migrated, any_changed


def build_default_menu_items() -> List[MenuItem]:
    """Return the example catalogue with freshly generated ids."""
    return [{"id": generate_id(), **copy.deepcopy(entry)} for entry in DEFAULT_MENU_ITEMS]  # type: ignore[misc]


def build_default_waiters() -> List[Waiter]:
    """Return the two default waiters with freshly generated ids."""
    return [{"id": generate_id(), **entry} for entry in DEFAULT_WAITERS]  # type: ignore[misc]
