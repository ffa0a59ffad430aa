"""Tests for menu-item migrations and seed builders (pure functions)."""

import logging

from pos_client.config.constants import DEFAULT_MENU_ITEMS
from pos_client.services.migrations import (
    build_default_menu_items,
    build_default_waiters,
    migrate_menu_item,
    migrate_menu_items,
    normalize_category,
)


def _current(**overrides):
    item = {
        "id": "m1",
        "name": "Bolso",
        "cost": 1000,
        "price": 2000,
        "category": "Macramé",
        "images": ["a.png"],
        "available": True,
    }
    item.update(overrides)
    return item


def test_current_item_is_unchanged() -> None:
    item = _current()
    migrated, changed = migrate_menu_item(item)
    assert changed is False
    assert migrated == item


def test_missing_cost_defaults_to_zero() -> None:
    item = _current()
    del item["cost"]
    migrated, changed = migrate_menu_item(item)
    assert changed is True
    assert migrated["cost"] == 0


def test_existing_zero_or_null_cost_is_kept() -> None:
    """Only a missing key counts as missing."""
    migrated, changed = migrate_menu_item(_current(cost=None))
    assert changed is False
    assert migrated["cost"] is None


def test_legacy_img_becomes_one_element_images() -> None:
    item = _current(img="old.png")
    del item["images"]
    migrated, changed = migrate_menu_item(item)
    assert changed is True
    assert migrated["images"] == ["old.png"]
    assert "img" not in migrated


def test_missing_images_becomes_empty_list() -> None:
    item = _current()
    del item["images"]
    migrated, changed = migrate_menu_item(item)
    assert changed is True
    assert migrated["images"] == []


def test_string_images_is_wrapped_not_discarded() -> None:
    migrated, changed = migrate_menu_item(_current(images="photo.png"))
    assert changed is True
    assert migrated["images"] == ["photo.png"]


def test_malformed_images_reset_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="pos_client.services.migrations"):
        migrated, changed = migrate_menu_item(_current(images={"url": "x.png"}))
    assert changed is True
    assert migrated["images"] == []
    assert "discarding malformed images" in caplog.text


def test_category_renames() -> None:
    assert normalize_category("Cuero Artesanal") == "Cuero"
    assert normalize_category("Bolsos en TRAPILLO") == "Tejidos Crochet"
    assert normalize_category("trapillo") == "Tejidos Crochet"
    assert normalize_category("Macramé") == "Macramé"
    assert normalize_category(None) is None
    assert normalize_category("") == ""


def test_category_migration_marks_change() -> None:
    migrated, changed = migrate_menu_item(_current(category="Cuero Artesanal"))
    assert changed is True
    assert migrated["category"] == "Cuero"


def test_migration_does_not_mutate_input() -> None:
    item = _current(img="old.png", category="Cestas de trapillo")
    del item["images"]
    del item["cost"]
    snapshot = dict(item)
    migrate_menu_item(item)
    assert item == snapshot


def test_migrate_is_idempotent() -> None:
    legacy = [
        {"id": "1", "name": "A", "img": "a.png", "category": "Cuero Artesanal"},
        {"id": "2", "name": "B", "images": None, "category": "Trapillo XL"},
    ]
    once, changed_once = migrate_menu_items(legacy)
    twice, changed_twice = migrate_menu_items(once)
    assert changed_once is True
    assert changed_twice is False
    assert twice == once


def test_default_seed_records_have_unique_ids_and_fields() -> None:
    items = build_default_menu_items()
    assert len(items) == len(DEFAULT_MENU_ITEMS)
    assert len({item["id"] for item in items}) == len(items)
    for item in items:
        assert migrate_menu_item(item)[1] is False
    # Seeds are copies; mutating them never touches the constants
    items[0]["images"].append("new.png")
    assert "new.png" not in DEFAULT_MENU_ITEMS[0]["images"]


def test_default_waiters() -> None:
    waiters = build_default_waiters()
    assert [w["name"] for w in waiters] == ["Juan Pérez", "María García"]
    assert all(w["active"] for w in waiters)
    assert waiters[0]["id"] != waiters[1]["id"]
