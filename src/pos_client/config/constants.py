"""Backend address, shop timezone, collection names and seed catalogue.

The base URL and timezone are fixed here; there is no environment or
command-line override.
"""

from __future__ import annotations

from pathlib import Path

# Base directory for local data files (defaults to project root)
BASE_DIR = Path(__file__).resolve().parents[3]

# --- Backend ---
API_URL = "https://tribunal-strong-flags-testing.trycloudflare.com/api"
REQUEST_TIMEOUT = 10  # seconds

# Bulk saves: extra attempts after the first, and the linear backoff step
SAVE_RETRIES = 2
SAVE_RETRY_DELAY = 0.5  # seconds; attempt n waits n * SAVE_RETRY_DELAY

APP_TIMEZONE = "America/Bogota"

# --- Local persistence ---
STORAGE_FILE = str(BASE_DIR / "local_storage.json")

# --- Collections exposed by the backend ---
MENU_ITEMS_TABLE = "menu_items"
ORDERS_TABLE = "orders"
TRANSACTIONS_TABLE = "transactions"
WAITERS_TABLE = "waiters"
CASH_CLOSURES_TABLE = "cash_closures"  # optional on older servers
CONFIG_TABLE = "config"  # singleton, stored as a one-element collection

# --- Currency (es-CO, COP, no decimals) ---
CURRENCY_SYMBOL = "$"
THOUSANDS_SEPARATOR = "."

# Spanish short weekday names, Monday first (datetime.weekday() order)
WEEKDAY_ABBREVIATIONS = ["lun", "mar", "mié", "jue", "vie", "sáb", "dom"]

# Legacy category labels mapped to their current names
CATEGORY_RENAMES = {
    "Cuero Artesanal": "Cuero",
}
# Any category containing this keyword (case-insensitive) is folded into CROCHET_CATEGORY
TRAPILLO_KEYWORD = "trapillo"
CROCHET_CATEGORY = "Tejidos Crochet"

# Example catalogue installed when the menu is empty (ids are generated at seed time)
DEFAULT_MENU_ITEMS = [
    {
        "name": "Bolso Macramé Crudo",
        "description": "Bolso tejido a mano en hilo de algodón color crudo. Diseño elegante y espacioso.",
        "cost": 45000,
        "price": 85000,
        "category": "Macramé",
        "images": ["bolso_macrame_crudo.png"],
        "available": True,
    },
    {
        "name": "Cartera Zuncho Colorida",
        "description": "Cartera resistente tejida en zuncho con patrones geométricos vibrantes.",
        "cost": 35000,
        "price": 65000,
        "category": "Bolsos en Zuncho",
        "images": ["zuncho_artesanal.png"],
        "available": True,
    },
    {
        "name": "Cesta Organizadora",
        "description": "Cesta tejida en trapillo ideal para organizar espacios con estilo.",
        "cost": 25000,
        "price": 45000,
        "category": "Tejidos Crochet",
        "images": ["cesta_organizadora.png"],
        "available": True,
    },
]

DEFAULT_WAITERS = [
    {"name": "Juan Pérez", "active": True},
    {"name": "María García", "active": True},
]
