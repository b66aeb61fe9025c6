"""
skdocs_cache/core/config.py
═══════════════════════════════════════════════════════════════════════════════
UPSTREAM:

  api.skdocs.org  →  one search request covering every syntax of the
                     tracked addons, fetched once at startup

The addon list is baked in; only the listening port and log level come
from the environment.
═══════════════════════════════════════════════════════════════════════════════
"""

import os

# ── Upstream ──────────────────────────────────────────────────────────────────
UPSTREAM_BASE  = "https://api.skdocs.org/api/search"
UPSTREAM_QUERY = "ALL_ADDON_SYNTAXES"

ADDONS: tuple[str, ...] = (
    "Skript",
    "SkBee",
    "skript-reflect",
    "skript-gui",
    "skNoise",
    "skript-particle",
)

UPSTREAM_URL = f"{UPSTREAM_BASE}?q={UPSTREAM_QUERY}&addon={','.join(ADDONS)}"

RETRY_DELAY_S = 5.0

# ── Server ────────────────────────────────────────────────────────────────────
HOST      = "0.0.0.0"
PORT      = int(os.environ.get("PORT", "8080"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

VERSION = "1.0.0"

CACHE_NOT_READY = "Cache not ready yet"

# Item fields inspected by /search, in match order
SEARCH_FIELDS: tuple[str, ...] = ("title", "syntax", "category")
