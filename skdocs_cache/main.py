"""
skdocs_cache/main.py  — skdocs syntax cache
Startup: creates the cache, launches the one-shot refresher.
All endpoints are cache-read-only; nothing here ever calls upstream.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skdocs_cache.core.cache import CacheCell
from skdocs_cache.core.config import LOG_LEVEL, UPSTREAM_URL, VERSION, ADDONS
from skdocs_cache.core.http_client import close_all
from skdocs_cache.core.refresher import Refresher
from skdocs_cache.routers import syntaxes

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("🚀 skdocs cache starting...")
    app.state.refresher.start()
    yield
    log.info("🛑 Shutting down...")
    await app.state.refresher.stop()
    await close_all()


def create_app(
    cache: Optional[CacheCell] = None,
    refresher: Optional[Refresher] = None,
) -> FastAPI:
    """
    Build the application around one CacheCell shared by the refresher
    and the route handlers.
    """
    cache = cache or CacheCell()
    refresher = refresher or Refresher(cache)

    app = FastAPI(
        title="skdocs Syntax Cache",
        description=(
            "Read-only cache in front of api.skdocs.org. "
            "The full addon syntax list is fetched once at startup "
            "and served from memory."
        ),
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.cache = cache
    app.state.refresher = refresher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(syntaxes.router)

    @app.get("/", tags=["meta"])
    async def root():
        return {
            "status":   "online",
            "version":  VERSION,
            "upstream": UPSTREAM_URL,
            "addons":   list(ADDONS),
            "endpoints": {
                "all":    "/all",
                "search": "/search?q={query}",
                "health": "/health",
                "docs":   "/docs",
            },
        }

    @app.get("/health", tags=["meta"])
    async def health():
        """Liveness check. Always 200; `status` says whether the cache is warm."""
        summary = cache.summary()
        return {
            "status":    "healthy" if summary["ready"] else "warming_up",
            "cache":     summary,
            "refresher": refresher.status(),
        }

    return app


app = create_app()
