"""
skdocs_cache/routers/syntaxes.py
Endpoints:
  GET /all          → the cached upstream document, verbatim
  GET /search?q=    → {"results": [...], "count": N}, substring match on
                      title / syntax / category (case-insensitive)

Both return 503 "Cache not ready yet" until the refresher has filled the cache.
All reads from in-memory cache only. Zero external calls.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from skdocs_cache.core.cache import CacheCell
from skdocs_cache.core.config import CACHE_NOT_READY
from skdocs_cache.core.query import search as search_results

router = APIRouter(tags=["syntaxes"])


def get_cache_cell(request: Request) -> CacheCell:
    return request.app.state.cache


def _cached_or_503(cache: CacheCell) -> Any:
    ready, doc = cache.snapshot()
    if not ready:
        raise HTTPException(503, detail=CACHE_NOT_READY)
    return doc


@router.get("/all")
async def get_all(cache: CacheCell = Depends(get_cache_cell)):
    return _cached_or_503(cache)


@router.get("/search")
async def search(
    q: str = Query(..., description="Case-insensitive substring of title, syntax or category"),
    cache: CacheCell = Depends(get_cache_cell),
):
    return search_results(_cached_or_503(cache), q)
