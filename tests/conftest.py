"""Shared fixtures: the upstream document used across the suite."""

import pytest


@pytest.fixture
def upstream_doc() -> dict:
    """Two-item upstream response, as returned by the search API."""
    return {
        "results": [
            {"title": "Push Event", "syntax": "on push", "category": "Events"},
            {"title": "Loop", "syntax": "loop %integer%", "category": "Control"},
        ]
    }
