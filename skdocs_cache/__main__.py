"""
Run the cache server: python -m skdocs_cache

Listens on 0.0.0.0:$PORT (default 8080). If the port can't be bound,
uvicorn logs the error and exits non-zero before serving anything.
"""

import uvicorn

from skdocs_cache.core.config import HOST, LOG_LEVEL, PORT


def main() -> None:
    uvicorn.run(
        "skdocs_cache.main:app",
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
