from __future__ import annotations

import os

DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 10


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def pool_size() -> int:
    return int(os.getenv("DB_POOL_SIZE", DEFAULT_POOL_SIZE))


def max_overflow() -> int:
    return int(os.getenv("DB_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW))
