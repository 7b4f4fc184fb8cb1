"""
Slow-query threshold configuration.
"""

from __future__ import annotations

import os

SLOW_QUERY_ENV_VAR = "BIRDSQL_SLOW_QUERY_MS"


def resolve_slow_query_ms(*, default: int, override: int | None = None) -> int:
    """
    Pick the slow-query threshold: explicit override, then environment, then default.
    """

    if override is not None:
        if override < 0:
            raise ValueError("slow_query_ms must be non-negative.")
        return override
    raw = os.getenv(SLOW_QUERY_ENV_VAR)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value for {SLOW_QUERY_ENV_VAR}: {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{SLOW_QUERY_ENV_VAR} must be non-negative.")
    return value
