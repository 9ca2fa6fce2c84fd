"""Repository pattern layer for WorldMap.

Provides abstract protocol interfaces and a resolve() helper that
transparently handles both sync (in-memory) and async (Postgres)
store returns.
"""

from __future__ import annotations

import inspect
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def resolve(value: T | Awaitable[T]) -> T:
    """Await a value if it is a coroutine, otherwise return it directly.

    This allows callers to use store methods uniformly:
        parcel = await resolve(store.get_parcel(owner_id, parcel_id))

    In-memory stores return plain values; Postgres repos return coroutines.
    """
    if inspect.isawaitable(value):
        return await value  # type: ignore[return-value]
    return value  # type: ignore[return-value]
