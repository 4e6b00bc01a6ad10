"""
Keyed client-side cache for remote resources.

Each key is ``absent``, ``loading`` or ``present``. Concurrent ``get`` calls
for the same key share a single in-flight load; a failed load returns the
key to ``absent`` and re-raises to every waiter.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Generic, Hashable, TypeVar

from admin_core.models.enums import ResourceState

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ResourceStore(Generic[K, V]):
    """In-memory store keyed by resource id."""

    def __init__(self, name: str = "resource"):
        self.name = name
        self._values: dict[K, V] = {}
        self._pending: dict[K, asyncio.Future[V]] = {}

    def state(self, key: K) -> ResourceState:
        if key in self._pending:
            return ResourceState.LOADING
        if key in self._values:
            return ResourceState.PRESENT
        return ResourceState.ABSENT

    def peek(self, key: K) -> V | None:
        """Cached value without loading."""
        return self._values.get(key)

    async def get(self, key: K, loader: Callable[[], Awaitable[V]]) -> V:
        """
        Return the cached value, loading it on first use.

        Args:
            key: Resource id
            loader: Coroutine factory fetching the value

        Raises:
            Whatever ``loader`` raises; the key is left ``absent``.
        """
        if key in self._values:
            return self._values[key]
        pending = self._pending.get(key)
        if pending is not None:
            return await asyncio.shield(pending)

        future: asyncio.Future[V] = asyncio.get_running_loop().create_future()
        self._pending[key] = future
        try:
            value = await loader()
        except asyncio.CancelledError:
            future.cancel()
            raise
        except Exception as e:
            logger.warning(f"Failed to load {self.name} {key!r}: {e}")
            future.set_exception(e)
            # Mark retrieved so an unawaited failure does not warn
            future.exception()
            raise
        else:
            self._values[key] = value
            future.set_result(value)
            return value
        finally:
            self._pending.pop(key, None)

    def set(self, key: K, value: V) -> None:
        self._values[key] = value

    def invalidate(self, key: K | None = None) -> None:
        """Forget one key, or everything when ``key`` is ``None``."""
        if key is None:
            self._values.clear()
        else:
            self._values.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
