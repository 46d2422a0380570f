"""Query result cache keyed by request URL"""

from typing import Any, Awaitable, Callable, Dict

from workmongolia.core.logging import get_logger

logger = get_logger(__name__)


def _under(key: str, prefix: str) -> bool:
    """``key`` is ``prefix`` itself or a path/query below it"""
    if key == prefix:
        return True
    if prefix.endswith(("/", "?")):
        return key.startswith(prefix)
    return key.startswith(prefix + "/") or key.startswith(prefix + "?")


class QueryCache:
    """
    Holds the last successful result of each list query.

    ``invalidate`` drops every entry under the given path prefix, so
    invalidating ``/api/v1/admin/job-options`` refreshes all option lists.
    It also bumps the generation of those keys: a load that was already in
    flight when its key was invalidated is not stored when it completes.
    A failed load leaves the previous entry in place.
    """

    def __init__(self):
        self._entries: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def generation(self, key: str) -> int:
        return self._generations.get(key, 0)

    async def fetch(self, key: str, loader: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached value for ``key``, loading it on a miss"""
        if key in self._entries:
            return self._entries[key]

        started = self._generations.setdefault(key, 0)
        value = await loader()
        if self.generation(key) == started:
            self._entries[key] = value
        else:
            logger.debug(f"Discarded load of {key} invalidated while in flight")
        return value

    def invalidate(self, prefix: str) -> int:
        """
        Drop entries under ``prefix``

        Returns:
            Number of entries removed
        """
        for key in self._generations:
            if _under(key, prefix):
                self._generations[key] += 1

        stale = [key for key in self._entries if _under(key, prefix)]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Invalidated {len(stale)} cached queries under {prefix}")
        return len(stale)
