"""Per principal locks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class PrincipalLockRegistry:
    """Serialize read-modify-write sequences on the same principal.

    Locks are process local, workers in other processes are not
    excluded.
    """

    def __init__(self) -> None:
        """Create empty registry."""
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, name: str) -> AsyncIterator[None]:
        """Hold the lock of a principal.

        :param str name: principal name
        """
        lock = self._locks.setdefault(name, asyncio.Lock())
        self._holders[name] = self._holders.get(name, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[name] -= 1
            if not self._holders[name]:
                del self._holders[name]
                del self._locks[name]
