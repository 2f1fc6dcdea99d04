import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ReadWriteLock:
    """An asyncio lock shared by many readers or held by a single writer.

    A writer waits until every reader has released the lock, and excludes all
    readers while it holds it. Waiting writers take precedence over new readers,
    so a steady flow of readers cannot starve them.

    Usage:
        async with lock.read():
            ...

        async with lock.write():
            ...
    """

    def __init__(self) -> None:
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def write_locked(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._condition:
            await self._condition.wait_for(lambda: not self._writer and not self._writers_waiting)
            self._readers += 1

        try:
            yield
        finally:
            async with self._condition:
                self._readers -= 1
                if not self._readers:
                    self._condition.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._condition:
            self._writers_waiting += 1
            try:
                await self._condition.wait_for(lambda: not self._writer and not self._readers)
            finally:
                self._writers_waiting -= 1
                # Readers held back by this writer must re-check if it gave up waiting.
                self._condition.notify_all()
            self._writer = True

        try:
            yield
        finally:
            async with self._condition:
                self._writer = False
                self._condition.notify_all()
