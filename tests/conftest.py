import asyncio
from contextlib import asynccontextmanager

import pytest

from app.config import Settings


class FakeConnection:
    """Stands in for an asyncpg connection; returns canned rows for fetchval()."""

    def __init__(self, rows, delay: float = 0.0):
        self.rows = rows
        self.delay = delay
        self.calls = []

    async def fetchval(self, query, *args):
        self.calls.append((query, args))
        if self.delay:
            await asyncio.sleep(self.delay)
        if isinstance(self.rows, Exception):
            raise self.rows
        if not self.rows:
            return None
        return self.rows[0][0]


class FakePool:
    """Bounded pool double that records how many connections are out at once."""

    def __init__(self, connection: FakeConnection, max_size: int = 10):
        self.connection = connection
        self._slots = asyncio.Semaphore(max_size)
        self.in_use = 0
        self.peak_in_use = 0
        self.released = 0
        self.closed = False

    @asynccontextmanager
    async def acquire(self):
        async with self._slots:
            self.in_use += 1
            self.peak_in_use = max(self.peak_in_use, self.in_use)
            try:
                yield self.connection
            finally:
                self.in_use -= 1
                self.released += 1

    async def close(self):
        self.closed = True


@pytest.fixture
def make_pool():
    """Factory: make_pool(rows, delay=0.0, max_size=10) -> FakePool."""
    def _make(rows, delay: float = 0.0, max_size: int = 10) -> FakePool:
        return FakePool(FakeConnection(rows, delay=delay), max_size=max_size)
    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(
        db_host="localhost",
        db_port=5432,
        db_database="pokeverse",
        db_username="postgres",
        db_password="postgres",
    )
