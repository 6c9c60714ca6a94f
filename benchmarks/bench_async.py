"""Benchmarks for AsyncResult chains and concurrent collection.

Run with: pytest benchmarks/ --benchmark-only -v
"""

import asyncio

from railyard import AsyncResult, Ok, ok_async, try_async


async def _double(x: int) -> int:
    return x * 2


class TestAsyncResult:
    """Benchmark resolving AsyncResult chains under asyncio."""

    def test_settled_await(self, benchmark):
        async def run():
            return await ok_async(1)

        benchmark(lambda: asyncio.run(run()))

    def test_bridged_chain(self, benchmark):
        async def run():
            return await Ok(1).map(_double).map(lambda x: x + 1).and_then(lambda x: Ok(x))

        benchmark(lambda: asyncio.run(run()))

    def test_try_async(self, benchmark):
        async def run():
            return await try_async(lambda: _double(2))

        benchmark(lambda: asyncio.run(run()))

    def test_collect_100(self, benchmark):
        async def run():
            return await AsyncResult.collect(Ok(i).map(_double) for i in range(100))

        benchmark(lambda: asyncio.run(run()))

    def test_collect_100_limited(self, benchmark):
        async def run():
            return await AsyncResult.collect((Ok(i).map(_double) for i in range(100)), limit=10)

        benchmark(lambda: asyncio.run(run()))
