"""Tests for sync Results lifting into AsyncResult when a transform is async."""

import asyncio
import functools

import pytest

from railyard import AsyncResult, Err, Ok, collect, first_ok, ok_async, partition
from railyard._internal.callables import is_async_callable


async def triple(x: int) -> int:
    await asyncio.sleep(0)
    return x * 3


async def fetch(x: int):
    return Ok(f"item-{x}")


class TestIsAsyncCallable:
    """Tests for async callable detection."""

    def test_coroutine_function(self):
        """async def functions are async callables."""
        assert is_async_callable(triple)

    def test_plain_function_and_lambda(self):
        """Plain functions and lambdas are not."""
        assert not is_async_callable(len)
        assert not is_async_callable(lambda x: x)

    def test_partial(self):
        """functools.partial of an async function is detected."""
        assert is_async_callable(functools.partial(triple))

    def test_async_call_method(self):
        """Objects with an async __call__ are detected."""

        class Handler:
            async def __call__(self, x):
                return x

        assert is_async_callable(Handler())

    def test_async_bound_method(self):
        """Bound async methods are detected."""

        class Service:
            async def load(self, x):
                return x

        assert is_async_callable(Service().load)


class TestMapBridging:
    """Tests for map / map_err with async transforms."""

    @pytest.mark.asyncio
    async def test_ok_map_async_lifts(self):
        """Ok.map with an async function returns an AsyncResult."""
        lifted = Ok(2).map(triple)
        assert isinstance(lifted, AsyncResult)
        assert await lifted == Ok(6)

    @pytest.mark.asyncio
    async def test_err_map_async_lifts_same_instance(self):
        """Err.map with an async function resolves to the same Err."""
        original = Err("e")
        lifted = original.map(triple)
        assert isinstance(lifted, AsyncResult)
        assert await lifted is original

    def test_err_map_sync_stays_sync(self):
        """Err.map with a sync function returns self."""
        original = Err("e")
        assert original.map(lambda x: x) is original

    @pytest.mark.asyncio
    async def test_err_map_err_async(self):
        """Err.map_err with an async function resolves to the new Err."""

        async def upper(e: str) -> str:
            return e.upper()

        assert await Err("e").map_err(upper) == Err("E")

    @pytest.mark.asyncio
    async def test_ok_map_err_async_lifts_same_instance(self):
        """Ok.map_err with an async function resolves to the same Ok."""

        async def upper(e: str) -> str:
            return e.upper()

        original = Ok(1)
        lifted = original.map_err(upper)
        assert isinstance(lifted, AsyncResult)
        assert await lifted is original

    @pytest.mark.asyncio
    async def test_chain_continues_after_lift(self):
        """Further combinators keep working on the lifted AsyncResult."""
        result = await Ok(1).map(triple).map(lambda x: x + 1).and_then(fetch)
        assert result == Ok("item-4")


class TestAndThenBridging:
    """Tests for and_then / or_else with async continuations."""

    @pytest.mark.asyncio
    async def test_ok_and_then_coroutine(self):
        """Ok.and_then wraps a coroutine in an AsyncResult."""
        lifted = Ok(1).and_then(fetch)
        assert isinstance(lifted, AsyncResult)
        assert await lifted == Ok("item-1")

    def test_ok_and_then_async_result_passes_through(self):
        """Ok.and_then returns an AsyncResult from f unchanged."""
        inner = ok_async(5)
        assert Ok(1).and_then(lambda _: inner) is inner

    @pytest.mark.asyncio
    async def test_err_and_then_async_lifts(self):
        """Err.and_then with an async function resolves to the same Err."""
        original = Err("stop")
        lifted = original.and_then(fetch)
        assert isinstance(lifted, AsyncResult)
        assert await lifted is original

    @pytest.mark.asyncio
    async def test_err_or_else_coroutine(self):
        """Err.or_else wraps a coroutine in an AsyncResult."""

        async def recover(e: str):
            return Ok(len(e))

        assert await Err("abc").or_else(recover) == Ok(3)

    def test_err_or_else_async_result_passes_through(self):
        """Err.or_else returns an AsyncResult from f unchanged."""
        inner = ok_async(0)
        assert Err("e").or_else(lambda _: inner) is inner

    @pytest.mark.asyncio
    async def test_ok_or_else_async_lifts(self):
        """Ok.or_else with an async function resolves to the same Ok."""

        async def recover(e):
            return Ok(0)

        original = Ok(9)
        assert await original.or_else(recover) is original


class TestCollectionBridging:
    """Tests for the free collection functions given async elements."""

    @pytest.mark.asyncio
    async def test_collect_with_async_result(self):
        """collect delegates to AsyncResult.collect for async elements."""
        lifted = collect([Ok(1), ok_async(2), Ok(3)])
        assert isinstance(lifted, AsyncResult)
        assert await lifted == Ok([1, 2, 3])

    @pytest.mark.asyncio
    async def test_collect_with_coroutine(self):
        """Coroutines of Results are accepted too."""
        assert await collect([fetch(1), Ok("x")]) == Ok(["item-1", "x"])

    @pytest.mark.asyncio
    async def test_partition_with_async_result(self):
        """partition delegates to AsyncResult.partition."""
        assert await partition([Err("a"), ok_async(1), Err("b")]) == Err(["a", "b"])

    @pytest.mark.asyncio
    async def test_first_ok_with_async_result(self):
        """first_ok delegates to AsyncResult.first_ok."""
        assert await first_ok([Err("a"), ok_async(1)]) == Ok(1)

    def test_collect_with_generator_of_results(self):
        """A generator of settled Results stays synchronous."""
        assert collect(Ok(i) for i in range(3)) == Ok([0, 1, 2])
