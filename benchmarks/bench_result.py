"""Benchmarks comparing railyard Results with the returns library.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from returns.result import Failure, Success
from returns.result import safe as r_safe

from railyard import Err, Ok, collect, first_ok, partition, safe, try_

# =============================================================================
# Construction and combinators
# =============================================================================


class TestCombinators:
    """Benchmark construction and single combinator calls."""

    def test_ok_creation(self, benchmark):
        benchmark(Ok, 42)

    def test_returns_success_creation(self, benchmark):
        benchmark(Success, 42)

    def test_ok_map(self, benchmark):
        benchmark(Ok(5).map, lambda x: x * 2)

    def test_returns_map(self, benchmark):
        benchmark(Success(5).map, lambda x: x * 2)

    def test_err_map_passthrough(self, benchmark):
        """Err.map checks whether the skipped transform is async."""
        benchmark(Err("e").map, lambda x: x * 2)

    def test_returns_failure_map(self, benchmark):
        benchmark(Failure("e").map, lambda x: x * 2)

    def test_chain(self, benchmark):
        def chain():
            return Ok(5).map(lambda x: x + 1).and_then(lambda x: Ok(x * 2)).map_err(str)

        benchmark(chain)

    def test_returns_chain(self, benchmark):
        def chain():
            return Success(5).map(lambda x: x + 1).bind(lambda x: Success(x * 2)).alt(str)

        benchmark(chain)


# =============================================================================
# Capture boundaries
# =============================================================================


def _divide(a: int, b: int) -> float:
    return a / b


class TestCapture:
    """Benchmark try_ and @safe against returns' @safe."""

    def test_try_success(self, benchmark):
        benchmark(try_, lambda: _divide(10, 2))

    def test_try_failure(self, benchmark):
        benchmark(try_, lambda: _divide(10, 0), catch=type)

    def test_safe_failure(self, benchmark):
        benchmark(safe(_divide), 10, 0)

    def test_returns_safe_failure(self, benchmark):
        benchmark(r_safe(_divide), 10, 0)


# =============================================================================
# Collections
# =============================================================================


class TestCollections:
    """Benchmark collect, partition and first_ok over 100 Results."""

    def test_collect_all_ok(self, benchmark):
        benchmark(collect, [Ok(i) for i in range(100)])

    def test_collect_early_err(self, benchmark):
        benchmark(collect, [Ok(i) if i != 5 else Err("fail") for i in range(100)])

    def test_partition_mixed(self, benchmark):
        benchmark(partition, [Ok(i) if i % 3 else Err(i) for i in range(100)])

    def test_first_ok_late(self, benchmark):
        benchmark(first_ok, [Err(i) for i in range(99)] + [Ok(99)])
