"""Pytest configuration for railyard benchmarks."""


def pytest_configure(config):
    """Register the benchmark marker."""
    config.addinivalue_line("markers", "benchmark: mark test as a benchmark")
