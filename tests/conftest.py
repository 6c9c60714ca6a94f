"""Pytest configuration and shared fixtures for railyard tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from railyard import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from railyard import Err

    return Err(ValueError("test error"))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from railyard import Some

    return Some("hello")


@pytest.fixture(autouse=True)
def reset_config():
    """Forget any configuration a test set through init()."""
    from railyard._config import reset

    reset()
    yield
    reset()
