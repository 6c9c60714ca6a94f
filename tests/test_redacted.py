"""Tests for Redacted."""

import copy

import msgspec
import pytest

from railyard import ContractViolationError, Redacted
from railyard.redacted import REDACTED, enc_hook


class TestRedacted:
    """Tests for hiding values behind Redacted."""

    def test_value_round_trip(self):
        """Redacted.value returns the wrapped value."""
        secret = Redacted.make("api-key-123")
        assert Redacted.value(secret) == "api-key-123"

    def test_hidden_from_text(self):
        """repr, str and format never show the value."""
        secret = Redacted.make("api-key-123")
        assert repr(secret) == REDACTED
        assert str(secret) == REDACTED
        assert f"{secret}" == REDACTED
        assert f"{secret:>20}" == REDACTED
        assert "api-key-123" not in repr({"key": secret})

    def test_msgspec_encoding(self):
        """enc_hook renders Redacted as a placeholder."""
        secret = Redacted.make("api-key-123")
        encoded = msgspec.json.encode({"key": secret}, enc_hook=enc_hook)
        assert encoded == b'{"key":"<redacted>"}'

    def test_enc_hook_rejects_other_types(self):
        """enc_hook leaves unsupported types to msgspec."""
        with pytest.raises(NotImplementedError):
            enc_hook(object())

    def test_copy_drops_value(self):
        """A copy does not carry the wrapped value."""
        secret = Redacted.make("api-key-123")
        duplicate = copy.copy(secret)
        with pytest.raises(ContractViolationError):
            Redacted.value(duplicate)

    def test_unregistered_instance(self):
        """Instances not built by make() have no value."""
        with pytest.raises(ContractViolationError, match="not in registry"):
            Redacted.value(Redacted())

    def test_distinct_instances(self):
        """Each make() call yields an independent container."""
        a = Redacted.make(1)
        b = Redacted.make(2)
        assert Redacted.value(a) == 1
        assert Redacted.value(b) == 2
