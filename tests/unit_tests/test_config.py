"""Tests for mode selection."""

from courtify.config import Mode, resolve_mode


class TestResolveMode:
    def test_real_when_credentials_present(self):
        assert resolve_mode("acme", "secret") is Mode.REAL

    def test_missing_login_forces_simulated(self):
        assert resolve_mode("", "secret") is Mode.SIMULATED

    def test_missing_key_forces_simulated(self):
        assert resolve_mode("acme", "") is Mode.SIMULATED

    def test_override_forces_simulated(self):
        assert resolve_mode("acme", "secret", mock_override=True) is Mode.SIMULATED

    def test_override_cannot_enable_real_without_credentials(self):
        assert resolve_mode("", "", mock_override=False) is Mode.SIMULATED
