"""Unit tests for the officials provider registry."""

from unittest.mock import patch

import pytest

from legislator_lookup.core.config import Settings
from legislator_lookup.lib.officials import (
    OpenStatesProvider,
    get_configured_provider,
    get_provider,
    register_provider,
)
from legislator_lookup.lib.officials.base import BaseOfficialsProvider, OfficialRecord


class _StubProvider(BaseOfficialsProvider):
    """Stub provider for testing the registry."""

    @property
    def provider_name(self) -> str:
        return "stub"

    async def fetch_by_point(self, latitude: float, longitude: float) -> list[OfficialRecord]:
        return []


class _UnconfiguredProvider(_StubProvider):
    @property
    def is_configured(self) -> bool:
        return False


class TestProviderRegistry:
    """Tests for get_provider / register_provider."""

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown officials provider"):
            get_provider("nonexistent_provider")

    def test_register_and_get(self) -> None:
        register_provider("stub", _StubProvider)
        provider = get_provider("stub")
        assert provider.provider_name == "stub"

    def test_register_overwrites_with_warning(self) -> None:
        register_provider("overwrite_test", _StubProvider)
        with patch("legislator_lookup.lib.officials.logger") as mock_logger:
            register_provider("overwrite_test", _StubProvider)
        mock_logger.warning.assert_called_once()

    def test_open_states_registered(self) -> None:
        provider = get_provider("open_states", api_key="k")
        assert isinstance(provider, OpenStatesProvider)


class TestConfiguredProvider:
    def test_builds_open_states_from_settings(self, settings: Settings) -> None:
        provider = get_configured_provider(settings)
        assert isinstance(provider, OpenStatesProvider)
        assert provider.is_configured

    def test_missing_api_key_returns_none(self) -> None:
        assert get_configured_provider(Settings(_env_file=None, open_states_api_key=None)) is None

    def test_unknown_configured_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown officials provider"):
            get_configured_provider(Settings(_env_file=None, officials_provider="bogus"))

    def test_provider_is_configured_decides(self) -> None:
        register_provider("unconfigured_stub", _UnconfiguredProvider)
        assert get_configured_provider(Settings(_env_file=None, officials_provider="unconfigured_stub")) is None

    async def test_default_close_is_noop(self) -> None:
        await _StubProvider().close()
