"""Officials library — pluggable elected-official data sourcing.

Public API:
    - OfficialRecord: Normalized, read-only record for an official from any provider
    - OfficialLink / ContactDetail / OfficialIdentifier: Record sub-entries
    - BaseOfficialsProvider: Abstract provider interface
    - OfficialsProviderError: Provider-level error
    - get_provider: Provider factory/registry
    - get_configured_provider: Build the provider named in settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from legislator_lookup.lib.officials.base import (
    BaseOfficialsProvider,
    ContactDetail,
    OfficialIdentifier,
    OfficialLink,
    OfficialRecord,
    OfficialsProviderError,
)
from legislator_lookup.lib.officials.open_states import OpenStatesProvider

if TYPE_CHECKING:
    from legislator_lookup.core.config import Settings

_PROVIDERS: dict[str, type[BaseOfficialsProvider]] = {}


def get_provider(name: str, **kwargs: Any) -> BaseOfficialsProvider:
    """Get an officials-provider instance by name.

    Args:
        name: Provider name (e.g., "open_states").
        **kwargs: Additional arguments forwarded to the provider constructor.

    Returns:
        An instance of the requested provider.

    Raises:
        ValueError: If the provider is not registered.
    """
    cls = _PROVIDERS.get(name)
    if cls is None:
        msg = f"Unknown officials provider: {name!r}. Available: {list(_PROVIDERS.keys())}"
        raise ValueError(msg)
    return cls(**kwargs)


def register_provider(name: str, cls: type[BaseOfficialsProvider]) -> None:
    """Register a provider class in the global registry.

    Args:
        name: Short name for the provider.
        cls: Provider class (must subclass BaseOfficialsProvider).
    """
    if name in _PROVIDERS:
        logger.warning(f"Overwriting existing officials provider {name!r}")
    _PROVIDERS[name] = cls


def get_configured_provider(settings: Settings) -> BaseOfficialsProvider | None:
    """Build the officials provider selected in settings, if it is fully configured.

    Args:
        settings: Application settings.

    Returns:
        A configured provider, or None when its API key is missing.

    Raises:
        ValueError: If the configured provider is not registered.
    """
    provider_kwargs: dict[str, dict[str, Any]] = {
        "open_states": {
            "api_key": settings.open_states_api_key or "",
            "timeout": settings.open_states_timeout,
        },
    }
    provider = get_provider(settings.officials_provider, **provider_kwargs.get(settings.officials_provider, {}))
    if not provider.is_configured:
        return None
    return provider


register_provider("open_states", OpenStatesProvider)

__all__ = [
    "BaseOfficialsProvider",
    "ContactDetail",
    "OfficialIdentifier",
    "OfficialLink",
    "OfficialRecord",
    "OfficialsProviderError",
    "OpenStatesProvider",
    "get_configured_provider",
    "get_provider",
    "register_provider",
]
