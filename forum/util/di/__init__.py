"""Dependency injection (dishka)."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider

# Concrete providers first, swappable components after
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def build_container(
    mocked: set[Component] | frozenset[Component] = frozenset(), *extra: Provider
) -> AsyncContainer:
    """Assemble a container from PROVIDERS.

    Args:
        mocked: Components to replace by their mock implementation
        extra: Additional providers appended as-is

    Returns:
        The async container
    """
    providers = [
        base.resolve(use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, *extra)


def create_container() -> AsyncContainer:
    """Production container, wired for FastAPI requests."""
    return build_container(frozenset(), FastapiProvider())


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_container",
    "create_container",
]
