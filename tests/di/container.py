"""Test container: every swappable component mocked unless asked otherwise."""

from dishka import AsyncContainer, Provider

from forum.util.di import PROVIDERS, Component, build_container


def mockable_components() -> set[Component]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_component() and base.__mock_component__ is not None
    }


def build_test_container(
    unmock: set[Component] | None = None, *extra: Provider
) -> AsyncContainer:
    """Build a container for tests.

    Args:
        unmock: Components to run with their production implementation
        extra: Additional providers, e.g. FastapiProvider for HTTP tests

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # Unit tests: in-memory persistence
        container = build_test_container()

        # Integration tests: PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    known = mockable_components()
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
    return build_container(known - unmock, *extra)
