"""Provider base with mock/production selection."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider class without subclasses is concrete. A provider class with
    subclasses is a swappable component named by ``__mock_component__``; its
    subclasses mark themselves with ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_component(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def resolve(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Pick the implementation to instantiate.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        if not cls.is_component():
            return cls
        for implementation in cls.__subclasses__():
            if implementation.__is_mock__ == use_mock:
                return implementation
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {cls.__mock_component__}")
