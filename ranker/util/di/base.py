"""Provider base shared by production and test containers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory or canned implementations
Component = Literal["github", "persistence"]


class ProviderBase(Provider):
    """Dishka provider tagged with mock-selection metadata.

    Attributes:
        __mock_component__: Swappable component this provider belongs to,
            or None for providers that always run for real
        __is_mock__: True for the test double of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
