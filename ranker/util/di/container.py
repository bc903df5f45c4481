"""Production container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from ranker.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container the API runs with.

    Every mockable component resolves to its real implementation
    (PostgreSQL repositories, the GitHub OAuth client). Settings come from
    the environment when the config provider first resolves them.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app so DishkaRoute can inject per request."""
    setup_dishka(container, app)
