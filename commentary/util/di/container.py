"""Dependency injection container."""

from contextlib import asynccontextmanager
from typing import Iterable

import logfire
from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from commentary.util.di import PROVIDERS, get_provider


def build_container(providers: Iterable[Provider]) -> AsyncContainer:
    """Assemble a container from provider instances.

    FastapiProvider is always added so DishkaRoute handlers can resolve
    the current Request.

    Args:
        providers: Instantiated providers, one per component

    Returns:
        Configured DI container
    """
    providers = list(providers)
    logfire.debug(
        "Building DI container",
        providers=[type(provider).__name__ for provider in providers],
    )
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    return build_container(get_provider(base, use_mock=False)() for base in PROVIDERS)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI app.

    The container is closed when the app shuts down, which disposes the
    database engine.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)

    inner_lifespan = app.router.lifespan_context

    @asynccontextmanager
    async def lifespan(app_instance: FastAPI):
        async with inner_lifespan(app_instance) as state:
            yield state
        await container.close()

    app.router.lifespan_context = lifespan
