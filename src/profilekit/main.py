"""Application entry point and composition root."""

import random

from profilekit.application.factories import ProfileFactory
from profilekit.config import Settings, get_settings
from profilekit.infrastructure.generators import RandomAgeGenerator, RandomNameGenerator
from profilekit.infrastructure.registry import InMemoryRoleRegistry
from profilekit.interfaces.api.app import create_app
from profilekit.logging import configure_logging


def build_registry() -> InMemoryRoleRegistry:
    """One registry per process, seeded with the default roles."""
    return InMemoryRoleRegistry()


def build_factory(registry: InMemoryRoleRegistry, settings: Settings) -> ProfileFactory:
    """Factory with random generators seeded from settings."""
    seed = settings.random_seed
    return ProfileFactory(
        registry,
        name_generator=RandomNameGenerator(seed=seed),
        age_generator=RandomAgeGenerator(seed=seed),
        min_age=settings.min_age,
        max_age=settings.max_age,
        rng=random.Random(seed),
    )


def create_profilekit_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.effective_log_level)
    registry = build_registry()
    return create_app(registry, build_factory(registry, settings))


def main() -> None:
    """CLI entry point."""
    from profilekit.interfaces.cli import run

    raise SystemExit(run())


def run_server(host: str | None = None, port: int | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_profilekit_app()
    uvicorn.run(app, host=host or settings.host, port=port or settings.port)
