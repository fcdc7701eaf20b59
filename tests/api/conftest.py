"""Shared fixtures for API (controller) tests.

Builds a minimal FastAPI test application wired the same way as main.py:
request schema registry on app.state, locale context middleware and the error
handling middleware as the outermost layer.

Key exports:
    - app: FastAPI instance with all routers mounted
    - client: synchronous httpx TestClient
    - app_factory: builds apps with a custom registry, routing or debug flags
"""

import sys
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_test_app(
    registry=None,
    routing=None,
    debug: bool = False,
    environment: str = "test",
) -> FastAPI:
    """Build a FastAPI app with all routers and middleware installed.

    Args:
        registry: Schema registry to expose (default registry when omitted)
        routing: Locale routing configuration (module default when omitted)
        debug: Value for app.state.debug
        environment: Value for app.state.environment

    Returns:
        Configured FastAPI application
    """
    from myclinic.controller import (
        health_controller,
        locale_controller,
        validation_controller,
    )
    from myclinic.i18n import locale_routing
    from myclinic.middleware import ErrorHandlerMiddleware, LocaleContextMiddleware
    from myclinic.validation import default_registry

    _app = FastAPI()
    _app.state.schema_registry = registry if registry is not None else default_registry
    _app.state.locale_routing = routing or locale_routing
    _app.state.debug = debug
    _app.state.environment = environment

    _app.add_middleware(LocaleContextMiddleware, config=_app.state.locale_routing)
    _app.add_middleware(ErrorHandlerMiddleware)

    _app.include_router(health_controller.router)
    _app.include_router(validation_controller.router)
    _app.include_router(locale_controller.router)
    return _app


# ---------------------------------------------------------------------------
# App and client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app() -> FastAPI:
    return make_test_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Synchronous TestClient against the test app."""
    return TestClient(app)


@pytest.fixture
def app_factory():
    """Factory building apps with a custom registry, routing or debug flags."""
    return make_test_app
