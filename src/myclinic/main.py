"""MyClinic contracts FastAPI application.

This module initializes and configures the request-validation API with
middleware and routers.
"""

# ruff: noqa: E402  load_dotenv() must run before any myclinic imports that read env

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from myclinic import __version__
from myclinic.config.app_settings import AppSettings
from myclinic.constants import WILDCARD_ORIGIN
from myclinic.controller import (
    health_controller,
    locale_controller,
    validation_controller,
)
from myclinic.i18n.locales import resolve_locale
from myclinic.i18n.routing import LocaleRoutingConfig
from myclinic.middleware import ErrorHandlerMiddleware, LocaleContextMiddleware
from myclinic.validation import default_registry

logger = logging.getLogger(__name__)


def configure_logging(app_settings: AppSettings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=app_settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def configure_cors_middleware(application: FastAPI, allowed_origins: list[str]) -> None:
    """Configure CORS middleware with specified origins."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def configure_locale_context_middleware(
    application: FastAPI, app_settings: AppSettings
) -> None:
    """Configure locale context middleware with the configured default locale."""
    config = LocaleRoutingConfig(
        default_locale=resolve_locale(app_settings.default_locale)
    )
    application.state.locale_routing = config
    application.add_middleware(LocaleContextMiddleware, config=config)


def configure_error_handlers_middleware(
    app: FastAPI, app_settings: AppSettings
) -> None:
    """Set up error handlers for FastAPI application."""
    app.state.debug = app_settings.debug
    app.state.environment = app_settings.environment

    app.add_middleware(ErrorHandlerMiddleware)

    logger.info(
        "Error handling middleware configured",
        extra={"debug": app.state.debug, "environment": app.state.environment},
    )


def register_api_routers(application: FastAPI) -> None:
    """Register all API route controllers."""
    application.include_router(health_controller.router)
    application.include_router(validation_controller.router)
    application.include_router(locale_controller.router)


def create_app(app_settings: Optional[AppSettings] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings: Settings to use (read from the environment when omitted)

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or AppSettings()
    configure_logging(app_settings)

    if app_settings.is_production():
        for problem in app_settings.validate_production_config():
            logger.warning(f"Production configuration issue: {problem}")

    application = FastAPI(
        title="MyClinic Contracts",
        description="""
# Request Validation Contracts

Validated request schemas for the MyClinic clinic-management API.

## Features

* **Explicit schemas**: ordered field rules per request payload
* **Complete error lists**: every violation is reported, never just the first
* **Dry runs**: check a payload against any schema without side effects
* **Locales**: supported locales and the locale routing configuration
""",
        version=__version__,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoint for monitoring service availability.",
            },
            {
                "name": "schemas",
                "description": "Request schema introspection, dry-run validation and normalization.",
            },
            {
                "name": "locales",
                "description": "Supported locales and locale routing resolution.",
            },
        ],
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.app_settings = app_settings
    application.state.schema_registry = default_registry

    cors_origins = app_settings.cors_origins or [WILDCARD_ORIGIN]
    configure_cors_middleware(application, cors_origins)
    configure_locale_context_middleware(application, app_settings)
    configure_error_handlers_middleware(application, app_settings)

    register_api_routers(application)

    logger.info(
        f"MyClinic contracts configured with {len(default_registry)} request schemas"
    )
    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = app.state.app_settings
    uvicorn.run(
        "myclinic.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
