"""Locale context middleware.

Resolves the request locale from a leading locale path segment using the
static routing configuration and attaches it to request.state. Unsupported
or missing locales fall back to the default; requests are never rejected.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from myclinic.i18n.locales import SupportedLocale, TextDirection, get_direction
from myclinic.i18n.routing import LocaleRoutingConfig, locale_routing

logger = logging.getLogger(__name__)


@dataclass
class LocaleContext:
    """Request-scoped locale information.

    Attributes:
        locale: Resolved locale
        direction: Text direction of the resolved locale
        from_path: Whether the locale came from the request path
    """

    locale: SupportedLocale
    direction: TextDirection
    from_path: bool


class LocaleContextMiddleware(BaseHTTPMiddleware):
    """Middleware that sets request.state.locale_context.

    Attributes:
        config: Locale routing configuration
    """

    def __init__(self, app, config: Optional[LocaleRoutingConfig] = None):
        """Initialize the middleware.

        Args:
            app: FastAPI application
            config: Locale routing configuration (module default when omitted)
        """
        super().__init__(app)
        self.config = config or locale_routing

    async def dispatch(self, request: Request, call_next):
        """Resolve the locale and attach it to request.state.

        Args:
            request: Incoming request
            call_next: Next middleware/handler

        Returns:
            Response from downstream handlers
        """
        request.state.locale_context = self.resolve(request.url.path)
        return await call_next(request)

    def resolve(self, path: str) -> LocaleContext:
        """Build the locale context for a request path."""
        locale = None
        if self.config.matches(path):
            locale, _ = self.config.split_locale(path)

        if locale is None:
            locale = self.config.default_locale
            from_path = False
        else:
            from_path = True

        logger.debug(f"Resolved locale {locale.value} for {path}")
        return LocaleContext(
            locale=locale, direction=get_direction(locale), from_path=from_path
        )


def get_locale_context(request: Request) -> LocaleContext:
    """Get the LocaleContext attached to this request.

    Falls back to the application's default locale when the middleware is
    not installed.

    Args:
        request: FastAPI request

    Returns:
        LocaleContext
    """
    context = getattr(request.state, "locale_context", None)
    if context is None:
        config = getattr(request.app.state, "locale_routing", locale_routing)
        default = config.default_locale
        context = LocaleContext(
            locale=default, direction=get_direction(default), from_path=False
        )
    return context
