"""Unit tests for middleware components.

Verifies that the locale context middleware resolves request paths with the
routing configuration it was given, that the LocaleContext data-class stores
all required fields, and that get_locale_context() falls back to the default.
"""

from unittest.mock import MagicMock

from myclinic.i18n import LocaleRoutingConfig, SupportedLocale, TextDirection
from myclinic.middleware import (
    ErrorHandlerMiddleware,
    LocaleContext,
    LocaleContextMiddleware,
    get_locale_context,
)

# ---------------------------------------------------------------------------
# LocaleContext
# ---------------------------------------------------------------------------


class TestLocaleContext:
    """Tests for the LocaleContext dataclass."""

    def test_stores_fields(self) -> None:
        """LocaleContext stores locale, direction and origin."""
        context = LocaleContext(
            locale=SupportedLocale.CKB, direction=TextDirection.RTL, from_path=True
        )

        assert context.locale == SupportedLocale.CKB
        assert context.direction == TextDirection.RTL
        assert context.from_path is True


# ---------------------------------------------------------------------------
# LocaleContextMiddleware.resolve
# ---------------------------------------------------------------------------


class TestLocaleContextMiddleware:
    """Tests for path resolution inside LocaleContextMiddleware."""

    def test_can_be_instantiated(self) -> None:
        """LocaleContextMiddleware wraps an ASGI app."""
        middleware = LocaleContextMiddleware(app=MagicMock())

        assert middleware is not None

    def test_locale_from_path(self) -> None:
        """A supported prefix sets the locale and marks it as from the path."""
        middleware = LocaleContextMiddleware(app=MagicMock())

        context = middleware.resolve("/en/patients")

        assert context.locale == SupportedLocale.EN
        assert context.direction == TextDirection.LTR
        assert context.from_path is True

    def test_unsupported_prefix_uses_default(self) -> None:
        """/fr/anything falls back to the default locale."""
        middleware = LocaleContextMiddleware(app=MagicMock())

        context = middleware.resolve("/fr/anything")

        assert context.locale == SupportedLocale.AR
        assert context.direction == TextDirection.RTL
        assert context.from_path is False

    def test_excluded_path_uses_default(self) -> None:
        """API paths are not negotiated even when they look localized."""
        middleware = LocaleContextMiddleware(app=MagicMock())

        context = middleware.resolve("/api/en/patients")

        assert context.locale == SupportedLocale.AR
        assert context.from_path is False

    def test_uses_given_config(self) -> None:
        """A custom routing configuration changes the default."""
        config = LocaleRoutingConfig(default_locale=SupportedLocale.KMR)
        middleware = LocaleContextMiddleware(app=MagicMock(), config=config)

        assert middleware.resolve("/patients").locale == SupportedLocale.KMR


# ---------------------------------------------------------------------------
# get_locale_context
# ---------------------------------------------------------------------------


class TestGetLocaleContext:
    """Tests for reading the locale context off a request."""

    def test_returns_attached_context(self) -> None:
        """The context set by the middleware is returned as is."""
        context = LocaleContext(
            locale=SupportedLocale.EN, direction=TextDirection.LTR, from_path=True
        )
        request = MagicMock()
        request.state.locale_context = context

        assert get_locale_context(request) is context

    def test_falls_back_to_app_default(self) -> None:
        """Without the middleware the application's default locale is used."""
        request = MagicMock()
        request.state.locale_context = None
        request.app.state.locale_routing = LocaleRoutingConfig(
            default_locale=SupportedLocale.EN
        )

        context = get_locale_context(request)

        assert context.locale == SupportedLocale.EN
        assert context.from_path is False


# ---------------------------------------------------------------------------
# ErrorHandlerMiddleware
# ---------------------------------------------------------------------------


class TestErrorHandlerMiddleware:
    """Tests for ErrorHandlerMiddleware construction."""

    def test_wraps_app(self) -> None:
        """ErrorHandlerMiddleware keeps a reference to the wrapped app."""
        app = MagicMock()

        assert ErrorHandlerMiddleware(app).app is app
