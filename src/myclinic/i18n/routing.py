"""Static locale routing configuration for the web front end.

Describes which paths take part in locale negotiation and how locale prefixes
are applied. Negotiating a locale from cookies or headers is not done here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from myclinic.exception.api_exceptions import ConfigurationError
from myclinic.i18n.locales import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    SupportedLocale,
    parse_locale,
)

# API routes, framework assets and public files
EXCLUDED_PREFIXES: Tuple[str, ...] = (
    "api",
    "_next/static",
    "_next/image",
    "favicon.ico",
    "icons",
    "manifest.json",
    "sw.js",
)


class LocalePrefix(str, Enum):
    """When a locale segment is added to generated paths."""

    AS_NEEDED = "as-needed"
    ALWAYS = "always"
    NEVER = "never"


def _normalize_path(path: str) -> str:
    if not path:
        return "/"
    return path if path.startswith("/") else f"/{path}"


@dataclass(frozen=True)
class LocaleRoutingConfig:
    """Locale routing configuration.

    Attributes:
        locales: Supported locales
        default_locale: Locale used when no supported locale is found
        locale_prefix: Prefix strategy for generated paths
        excluded_prefixes: Leading path segments never subject to negotiation
    """

    locales: Tuple[SupportedLocale, ...] = SUPPORTED_LOCALES
    default_locale: SupportedLocale = DEFAULT_LOCALE
    locale_prefix: LocalePrefix = LocalePrefix.AS_NEEDED
    excluded_prefixes: Tuple[str, ...] = EXCLUDED_PREFIXES

    def __post_init__(self) -> None:
        if not self.locales:
            raise ConfigurationError("At least one locale must be supported")
        if self.default_locale not in self.locales:
            raise ConfigurationError(
                f"Default locale '{self.default_locale.value}' is not supported",
                details={"locales": [locale.value for locale in self.locales]},
            )

    def is_supported(self, candidate: object) -> bool:
        locale = parse_locale(candidate)
        return locale is not None and locale in self.locales

    def resolve(self, candidate: object) -> SupportedLocale:
        """Supported candidate, or the default locale."""
        locale = parse_locale(candidate)
        if locale is not None and locale in self.locales:
            return locale
        return self.default_locale

    def matches(self, path: str) -> bool:
        """Whether a request path takes part in locale negotiation.

        Excludes API routes, static assets and any path with a file extension.
        """
        relative = _normalize_path(path)[1:]
        # plain prefix test, so /apis and /icons-dark are excluded as well
        if relative.startswith(self.excluded_prefixes):
            return False
        return "." not in relative

    def split_locale(self, path: str) -> Tuple[Optional[SupportedLocale], str]:
        """Split a leading supported locale segment off a path.

        Returns:
            (locale, remaining path); locale is None and the path is returned
            unchanged when the first segment is not a supported locale
        """
        normalized = _normalize_path(path)
        segment, _, rest = normalized[1:].partition("/")
        locale = parse_locale(segment)
        if locale is None or locale not in self.locales:
            return None, normalized
        return locale, f"/{rest}"

    def resolve_path(self, path: str) -> SupportedLocale:
        """Locale for a path: its supported prefix, otherwise the default."""
        locale, _ = self.split_locale(path)
        return locale or self.default_locale

    def localized_path(self, locale: SupportedLocale, path: str) -> str:
        """Apply the prefix strategy to a locale-free path."""
        normalized = _normalize_path(path)
        if self.locale_prefix == LocalePrefix.NEVER:
            return normalized
        if (
            self.locale_prefix == LocalePrefix.AS_NEEDED
            and locale == self.default_locale
        ):
            return normalized
        if normalized == "/":
            return f"/{locale.value}"
        return f"/{locale.value}{normalized}"


locale_routing = LocaleRoutingConfig()
