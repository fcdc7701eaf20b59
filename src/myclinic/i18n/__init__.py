"""Internationalization: supported locales and locale routing configuration."""

from myclinic.i18n.locales import (
    DEFAULT_LOCALE,
    RTL_LOCALES,
    SUPPORTED_LOCALES,
    LocaleInfo,
    SupportedLocale,
    TextDirection,
    get_all_locales_info,
    get_direction,
    get_locale_info,
    is_rtl,
    is_supported,
    resolve_locale,
)
from myclinic.i18n.routing import LocalePrefix, LocaleRoutingConfig, locale_routing

__all__ = [
    "DEFAULT_LOCALE",
    "RTL_LOCALES",
    "SUPPORTED_LOCALES",
    "LocaleInfo",
    "LocalePrefix",
    "LocaleRoutingConfig",
    "SupportedLocale",
    "TextDirection",
    "get_all_locales_info",
    "get_direction",
    "get_locale_info",
    "is_rtl",
    "is_supported",
    "locale_routing",
    "resolve_locale",
]
