"""Supported locales and their display metadata.

Supported languages:
    - ar: Arabic (RTL)
    - en: English (LTR)
    - ckb: Kurdish Sorani (RTL)
    - kmr: Kurdish Badini/Kurmanji (LTR)
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional


class SupportedLocale(str, Enum):
    AR = "ar"
    EN = "en"
    CKB = "ckb"
    KMR = "kmr"


class TextDirection(str, Enum):
    RTL = "rtl"
    LTR = "ltr"


DEFAULT_LOCALE = SupportedLocale.AR

SUPPORTED_LOCALES = tuple(SupportedLocale)

RTL_LOCALES: FrozenSet[SupportedLocale] = frozenset(
    {SupportedLocale.AR, SupportedLocale.CKB}
)

LOCALE_NAMES: Dict[SupportedLocale, str] = {
    SupportedLocale.AR: "العربية",
    SupportedLocale.EN: "English",
    SupportedLocale.CKB: "کوردی سۆرانی",
    SupportedLocale.KMR: "Kurmancî",
}

LOCALE_NATIVE_NAMES: Dict[SupportedLocale, str] = {
    SupportedLocale.AR: "العربية",
    SupportedLocale.EN: "English",
    SupportedLocale.CKB: "کوردی",
    SupportedLocale.KMR: "Kurdî",
}


@dataclass(frozen=True)
class LocaleInfo:
    """Display metadata for one locale.

    Attributes:
        code: Locale code
        name: Display name
        native_name: Short name in the locale's own script
        direction: Text direction
        is_rtl: Whether the locale is written right to left
    """

    code: str
    name: str
    native_name: str
    direction: TextDirection
    is_rtl: bool

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["direction"] = self.direction.value
        return data


def parse_locale(candidate: Any) -> Optional[SupportedLocale]:
    """Return the supported locale matching a code, or None."""
    if isinstance(candidate, SupportedLocale):
        return candidate
    if not isinstance(candidate, str):
        return None
    try:
        return SupportedLocale(candidate)
    except ValueError:
        return None


def is_supported(candidate: Any) -> bool:
    return parse_locale(candidate) is not None


def resolve_locale(
    candidate: Any, default: SupportedLocale = DEFAULT_LOCALE
) -> SupportedLocale:
    """Resolve a requested locale, falling back to the default when unsupported."""
    return parse_locale(candidate) or default


def is_rtl(locale: SupportedLocale) -> bool:
    return locale in RTL_LOCALES


def get_direction(locale: SupportedLocale) -> TextDirection:
    return TextDirection.RTL if is_rtl(locale) else TextDirection.LTR


def get_locale_info(locale: SupportedLocale) -> LocaleInfo:
    return LocaleInfo(
        code=locale.value,
        name=LOCALE_NAMES[locale],
        native_name=LOCALE_NATIVE_NAMES[locale],
        direction=get_direction(locale),
        is_rtl=is_rtl(locale),
    )


def get_all_locales_info() -> List[LocaleInfo]:
    return [get_locale_info(locale) for locale in SUPPORTED_LOCALES]
