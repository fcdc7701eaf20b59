"""Locale API endpoints.

Endpoints:
  GET    /api/locales          supported locales, default locale and prefix strategy
  GET    /api/locales/current  locale resolved for this request
  GET    /api/locales/resolve  how a front-end path resolves under the routing config
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, Field

from myclinic.i18n import LocaleRoutingConfig, get_all_locales_info, locale_routing
from myclinic.middleware.locale_context_middleware import get_locale_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/locales", tags=["locales"])


def _routing(request: Request) -> LocaleRoutingConfig:
    return getattr(request.app.state, "locale_routing", locale_routing)


class LocaleInfoResponse(BaseModel):
    code: str
    name: str
    native_name: str
    direction: str
    is_rtl: bool


class LocaleCatalogResponse(BaseModel):
    """Locale catalogue.

    Attributes:
        default_locale: Locale used when none is requested or supported
        locale_prefix: Prefix strategy for front-end paths
        locales: Supported locales in display order
    """

    default_locale: str
    locale_prefix: str
    locales: List[LocaleInfoResponse]


class CurrentLocaleResponse(BaseModel):
    locale: str
    direction: str
    from_path: bool


class LocaleResolutionResponse(BaseModel):
    """Result of resolving a front-end path.

    Attributes:
        path: Path as given
        matched: Whether the path takes part in locale negotiation
        locale: Resolved locale (default when unmatched or unsupported)
        path_locale: Supported locale found in the path, if any
        stripped_path: Path without its locale segment
        canonical_path: Path rebuilt with the configured prefix strategy
    """

    path: str
    matched: bool
    locale: str
    path_locale: Optional[str] = None
    stripped_path: str
    canonical_path: str


@router.get("", response_model=LocaleCatalogResponse, summary="List locales")
async def list_locales(request: Request):
    """List supported locales with their display metadata."""
    routing = _routing(request)
    return LocaleCatalogResponse(
        default_locale=routing.default_locale.value,
        locale_prefix=routing.locale_prefix.value,
        locales=[
            LocaleInfoResponse(**info.to_dict()) for info in get_all_locales_info()
        ],
    )


@router.get(
    "/current", response_model=CurrentLocaleResponse, summary="Request locale"
)
async def current_locale(request: Request):
    """Locale the locale context middleware resolved for this request.

    API paths are excluded from negotiation, so this reports the default
    locale unless the middleware is configured differently.
    """
    context = get_locale_context(request)
    return CurrentLocaleResponse(
        locale=context.locale.value,
        direction=context.direction.value,
        from_path=context.from_path,
    )


@router.get(
    "/resolve", response_model=LocaleResolutionResponse, summary="Resolve a path"
)
async def resolve_path(
    request: Request,
    path: str = Query(..., min_length=1, description="Front-end path, e.g. /en/patients")
):
    """Resolve a front-end path against the locale routing configuration.

    Unsupported locale segments such as /fr/... are not treated as locales;
    the path resolves to the default locale.
    """
    routing = _routing(request)
    matched = routing.matches(path)
    path_locale, stripped = (
        routing.split_locale(path) if matched else (None, path)
    )
    locale = path_locale or routing.default_locale

    logger.debug(f"Resolved {path} to locale {locale.value}")
    return LocaleResolutionResponse(
        path=path,
        matched=matched,
        locale=locale.value,
        path_locale=path_locale.value if path_locale else None,
        stripped_path=stripped,
        canonical_path=(
            routing.localized_path(locale, stripped) if matched else path
        ),
    )
