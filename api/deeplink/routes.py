"""HTTP routes for deep-link resolution.

router: fixed well-known files.
catchall_router: every other path, dispatched by lib.deeplink.router.route()
so routing precedence lives in one place.
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, RedirectResponse
from loguru import logger

from lib.deeplink.config import Settings, load_settings
from lib.deeplink.models import LINK_KINDS, InvalidLinkError, ResourceKind
from lib.deeplink.pages import (
    render_android_page,
    render_desktop_page,
    render_ios_page,
)
from lib.deeplink.router import route
from lib.deeplink.strategy import (
    ImmediateRedirect,
    InteractiveAppOpen,
    InteractiveAppOpenIOS,
    PlainWebRedirect,
    StaticDesktopNotice,
    Strategy,
)
from services.deeplink import service

router = APIRouter()
catchall_router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


# ---------------------------------------------------------------------------
# Strategy → HTTP response
# ---------------------------------------------------------------------------


def _redirect(strategy: ImmediateRedirect) -> Response:
    return RedirectResponse(url=strategy.url, status_code=strategy.status_code)


RENDERERS = {
    ImmediateRedirect: _redirect,
    PlainWebRedirect: _redirect,
    InteractiveAppOpen: lambda s: HTMLResponse(render_android_page(s)),
    InteractiveAppOpenIOS: lambda s: HTMLResponse(render_ios_page(s)),
    StaticDesktopNotice: lambda s: HTMLResponse(render_desktop_page(s)),
}


def to_response(strategy: Strategy) -> Response:
    return RENDERERS[type(strategy)](strategy)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/.well-known/assetlinks.json")
async def assetlinks():
    statements = service.asset_links(load_settings())
    if statements is None:
        return PlainTextResponse("Not Found", status_code=404)
    return JSONResponse(statements)


def _raw_path(request: Request) -> str:
    """Request path before percent-decoding."""
    raw = request.scope.get("raw_path")
    if raw:
        return raw.decode("latin-1")
    return request.url.path


def _dispatch(request: Request, settings: Settings) -> Response:
    path = _raw_path(request)
    try:
        resource = route(path, request.query_params)
    except InvalidLinkError as e:
        logger.info(f"Rejected {path}: {e}")
        return PlainTextResponse(str(e), status_code=400)

    if resource.kind in LINK_KINDS:
        user_agent = request.headers.get("user-agent", "")
        return to_response(service.resolve_link(resource, user_agent, settings))
    if resource.kind == ResourceKind.HEALTH:
        return JSONResponse(service.health_status(settings))
    if resource.kind == ResourceKind.HOME:
        return HTMLResponse(service.home_page(settings))

    logger.warning(f"No route for {request.method} {path}")
    return PlainTextResponse("Not Found", status_code=404)


@catchall_router.api_route("/{path:path}", methods=ALL_METHODS)
async def deeplink(path: str, request: Request):
    """Resolve any path to a deep-link response, page, or 400/404."""
    return _dispatch(request, load_settings())
