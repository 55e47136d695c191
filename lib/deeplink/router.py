"""Path/query → ResourceRequest.

route() is a pure parse of the still percent-encoded path. Prefixes are
tested in priority order and segments are decoded only after the split, so
an encoded "/" stays inside its identifier. The only error it raises is
InvalidLinkError for invite/share links missing a required identifier.
"""

from typing import Callable, Mapping, Optional
from urllib.parse import unquote

from lib.deeplink.models import ResourceKind, ResourceRequest


def _segment(parts: list[str], index: int) -> str:
    return unquote(parts[index]) if len(parts) > index else ""


def _memorial(kind: ResourceKind) -> Callable[[list[str], Mapping[str, str]], ResourceRequest]:
    def parse(parts: list[str], query: Mapping[str, str]) -> ResourceRequest:
        return ResourceRequest(kind=kind, id=_segment(parts, 2))
    return parse


def _invite(parts: list[str], query: Mapping[str, str]) -> ResourceRequest:
    return ResourceRequest(
        kind=ResourceKind.INVITE,
        code=query.get("code"),
        memorial_id=query.get("memorial_id"),
    )


def _share(parts: list[str], query: Mapping[str, str]) -> ResourceRequest:
    return ResourceRequest(
        kind=ResourceKind.SHARE,
        share_type=_segment(parts, 2),
        share_id=_segment(parts, 3),
    )


# (prefix, parser), checked in order
PREFIX_ROUTES = [
    ("/memorial/", _memorial(ResourceKind.PRIVATE_MEMORIAL)),
    ("/m/", _memorial(ResourceKind.PRIVATE_MEMORIAL)),
    ("/celebrity/", _memorial(ResourceKind.PUBLIC_MEMORIAL)),
    ("/c/", _memorial(ResourceKind.PUBLIC_MEMORIAL)),
    ("/invite", _invite),
    ("/share/", _share),
]

EXACT_ROUTES = {
    "/": ResourceKind.HOME,
    "/health": ResourceKind.HEALTH,
}


def route(path: str, query: Optional[Mapping[str, str]] = None) -> ResourceRequest:
    """Resolve a request path (and query) to the resource it asks for."""
    query = query or {}
    parts = path.split("/")

    for prefix, parse in PREFIX_ROUTES:
        if path.startswith(prefix):
            return parse(parts, query)

    return ResourceRequest(kind=EXACT_ROUTES.get(path, ResourceKind.NOT_FOUND))
