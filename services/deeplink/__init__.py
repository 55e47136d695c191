"""Deep-link service: public interface."""

from services.deeplink.service import (
    asset_links,
    health_status,
    home_page,
    resolve_link,
)

__all__ = [
    "resolve_link",
    "health_status",
    "home_page",
    "asset_links",
]
