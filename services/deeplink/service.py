"""Business logic for deep-link resolution.

Combines the pure pieces from lib/deeplink for a single request:
User-Agent → DeviceDescriptor, settings → AppTargetConfig, then
strategy selection. Stateless; nothing is shared between requests.
"""

from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from lib.deeplink.config import Settings, build_app_config, load_settings
from lib.deeplink.device import classify
from lib.deeplink.models import ResourceRequest
from lib.deeplink.pages import render_home_page
from lib.deeplink.strategy import Strategy, select


def resolve_link(
    resource: ResourceRequest,
    user_agent: str,
    settings: Optional[Settings] = None,
) -> Strategy:
    """Pick the redirect strategy for a routed link resource."""
    settings = settings or load_settings()
    device = classify(user_agent)
    strategy = select(resource, device, build_app_config(settings))

    log = logger.bind(
        kind=resource.kind.value,
        platform=device.platform.value,
        browser=device.browser_engine.value,
        in_app=device.is_in_app_browser,
    )
    log.info(
        f"Deep link {resource.kind.value} id={resource.content_id!r} "
        f"platform={device.platform.value} -> {type(strategy).__name__}"
    )
    return strategy


def health_status(settings: Optional[Settings] = None) -> dict:
    settings = settings or load_settings()
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "domain": settings.domain,
        "version": settings.app_version,
    }


def home_page(settings: Optional[Settings] = None) -> str:
    """Landing page HTML for the configured domain."""
    return render_home_page(settings or load_settings())


def asset_links(settings: Optional[Settings] = None) -> Optional[list[dict]]:
    """Android Digital Asset Links statement, or None without a fingerprint.

    SHA_256 may hold several comma-separated fingerprints (release + upload key).
    """
    settings = settings or load_settings()
    if not settings.sha_256:
        return None

    fingerprints = [fp.strip() for fp in settings.sha_256.split(",") if fp.strip()]
    if not fingerprints:
        return None

    android = build_app_config(settings).android
    return [{
        "relation": ["delegate_permission/common.handle_all_urls"],
        "target": {
            "namespace": "android_app",
            "package_name": android.package_name,
            "sha256_cert_fingerprints": fingerprints,
        },
    }]
