"""Redirect strategy selection.

The response shape is a pure function of (resource kind, platform,
browser engine). SELECTION_TABLE maps every (kind, platform) pair to a
strategy factory; ENGINE_OVERRIDES takes precedence for specific
(platform, engine) pairs. The table is checked for completeness at import
time, so a new kind or platform without an entry fails on startup instead
of falling through at request time.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from lib.deeplink.config import AppTargetConfig
from lib.deeplink.models import (
    LINK_KINDS,
    BrowserEngine,
    DeepLinkTarget,
    DeviceDescriptor,
    Platform,
    ResourceKind,
    ResourceRequest,
)
from lib.deeplink.urls import build_target

# Fallback chain timings used by the interactive pages (milliseconds)
SECONDARY_ATTEMPT_DELAY_MS = 1200
STORE_FALLBACK_DELAY_MS = 2500


@dataclass(frozen=True)
class ImmediateRedirect:
    """HTTP redirect, no HTML intermediary."""

    url: str
    status_code: int = 302


@dataclass(frozen=True)
class PlainWebRedirect(ImmediateRedirect):
    """Redirect to the web fallback site."""


@dataclass(frozen=True)
class InteractiveAppOpen:
    """Android page: strict intent, then generic intent, then Play Store."""

    kind: ResourceKind
    content_id: str
    primary_url: str
    store_url: str
    secondary_url: Optional[str] = None


@dataclass(frozen=True)
class InteractiveAppOpenIOS:
    """iOS page: custom scheme, then App Store."""

    kind: ResourceKind
    content_id: str
    custom_scheme_url: str
    store_url: str


@dataclass(frozen=True)
class StaticDesktopNotice:
    """Informational page with store badges. No navigation, no timers."""

    kind: ResourceKind
    content_id: str
    play_store_url: str
    app_store_url: str


Strategy = Union[
    ImmediateRedirect,
    PlainWebRedirect,
    InteractiveAppOpen,
    InteractiveAppOpenIOS,
    StaticDesktopNotice,
]

StrategyFactory = Callable[[ResourceRequest, DeepLinkTarget], Strategy]


# ---------------------------------------------------------------------------
# Strategy factories
# ---------------------------------------------------------------------------


def _android_interactive(resource: ResourceRequest, target: DeepLinkTarget) -> Strategy:
    return InteractiveAppOpen(
        kind=resource.kind,
        content_id=resource.content_id,
        primary_url=target.strict_intent_url,
        secondary_url=target.generic_intent_url,
        store_url=target.play_store_url,
    )


def _strict_intent_redirect(resource: ResourceRequest, target: DeepLinkTarget) -> Strategy:
    # Samsung Internet mishandles the JS fallback chain; a 302 to the intent works.
    return ImmediateRedirect(url=target.strict_intent_url)


def _ios_interactive(resource: ResourceRequest, target: DeepLinkTarget) -> Strategy:
    return InteractiveAppOpenIOS(
        kind=resource.kind,
        content_id=resource.content_id,
        custom_scheme_url=target.custom_scheme_url,
        store_url=target.app_store_url,
    )


def _custom_scheme_redirect(resource: ResourceRequest, target: DeepLinkTarget) -> Strategy:
    return ImmediateRedirect(url=target.custom_scheme_url)


def _desktop_notice(resource: ResourceRequest, target: DeepLinkTarget) -> Strategy:
    return StaticDesktopNotice(
        kind=resource.kind,
        content_id=resource.content_id,
        play_store_url=target.play_store_url,
        app_store_url=target.app_store_url,
    )


def _web_redirect(resource: ResourceRequest, target: DeepLinkTarget) -> Strategy:
    return PlainWebRedirect(url=target.web_url)


SELECTION_TABLE: dict[tuple[ResourceKind, Platform], StrategyFactory] = {
    (ResourceKind.PRIVATE_MEMORIAL, Platform.ANDROID): _android_interactive,
    (ResourceKind.PUBLIC_MEMORIAL, Platform.ANDROID): _android_interactive,
    (ResourceKind.INVITE, Platform.ANDROID): _android_interactive,
    (ResourceKind.SHARE, Platform.ANDROID): _android_interactive,
    (ResourceKind.PRIVATE_MEMORIAL, Platform.IOS): _ios_interactive,
    (ResourceKind.PUBLIC_MEMORIAL, Platform.IOS): _ios_interactive,
    (ResourceKind.INVITE, Platform.IOS): _custom_scheme_redirect,
    (ResourceKind.SHARE, Platform.IOS): _custom_scheme_redirect,
    (ResourceKind.PRIVATE_MEMORIAL, Platform.DESKTOP): _desktop_notice,
    (ResourceKind.PUBLIC_MEMORIAL, Platform.DESKTOP): _desktop_notice,
    (ResourceKind.INVITE, Platform.DESKTOP): _web_redirect,
    (ResourceKind.SHARE, Platform.DESKTOP): _web_redirect,
}

ENGINE_OVERRIDES: dict[tuple[Platform, BrowserEngine], StrategyFactory] = {
    (Platform.ANDROID, BrowserEngine.SAMSUNG): _strict_intent_redirect,
}


def _check_table_complete() -> None:
    missing = [
        f"{kind.value}/{platform.value}"
        for kind in LINK_KINDS
        for platform in Platform
        if (kind, platform) not in SELECTION_TABLE
    ]
    if missing:
        raise RuntimeError(f"No redirect strategy for: {', '.join(missing)}")


_check_table_complete()


def choose(kind: ResourceKind, platform: Platform, engine: BrowserEngine) -> StrategyFactory:
    """Pick the strategy factory for a (kind, platform, engine) triple."""
    if kind not in LINK_KINDS:
        raise ValueError(f"{kind.value} is not a deep-link resource")
    override = ENGINE_OVERRIDES.get((platform, engine))
    if override is not None:
        return override
    return SELECTION_TABLE[(kind, platform)]


def select(resource: ResourceRequest, device: DeviceDescriptor, config: AppTargetConfig) -> Strategy:
    """Decide the response shape for a link resource and build its URLs."""
    factory = choose(resource.kind, device.platform, device.browser_engine)
    return factory(resource, build_target(resource, config))
