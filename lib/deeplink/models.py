"""Data models for deep-link resolution."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Platform(str, Enum):
    """Class of client device asking for a link."""

    ANDROID = "android"
    IOS = "ios"
    DESKTOP = "desktop"  # Anything not recognised as a phone/tablet


class BrowserEngine(str, Enum):
    SAMSUNG = "samsung"
    CHROME = "chrome"
    SAFARI = "safari"
    FIREFOX = "firefox"
    UNKNOWN = "unknown"


class ResourceKind(str, Enum):
    """What the incoming path asks for."""

    PRIVATE_MEMORIAL = "private_memorial"
    PUBLIC_MEMORIAL = "public_memorial"
    INVITE = "invite"
    SHARE = "share"
    HOME = "home"
    HEALTH = "health"
    NOT_FOUND = "not_found"


# Kinds that resolve to an app deep link
LINK_KINDS = (
    ResourceKind.PRIVATE_MEMORIAL,
    ResourceKind.PUBLIC_MEMORIAL,
    ResourceKind.INVITE,
    ResourceKind.SHARE,
)


class InvalidLinkError(ValueError):
    """A deep link is missing a required identifier. Maps to HTTP 400."""


@dataclass(frozen=True)
class DeviceDescriptor:
    """Structured view of a User-Agent, derived once per request."""

    platform: Platform
    is_in_app_browser: bool
    browser_engine: BrowserEngine
    raw_user_agent: str = ""  # Diagnostics only


@dataclass(frozen=True)
class ResourceRequest:
    """Parsed intent of the incoming path/query.

    memorial kinds carry `id` (may be empty), invite carries `code` and
    `memorial_id`, share carries `share_type` and `share_id`.
    """

    kind: ResourceKind
    id: str = ""
    code: Optional[str] = None
    memorial_id: Optional[str] = None
    share_type: Optional[str] = None
    share_id: Optional[str] = None

    def __post_init__(self):
        if self.kind == ResourceKind.INVITE and not (self.code and self.memorial_id):
            raise InvalidLinkError("Missing parameters")
        if self.kind == ResourceKind.SHARE and not (self.share_type and self.share_id):
            raise InvalidLinkError("Invalid share link")

    @property
    def content_id(self) -> str:
        """Identifier shown on rendered pages."""
        if self.kind == ResourceKind.INVITE:
            return self.memorial_id or ""
        if self.kind == ResourceKind.SHARE:
            return f"{self.share_type}/{self.share_id}"
        return self.id


@dataclass(frozen=True)
class DeepLinkTarget:
    """Candidate URLs for one resource, in fallback order."""

    deep_path: str  # Logical in-app path, no leading slash
    custom_scheme_url: str
    web_url: str
    strict_intent_url: str
    generic_intent_url: str
    play_store_url: str
    app_store_url: str
