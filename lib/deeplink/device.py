"""User-Agent classification.

classify() is total: empty or unrecognised User-Agents resolve to
desktop / unknown. Rules are ordered tables, first match wins.
"""

import re

from lib.deeplink.models import BrowserEngine, DeviceDescriptor, Platform

PLATFORM_RULES = [
    (re.compile(r"android", re.IGNORECASE), Platform.ANDROID),
    (re.compile(r"iphone|ipad|ipod", re.IGNORECASE), Platform.IOS),
]

# Chrome UAs also carry the Safari token, so chrome must be tested first.
BROWSER_RULES = [
    (re.compile(r"samsung", re.IGNORECASE), BrowserEngine.SAMSUNG),
    (re.compile(r"chrome", re.IGNORECASE), BrowserEngine.CHROME),
    (re.compile(r"safari", re.IGNORECASE), BrowserEngine.SAFARI),
    (re.compile(r"firefox", re.IGNORECASE), BrowserEngine.FIREFOX),
]

# Wrapper apps whose embedded web views restrict navigation
IN_APP_SIGNATURES = frozenset({
    "evermiss",
    "instagram",
    "fbav",  # Facebook
    "kakaotalk",
    "line/",
})


def detect_platform(user_agent: str) -> Platform:
    for pattern, platform in PLATFORM_RULES:
        if pattern.search(user_agent):
            return platform
    return Platform.DESKTOP


def detect_browser(user_agent: str) -> BrowserEngine:
    for pattern, engine in BROWSER_RULES:
        if pattern.search(user_agent):
            return engine
    return BrowserEngine.UNKNOWN


def is_in_app_browser(user_agent: str) -> bool:
    ua = user_agent.lower()
    return any(signature in ua for signature in IN_APP_SIGNATURES)


def classify(user_agent: str) -> DeviceDescriptor:
    """Parse a User-Agent string into a DeviceDescriptor."""
    user_agent = user_agent or ""
    return DeviceDescriptor(
        platform=detect_platform(user_agent),
        is_in_app_browser=is_in_app_browser(user_agent),
        browser_engine=detect_browser(user_agent),
        raw_user_agent=user_agent,
    )
