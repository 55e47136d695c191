"""
Service settings and per-platform app targets.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

DEFAULT_DOMAIN = "evermiss.co.kr"

ANDROID_PACKAGE = "com.pardess.evermiss"
IOS_BUNDLE_ID = "com.pardess.evermiss"
APP_SCHEME = "evermiss"
PLAY_STORE_URL = f"https://play.google.com/store/apps/details?id={ANDROID_PACKAGE}"
DEFAULT_APP_STORE_URL = "https://apps.apple.com/app/evermiss/id1234567890"


class Settings(BaseModel):
    """Environment-provided settings."""

    sha_256: Optional[str] = Field(default=None, description="Android signing certificate SHA-256 fingerprint")
    environment: str = Field(default="development", description="'production' or anything else")
    app_version: str = Field(default="2.0.0")
    domain: str = Field(default=DEFAULT_DOMAIN, description="Public domain serving the links")
    api_url: Optional[str] = Field(default=None)
    log_level: str = Field(default="INFO")
    app_store_url: str = Field(default=DEFAULT_APP_STORE_URL, description="App Store listing for the iOS app")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def load_settings() -> Settings:
    """Read settings from the environment.

    Not cached: every request sees the current environment.
    """
    return Settings(
        sha_256=os.getenv("SHA_256") or None,
        environment=os.getenv("ENVIRONMENT") or "development",
        app_version=os.getenv("APP_VERSION") or "2.0.0",
        domain=os.getenv("DOMAIN") or DEFAULT_DOMAIN,
        api_url=os.getenv("API_URL") or None,
        log_level=os.getenv("LOG_LEVEL") or "INFO",
        app_store_url=os.getenv("APP_STORE_URL") or DEFAULT_APP_STORE_URL,
    )


@dataclass(frozen=True)
class AndroidTarget:
    package_name: str
    url_scheme: str
    play_store_url: str


@dataclass(frozen=True)
class IosTarget:
    bundle_id: str
    url_scheme: str
    app_store_url: str


@dataclass(frozen=True)
class WebTarget:
    fallback_base_url: str  # No trailing slash


@dataclass(frozen=True)
class AppTargetConfig:
    android: AndroidTarget
    ios: IosTarget
    web: WebTarget


def web_fallback_base(settings: Settings) -> str:
    if settings.is_production:
        return f"https://{settings.domain}"
    return f"https://dev.{settings.domain}"


def build_app_config(settings: Settings) -> AppTargetConfig:
    return AppTargetConfig(
        android=AndroidTarget(
            package_name=ANDROID_PACKAGE,
            url_scheme=APP_SCHEME,
            play_store_url=PLAY_STORE_URL,
        ),
        ios=IosTarget(
            bundle_id=IOS_BUNDLE_ID,
            url_scheme=APP_SCHEME,
            app_store_url=settings.app_store_url,
        ),
        web=WebTarget(fallback_base_url=web_fallback_base(settings)),
    )
