"""Unit tests for deep-link URL builders. No network needed."""

import pytest

from lib.deeplink.config import Settings, build_app_config
from lib.deeplink.models import ResourceKind, ResourceRequest
from lib.deeplink.urls import (
    build_deep_path,
    build_target,
    custom_scheme_url,
    encode_component,
    generic_intent_url,
    strict_intent_url,
    web_fallback_url,
)

PLAY_URL = "https://play.google.com/store/apps/details?id=com.pardess.evermiss"
ENCODED_PLAY_URL = "https%3A%2F%2Fplay.google.com%2Fstore%2Fapps%2Fdetails%3Fid%3Dcom.pardess.evermiss"


def _config(environment="production", domain="evermiss.co.kr"):
    return build_app_config(Settings(environment=environment, domain=domain))


# --- Encoding ---


class TestEncodeComponent:
    def test_plain(self):
        assert encode_component("abc123") == "abc123"

    def test_reserved_characters(self):
        assert encode_component("a/b#c;d?e&f=g") == "a%2Fb%23c%3Bd%3Fe%26f%3Dg"

    def test_uri_component_safe_set(self):
        """Characters encodeURIComponent leaves alone stay unescaped."""
        assert encode_component("-_.!~*'()") == "-_.!~*'()"

    def test_unicode(self):
        assert encode_component("추모") == "%EC%B6%94%EB%AA%A8"

    def test_none(self):
        assert encode_component(None) == ""


# --- Deep paths ---


class TestDeepPath:
    def test_memorial(self):
        assert build_deep_path(ResourceRequest(kind=ResourceKind.PRIVATE_MEMORIAL, id="abc")) == "memorial/abc"

    def test_celebrity(self):
        assert build_deep_path(ResourceRequest(kind=ResourceKind.PUBLIC_MEMORIAL, id="xyz")) == "celebrity/xyz"

    def test_invite_query_encoded(self):
        resource = ResourceRequest(kind=ResourceKind.INVITE, code="A B&C", memorial_id="4/56")
        assert build_deep_path(resource) == "invite?code=A%20B%26C&memorial_id=4%2F56"

    def test_share(self):
        resource = ResourceRequest(kind=ResourceKind.SHARE, share_type="photo", share_id="789")
        assert build_deep_path(resource) == "share/photo/789"

    def test_path_segments_cannot_inject(self):
        """Identifiers cannot add path segments or intent fragments."""
        resource = ResourceRequest(kind=ResourceKind.PRIVATE_MEMORIAL, id="x#Intent;package=evil;end")
        assert build_deep_path(resource) == "memorial/x%23Intent%3Bpackage%3Devil%3Bend"

    def test_empty_memorial_id(self):
        assert build_deep_path(ResourceRequest(kind=ResourceKind.PRIVATE_MEMORIAL)) == "memorial/"

    def test_non_link_kind(self):
        with pytest.raises(ValueError):
            build_deep_path(ResourceRequest(kind=ResourceKind.HOME))


# --- URL forms ---


class TestUrlForms:
    def test_strict_intent(self):
        url = strict_intent_url("memorial/abc", "evermiss", "com.pardess.evermiss", PLAY_URL)
        assert url == (
            "intent://memorial/abc#Intent;scheme=evermiss;package=com.pardess.evermiss;"
            "action=android.intent.action.VIEW;category=android.intent.category.BROWSABLE;"
            f"S.browser_fallback_url={ENCODED_PLAY_URL};end"
        )

    def test_strict_intent_strips_leading_slash(self):
        url = strict_intent_url("/memorial/abc", "evermiss", "com.pardess.evermiss", PLAY_URL)
        assert url.startswith("intent://memorial/abc#Intent;")

    def test_generic_intent_has_no_package_or_fallback(self):
        """The generic intent lets the OS resolve the handler."""
        url = generic_intent_url("memorial/abc", "evermiss")
        assert url == (
            "intent://memorial/abc#Intent;scheme=evermiss;"
            "action=android.intent.action.VIEW;category=android.intent.category.BROWSABLE;end"
        )
        assert "package=" not in url
        assert "S.browser_fallback_url" not in url

    def test_custom_scheme(self):
        assert custom_scheme_url("celebrity/xyz", "evermiss") == "evermiss://celebrity/xyz"

    def test_web_fallback(self):
        assert web_fallback_url("share/photo/789", "https://evermiss.co.kr") == "https://evermiss.co.kr/share/photo/789"

    def test_web_fallback_no_double_slash(self):
        assert web_fallback_url("/share/a/b", "https://evermiss.co.kr/") == "https://evermiss.co.kr/share/a/b"


# --- Target ---


class TestBuildTarget:
    def test_memorial_target(self):
        target = build_target(ResourceRequest(kind=ResourceKind.PRIVATE_MEMORIAL, id="abc"), _config())
        assert target.deep_path == "memorial/abc"
        assert target.custom_scheme_url == "evermiss://memorial/abc"
        assert target.web_url == "https://evermiss.co.kr/memorial/abc"
        assert target.strict_intent_url.startswith("intent://memorial/abc#Intent;")
        assert "package=com.pardess.evermiss" in target.strict_intent_url
        assert target.generic_intent_url.startswith("intent://memorial/abc#Intent;scheme=evermiss;action=")
        assert target.play_store_url == PLAY_URL
        assert target.app_store_url.startswith("https://apps.apple.com/")

    def test_development_web_base(self):
        target = build_target(
            ResourceRequest(kind=ResourceKind.SHARE, share_type="photo", share_id="789"),
            _config(environment="development"),
        )
        assert target.web_url == "https://dev.evermiss.co.kr/share/photo/789"

    def test_deterministic(self):
        resource = ResourceRequest(kind=ResourceKind.INVITE, code="ABC123", memorial_id="456")
        config = _config()
        assert build_target(resource, config) == build_target(resource, config)
