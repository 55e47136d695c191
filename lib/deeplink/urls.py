"""Deep-link URL builders.

Pure string composition, no network. Every identifier is percent-encoded
(encodeURIComponent rules) before it is placed in a deep path, so ids
containing '/', '#', ';' or '?' cannot alter the URL structure.

URL forms, for deep path `memorial/abc`:
  strict intent   intent://memorial/abc#Intent;scheme=evermiss;package=com.pardess.evermiss;
                  action=android.intent.action.VIEW;category=android.intent.category.BROWSABLE;
                  S.browser_fallback_url=<encoded store url>;end
  generic intent  same without package and S.browser_fallback_url
  custom scheme   evermiss://memorial/abc
  web fallback    https://evermiss.co.kr/memorial/abc
"""

from urllib.parse import quote

from lib.deeplink.config import AppTargetConfig
from lib.deeplink.models import DeepLinkTarget, ResourceKind, ResourceRequest

INTENT_ACTION = "android.intent.action.VIEW"
INTENT_CATEGORY = "android.intent.category.BROWSABLE"

# Characters encodeURIComponent leaves alone besides alphanumerics and -_.
_URI_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    return quote(value or "", safe=_URI_COMPONENT_SAFE)


def _strip_slash(deep_path: str) -> str:
    return deep_path[1:] if deep_path.startswith("/") else deep_path


# ---------------------------------------------------------------------------
# Logical deep paths
# ---------------------------------------------------------------------------


def _memorial_path(resource: ResourceRequest) -> str:
    return f"memorial/{encode_component(resource.id)}"


def _celebrity_path(resource: ResourceRequest) -> str:
    return f"celebrity/{encode_component(resource.id)}"


def _invite_path(resource: ResourceRequest) -> str:
    code = encode_component(resource.code)
    memorial_id = encode_component(resource.memorial_id)
    return f"invite?code={code}&memorial_id={memorial_id}"


def _share_path(resource: ResourceRequest) -> str:
    return f"share/{encode_component(resource.share_type)}/{encode_component(resource.share_id)}"


DEEP_PATH_BUILDERS = {
    ResourceKind.PRIVATE_MEMORIAL: _memorial_path,
    ResourceKind.PUBLIC_MEMORIAL: _celebrity_path,
    ResourceKind.INVITE: _invite_path,
    ResourceKind.SHARE: _share_path,
}


def build_deep_path(resource: ResourceRequest) -> str:
    """Logical in-app path for a link resource, without leading slash."""
    builder = DEEP_PATH_BUILDERS.get(resource.kind)
    if builder is None:
        raise ValueError(f"{resource.kind.value} has no deep link")
    return builder(resource)


# ---------------------------------------------------------------------------
# URL forms
# ---------------------------------------------------------------------------


def strict_intent_url(deep_path: str, scheme: str, package: str, store_url: str) -> str:
    """Android intent pinned to `package`, with the OS-level store fallback."""
    return (
        f"intent://{_strip_slash(deep_path)}"
        f"#Intent;scheme={scheme};package={package};"
        f"action={INTENT_ACTION};"
        f"category={INTENT_CATEGORY};"
        f"S.browser_fallback_url={encode_component(store_url)};"
        "end"
    )


def generic_intent_url(deep_path: str, scheme: str) -> str:
    """Android intent without package constraint or fallback parameter."""
    return (
        f"intent://{_strip_slash(deep_path)}"
        f"#Intent;scheme={scheme};"
        f"action={INTENT_ACTION};"
        f"category={INTENT_CATEGORY};"
        "end"
    )


def custom_scheme_url(deep_path: str, scheme: str) -> str:
    return f"{scheme}://{_strip_slash(deep_path)}"


def web_fallback_url(deep_path: str, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{_strip_slash(deep_path)}"


def build_target(resource: ResourceRequest, config: AppTargetConfig) -> DeepLinkTarget:
    """Materialise every candidate URL for a link resource.

    Deterministic: identical inputs give byte-identical URLs.
    """
    deep_path = build_deep_path(resource)
    android = config.android

    return DeepLinkTarget(
        deep_path=deep_path,
        custom_scheme_url=custom_scheme_url(deep_path, config.ios.url_scheme),
        web_url=web_fallback_url(deep_path, config.web.fallback_base_url),
        strict_intent_url=strict_intent_url(
            deep_path, android.url_scheme, android.package_name, android.play_store_url
        ),
        generic_intent_url=generic_intent_url(deep_path, android.url_scheme),
        play_store_url=android.play_store_url,
        app_store_url=config.ios.app_store_url,
    )
