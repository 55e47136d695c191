"""HTML pages for deep-link responses.

URLs go into attributes through html.escape and into scripts through
JSON encoding.
"""

import html
import json

from lib.deeplink.config import Settings
from lib.deeplink.models import ResourceKind
from lib.deeplink.strategy import (
    SECONDARY_ATTEMPT_DELAY_MS,
    STORE_FALLBACK_DELAY_MS,
    InteractiveAppOpen,
    InteractiveAppOpenIOS,
    StaticDesktopNotice,
)

CONTENT_LABELS = {
    ResourceKind.PRIVATE_MEMORIAL: "추모관",
    ResourceKind.PUBLIC_MEMORIAL: "공인 추모관",
    ResourceKind.INVITE: "초대",
    ResourceKind.SHARE: "공유",
}

OG_IMAGE_URL = "https://evermiss.co.kr/og-image.png"
PLAY_BADGE_URL = "https://play.google.com/intl/en_us/badges/static/images/badges/en_badge_web_generic.png"
APP_STORE_BADGE_URL = "https://developer.apple.com/app-store/marketing/guidelines/images/badge-download-on-the-app-store.svg"

BASE_STYLE = """
body{font-family:-apple-system,BlinkMacSystemFont,"Segoe UI",Roboto,sans-serif;
background:linear-gradient(135deg,#667eea 0%,#764ba2 100%);color:#fff;
display:flex;justify-content:center;align-items:center;min-height:100vh;margin:0}
.container{text-align:center;padding:40px;background:rgba(255,255,255,0.1);border-radius:20px;
backdrop-filter:blur(10px);-webkit-backdrop-filter:blur(10px);
box-shadow:0 8px 32px 0 rgba(31,38,135,0.37);max-width:480px}
h1{font-size:24px;margin-bottom:10px}
p{font-size:16px;opacity:0.9;margin-bottom:30px}
.button{display:inline-block;margin:10px;padding:16px 32px;background:#fff;color:#667eea;
text-decoration:none;border-radius:30px;font-weight:600;transition:transform 0.2s;
box-shadow:0 4px 15px 0 rgba(31,38,135,0.2)}
.button:active{transform:scale(0.95)}
.spinner{border:3px solid rgba(255,255,255,0.3);border-radius:50%;border-top:3px solid #fff;
width:40px;height:40px;animation:spin 1s linear infinite;margin:20px auto}
@keyframes spin{0%{transform:rotate(0deg)}100%{transform:rotate(360deg)}}
"""


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _js(value: str) -> str:
    return json.dumps(value).replace("</", "<\\/")


def _label(kind: ResourceKind) -> str:
    return CONTENT_LABELS.get(kind, "콘텐츠")


def _head(title: str, kind: ResourceKind) -> str:
    return f"""<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{html.escape(title)}</title>
<meta property="og:title" content="Evermiss {_attr(_label(kind))}">
<meta property="og:description" content="소중한 추억이 기다리고 있습니다">
<meta property="og:image" content="{OG_IMAGE_URL}">
<style>{BASE_STYLE}</style>
</head>"""


def render_android_page(strategy: InteractiveAppOpen) -> str:
    """Android page running the strict → generic → Play Store chain."""
    alt_button = ""
    if strategy.secondary_url:
        alt_button = (
            f'<a href="{_attr(strategy.secondary_url)}" class="button" id="openAppAlt">앱에서 열기(대체)</a>'
        )

    return f"""<!DOCTYPE html>
<html lang="ko">
{_head('Evermiss - 영원한 추억을 간직하세요', strategy.kind)}
<body>
<div class="container" data-content-id="{_attr(strategy.content_id)}">
<div class="spinner"></div>
<h1>Evermiss 앱으로 이동 중...</h1>
<p>열리지 않으면 아래 버튼을 눌러주세요.</p>
<div style="margin-top:30px">
<a href="{_attr(strategy.primary_url)}" class="button" id="openApp">앱에서 열기</a>
{alt_button}
<a href="{_attr(strategy.store_url)}" class="button" id="downloadApp">앱 설치하기</a>
</div>
</div>
<script>
(function(){{
  var strictUrl = {_js(strategy.primary_url)};
  var altUrl = {_js(strategy.secondary_url or '')};
  var storeUrl = {_js(strategy.store_url)};
  var opened = false;

  document.addEventListener('visibilitychange', function(){{ if (document.hidden) opened = true; }});
  window.addEventListener('blur', function(){{ opened = true; }});

  try {{ window.location.replace(strictUrl); }} catch (e) {{}}

  setTimeout(function(){{
    if (!opened && !document.hidden && altUrl) {{
      try {{ window.location.replace(altUrl); }} catch (e) {{}}
    }}
  }}, {SECONDARY_ATTEMPT_DELAY_MS});

  setTimeout(function(){{
    if (!opened && !document.hidden) {{ window.location.href = storeUrl; }}
  }}, {STORE_FALLBACK_DELAY_MS});

  document.getElementById('openApp').addEventListener('click', function(e){{
    e.preventDefault(); window.location.href = strictUrl;
  }});
  var alt = document.getElementById('openAppAlt');
  if (alt && altUrl) {{
    alt.addEventListener('click', function(e){{
      e.preventDefault(); window.location.href = altUrl;
    }});
  }}
  document.getElementById('downloadApp').addEventListener('click', function(e){{
    e.preventDefault(); window.location.href = storeUrl;
  }});
}})();
</script>
</body>
</html>"""


def render_ios_page(strategy: InteractiveAppOpenIOS) -> str:
    """iOS page: custom scheme on load, App Store after the timeout."""
    return f"""<!DOCTYPE html>
<html lang="ko">
{_head('Evermiss - 영원한 추억을 간직하세요', strategy.kind)}
<body>
<div class="container" data-content-id="{_attr(strategy.content_id)}">
<div class="spinner"></div>
<h1>Evermiss 앱으로 이동 중...</h1>
<p>잠시만 기다려주세요</p>
<div style="margin-top:30px">
<a href="{_attr(strategy.custom_scheme_url)}" class="button" id="openApp">앱에서 열기</a>
<a href="{_attr(strategy.store_url)}" class="button" id="downloadApp">앱 설치하기</a>
</div>
</div>
<script>
(function(){{
  var schemeUrl = {_js(strategy.custom_scheme_url)};
  var storeUrl = {_js(strategy.store_url)};
  var opened = false;

  document.addEventListener('visibilitychange', function(){{ if (document.hidden) opened = true; }});
  window.addEventListener('blur', function(){{ opened = true; }});

  window.location.href = schemeUrl;

  setTimeout(function(){{
    if (!opened && !document.hidden) {{ window.location.href = storeUrl; }}
  }}, {STORE_FALLBACK_DELAY_MS});
}})();
</script>
</body>
</html>"""


def render_desktop_page(strategy: StaticDesktopNotice) -> str:
    """Desktop notice with store badges. No script."""
    label = html.escape(_label(strategy.kind))
    return f"""<!DOCTYPE html>
<html lang="ko">
{_head('Evermiss - 모바일 앱에서 확인하세요', strategy.kind)}
<body>
<div class="container" data-content-id="{_attr(strategy.content_id)}">
<h1>📱 모바일 앱에서 확인하세요</h1>
<p>이 {label}는 Evermiss 모바일 앱에서 확인할 수 있습니다.</p>
<div class="store-links">
<a href="{_attr(strategy.play_store_url)}"><img src="{PLAY_BADGE_URL}" alt="Get it on Google Play" height="50"></a>
<a href="{_attr(strategy.app_store_url)}"><img src="{APP_STORE_BADGE_URL}" alt="Download on the App Store" height="50"></a>
</div>
</div>
</body>
</html>"""


def render_home_page(settings: Settings) -> str:
    """Service landing page listing link formats for the configured domain."""
    domain = html.escape(settings.domain)
    environment = html.escape(settings.environment)
    version = html.escape(settings.app_version)

    endpoints = [
        ("개인 추모관", [f"https://{domain}/memorial/{{memorialId}}", f"https://{domain}/m/{{memorialId}} (단축)"]),
        ("공인 추모관", [f"https://{domain}/celebrity/{{celebrityId}}", f"https://{domain}/c/{{celebrityId}} (단축)"]),
        ("초대 링크", [f"https://{domain}/invite?code={{code}}&amp;memorial_id={{id}}"]),
        ("공유 링크", [f"https://{domain}/share/{{type}}/{{id}}"]),
    ]
    endpoint_html = "\n".join(
        f'<div class="endpoint"><strong>{name}:</strong><br>' + "<br>".join(examples) + "</div>"
        for name, examples in endpoints
    )

    return f"""<!DOCTYPE html>
<html lang="ko">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Evermiss - 딥링크 서비스</title>
<style>{BASE_STYLE}
.endpoint{{background:rgba(0,0,0,0.2);padding:10px 15px;border-radius:5px;margin:10px 0;
font-family:monospace;text-align:left}}
</style>
</head>
<body>
<div class="container">
<h1>🔗 Evermiss 딥링크 서비스</h1>
<div class="status">
<h3>✅ 서비스 정상 작동 중</h3>
<p>Environment: {environment}</p>
<p>Domain: {domain}</p>
</div>
<h2>📱 딥링크 엔드포인트</h2>
{endpoint_html}
<h2>📊 테스트 링크</h2>
<p>
<a href="/memorial/test123" class="button">개인 추모관</a>
<a href="/celebrity/test456" class="button">공인 추모관</a>
<a href="/invite?code=ABC123&amp;memorial_id=456" class="button">초대 테스트</a>
<a href="/share/photo/789" class="button">공유 테스트</a>
</p>
<p>Evermiss Deeplink Service v{version}</p>
</div>
</body>
</html>"""
