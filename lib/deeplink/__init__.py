"""Deep-link resolution for the Evermiss app.

Pure core: User-Agent classification, path routing, app targets,
intent / custom-scheme URL builders and redirect strategy selection.
No network, no DB, no shared state.

The request pipeline lives in services/deeplink/.
The HTTP layer lives in api/deeplink/.
"""

from lib.deeplink.device import classify
from lib.deeplink.models import (
    BrowserEngine,
    DeepLinkTarget,
    DeviceDescriptor,
    InvalidLinkError,
    Platform,
    ResourceKind,
    ResourceRequest,
)
from lib.deeplink.router import route
from lib.deeplink.strategy import select

__all__ = [
    "BrowserEngine",
    "DeepLinkTarget",
    "DeviceDescriptor",
    "InvalidLinkError",
    "Platform",
    "ResourceKind",
    "ResourceRequest",
    "classify",
    "route",
    "select",
]
