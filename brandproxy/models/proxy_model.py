# brandproxy/models/proxy_model.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ProxyTarget(str, Enum):
    """Which upstream a request is routed to, in precedence order."""
    IMAGE = "image"
    SEARCH = "search"
    BRAND = "brand"
    MISSING = "missing"


class ProxyRequest(BaseModel):
    """A classified inbound request. Exactly one target per request."""
    target: ProxyTarget
    value: Optional[str] = Field(
        None, description="The query parameter value driving the chosen target."
    )
    api_key: Optional[str] = Field(
        None, description="Caller-supplied key from the X-User-Api-Key header."
    )

    @property
    def needs_api_key(self) -> bool:
        return self.target is not ProxyTarget.IMAGE


def classify_request(
    img: Optional[str] = None,
    q: Optional[str] = None,
    domain: Optional[str] = None,
    api_key: Optional[str] = None,
) -> ProxyRequest:
    """
    Picks the first present parameter in the order img > q > domain.
    Empty values count as absent.
    """
    candidates = (
        (ProxyTarget.IMAGE, img),
        (ProxyTarget.SEARCH, q),
        (ProxyTarget.BRAND, domain),
    )
    for target, value in candidates:
        if value:
            return ProxyRequest(target=target, value=value, api_key=api_key or None)
    return ProxyRequest(target=ProxyTarget.MISSING, api_key=api_key or None)
