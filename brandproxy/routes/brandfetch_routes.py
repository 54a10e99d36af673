from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request

from brandproxy.config import ProxySettings, get_settings
from brandproxy.managers.brandfetch_services import BrandfetchService
from brandproxy.models.proxy_model import classify_request


brandfetch_router = APIRouter()


@brandfetch_router.api_route(
    "",
    methods=["GET", "OPTIONS"],
    summary="Proxy Brandfetch Search, Brand Lookup and Logo Images",
)
async def brandfetch_proxy(
    request: Request,
    img: Optional[str] = Query(None, description="Brandfetch CDN image URL to proxy"),
    q: Optional[str] = Query(None, description="Free-text brand search"),
    domain: Optional[str] = Query(None, description="Domain of the brand to look up"),
    x_user_api_key: Optional[str] = Header(
        None, alias="X-User-Api-Key", description="Caller's own Brandfetch API key"
    ),
    settings: ProxySettings = Depends(get_settings),
):
    """
    Relays one Brandfetch call, keeping the server's API key private.
    Precedence when several parameters are given: img, then q, then domain.
    """
    if request.method == "OPTIONS":
        return BrandfetchService.preflight()

    proxy_request = classify_request(img=img, q=q, domain=domain, api_key=x_user_api_key)
    return await BrandfetchService.handle(proxy_request, settings)
