import logging
from typing import Optional

import httpx
from fastapi import Response

from brandproxy.config import ProxySettings
from brandproxy.managers.images import ProcessImages
from brandproxy.models.proxy_model import ProxyRequest, ProxyTarget
from brandproxy.utils import (
    BRANDFETCH_API_BASE,
    CORS_HEADERS,
    encode_path_segment,
    json_response,
)

logger = logging.getLogger(__name__)

NO_API_KEY_ERROR = "No API key available. Please provide your own Brandfetch API key."
MISSING_PARAMETER_ERROR = "Missing query parameter (q or domain)"
UPSTREAM_FAILURE_ERROR = "Failed to fetch from Brandfetch API"


class BrandfetchService:

    @staticmethod
    def preflight() -> Response:
        return Response(status_code=200, headers=CORS_HEADERS)

    @staticmethod
    def resolve_api_key(request: ProxyRequest, settings: ProxySettings) -> Optional[str]:
        """Caller key wins, otherwise the server fallback. None if neither is set."""
        return request.api_key or settings.brandfetch_api_key or None

    @staticmethod
    def search_url(q: str) -> str:
        return f"{BRANDFETCH_API_BASE}/search/{encode_path_segment(q)}"

    @staticmethod
    def brand_url(domain: str) -> str:
        return f"{BRANDFETCH_API_BASE}/brands/{encode_path_segment(domain)}"

    @staticmethod
    async def relay(url: str, api_key: str) -> Response:
        """
        Performs one authenticated GET and relays the upstream status and JSON body as-is.
        """
        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(
                    url, headers={"Authorization": f"Bearer {api_key}"}
                )
                data = response.json()
                logger.debug(f"Brandfetch responded {response.status_code} for {url}")
                # Rendering rejects NaN/Infinity that the lenient parse above lets through
                return json_response(data, status_code=response.status_code)
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Brandfetch request to {url} failed. Error: {e}")
                logger.exception("Brandfetch request exception details:")
                return json_response({"error": UPSTREAM_FAILURE_ERROR}, status_code=500)

    @staticmethod
    async def handle(request: ProxyRequest, settings: ProxySettings) -> Response:
        """
        Dispatches a classified request to exactly one branch.
        The image branch runs before key resolution and needs no API key.
        """
        logger.info(f"Handling Brandfetch proxy request for target '{request.target.value}'")

        if not request.needs_api_key:
            return await ProcessImages.proxy_image(url=request.value)

        api_key = BrandfetchService.resolve_api_key(request, settings)
        if not api_key:
            return json_response({"error": NO_API_KEY_ERROR}, status_code=401)

        if request.target is ProxyTarget.SEARCH:
            return await BrandfetchService.relay(
                BrandfetchService.search_url(request.value), api_key
            )
        if request.target is ProxyTarget.BRAND:
            return await BrandfetchService.relay(
                BrandfetchService.brand_url(request.value), api_key
            )
        return json_response({"error": MISSING_PARAMETER_ERROR}, status_code=400)
