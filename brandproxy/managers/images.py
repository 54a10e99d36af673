import logging

import httpx
from fastapi import Response

from brandproxy.utils import (
    CORS_HEADERS,
    DEFAULT_IMAGE_CONTENT_TYPE,
    IMAGE_CACHE_CONTROL,
    IMAGE_USER_AGENT,
    parse_image_url,
    text_response,
)

logger = logging.getLogger(__name__)


class ProcessImages:

    @staticmethod
    async def proxy_image(url: str) -> Response:
        """
        Proxies a Brandfetch CDN image. Useful for bypassing CORS issues in web clients.
        Errors come back as plain text, unlike the JSON branches.
        """
        target = parse_image_url(url)
        if target is None:
            logger.warning(f"Rejected image URL: {url!r}")
            return text_response("Invalid image URL", status_code=400)

        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(
                    target,
                    headers={"User-Agent": IMAGE_USER_AGENT},
                    follow_redirects=True,
                )
            except httpx.HTTPError as e:  # Connection errors, DNS failures, timeouts, etc.
                logger.error(f"Failed to fetch image from {target}. Error: {e}")
                logger.exception("Image fetch exception details:")
                return text_response(f"Failed to fetch image: {e}", status_code=500)

        if not response.is_success:
            logger.info(f"Image source {target.host} returned {response.status_code}")
            return text_response(
                f"Image fetch failed: {response.status_code}",
                status_code=response.status_code,
            )

        content_type = response.headers.get("content-type") or DEFAULT_IMAGE_CONTENT_TYPE
        return Response(
            content=response.content,
            status_code=200,
            headers={
                **CORS_HEADERS,
                "Content-Type": content_type,
                "Cache-Control": IMAGE_CACHE_CONTROL,
            },
        )
