from typing import Optional
from urllib.parse import quote

import httpx
from fastapi.responses import JSONResponse, PlainTextResponse

BRANDFETCH_API_BASE = "https://api.brandfetch.io/v2"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, X-User-Api-Key",
}

ALLOWED_IMAGE_HOSTS = ("brandfetch.io", "asset.brandfetch.io", "cdn.brandfetch.io")
IMAGE_USER_AGENT = "Mozilla/5.0 (compatible; ImageProxy/1.0)"
IMAGE_CACHE_CONTROL = "public, max-age=86400"
DEFAULT_IMAGE_CONTENT_TYPE = "image/png"

# Characters encodeURIComponent leaves alone, beyond the unreserved set quote() always keeps
_URI_COMPONENT_SAFE = "!~*'()"


def encode_path_segment(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def is_allowed_host(hostname: str) -> bool:
    """Exact or dot-bounded suffix match against the image allow-list."""
    if not hostname:
        return False
    hostname = hostname.lower()
    return any(
        hostname == allowed or hostname.endswith("." + allowed)
        for allowed in ALLOWED_IMAGE_HOSTS
    )


def parse_image_url(raw: str) -> Optional[httpx.URL]:
    """
    Parses an image URL with the same parser that performs the fetch.
    Returns None when the URL is malformed, not http(s), or outside the allow-list.
    """
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL:
        return None
    if url.scheme not in ("http", "https"):
        return None
    if not is_allowed_host(url.host):
        return None
    return url


def json_response(content, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def text_response(content: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(content=content, status_code=status_code, headers=CORS_HEADERS)
