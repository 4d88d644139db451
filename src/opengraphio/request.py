"""URL and query-string construction for OpenGraph.io API calls."""

from __future__ import annotations

from typing import Any, Dict
from urllib.parse import quote

from .config import DEFAULT_SERVICE, DEFAULT_VERSION, RequestOptions

API_HOST = "opengraph.io"

# Characters JavaScript's encodeURIComponent leaves alone besides alphanumerics and "-_.~".
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_url(target: str, options: RequestOptions) -> str:
    scheme = "https" if options.app_id else "http"
    version = options.version or DEFAULT_VERSION
    service = options.service or DEFAULT_SERVICE
    return f"{scheme}://{API_HOST}/api/{version}/{service}/{encode_uri_component(target)}"


def build_query_params(options: RequestOptions) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "cache_ok": "false" if options.cache_ok is False else "true",
        "use_proxy": "true" if options.use_proxy is True else "false",
    }
    if options.app_id:
        params["app_id"] = options.app_id
    if options.full_render is True:
        params["full_render"] = "true"
    if options.max_cache_age:
        params["max_cache_age"] = options.max_cache_age
    if options.accept_lang:
        params["accept_lang"] = options.accept_lang
    if options.html_elements:
        params["html_elements"] = options.html_elements
    return params


__all__ = ["API_HOST", "build_query_params", "build_url", "encode_uri_component"]
