from __future__ import annotations

from opengraphio.config import ClientConfig, RequestOptions, resolve
from opengraphio.request import build_query_params, build_url, encode_uri_component


def test_build_url_with_app_id_uses_https() -> None:
    cfg = ClientConfig(app_id="ABC")
    assert build_url("http://cnn.com", cfg) == "https://opengraph.io/api/1.1/site/http%3A%2F%2Fcnn.com"


def test_build_url_without_app_id_uses_http() -> None:
    url = build_url("http://cnn.com", RequestOptions(version="2.0", service="extract"))
    assert url == "http://opengraph.io/api/2.0/extract/http%3A%2F%2Fcnn.com"


def test_build_url_orders_version_service_target() -> None:
    cfg = ClientConfig(app_id="ABC", version="1.0", service="scrape")
    assert build_url("https://a.io/b?c=d", cfg) == "https://opengraph.io/api/1.0/scrape/https%3A%2F%2Fa.io%2Fb%3Fc%3Dd"


def test_encode_uri_component_matches_javascript() -> None:
    assert encode_uri_component("a b&c=d/e") == "a%20b%26c%3Dd%2Fe"
    assert encode_uri_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_uri_component("#,;:@$+") == "%23%2C%3B%3A%40%24%2B"
    assert encode_uri_component("café") == "caf%C3%A9"


def test_default_params() -> None:
    params = build_query_params(ClientConfig(app_id="ABC"))
    assert params["cache_ok"] == "true"
    assert params["use_proxy"] == "false"
    assert params["app_id"] == "ABC"
    for key in ("max_cache_age", "accept_lang", "full_render", "html_elements"):
        assert key not in params


def test_cache_disabled_params() -> None:
    params = build_query_params(ClientConfig.model_validate({"appId": "ABC", "cacheOk": False}))
    assert params == {"cache_ok": "false", "use_proxy": "false", "app_id": "ABC"}


def test_optional_params() -> None:
    cfg = ClientConfig(
        app_id="ABC",
        use_proxy=True,
        full_render=True,
        max_cache_age=100000,
        accept_lang="en-us",
        html_elements="h1,h2",
    )
    params = build_query_params(cfg)
    assert params["use_proxy"] == "true"
    assert params["full_render"] == "true"
    assert params["max_cache_age"] == 100000
    assert params["accept_lang"] == "en-us"
    assert params["html_elements"] == "h1,h2"


def test_false_options_are_absent() -> None:
    params = build_query_params(ClientConfig(app_id="ABC", full_render=False, max_cache_age=0))
    assert "full_render" not in params
    assert "max_cache_age" not in params


def test_params_without_app_id() -> None:
    params = build_query_params(RequestOptions())
    assert params == {"cache_ok": "true", "use_proxy": "false"}


def test_fractional_max_cache_age_param() -> None:
    params = build_query_params(ClientConfig(app_id="ABC", max_cache_age=1.5))
    assert params["max_cache_age"] == 1.5


def test_cleared_app_id_builds_http_url() -> None:
    cfg = resolve(ClientConfig(app_id="ABC"), {"appId": ""})
    assert build_url("http://cnn.com", cfg) == "http://opengraph.io/api/1.1/site/http%3A%2F%2Fcnn.com"
    assert "app_id" not in build_query_params(cfg)
