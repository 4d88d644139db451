"""Async Python client for the OpenGraph.io metadata API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Union

import httpx

from . import __version__
from .config import ClientConfig, EffectiveConfig, RequestConfig, RequestOptions, resolve
from .errors import TransportError
from .request import build_query_params, build_url
from .strategies import StrategyInput, run_strategies

logger = logging.getLogger("opengraphio.client")

OptionsInput = Union[RequestOptions, Mapping[str, Any], None]


def _decoded_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class OpenGraphClient:
    def __init__(
        self,
        options: OptionsInput = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
        **kwargs: Any,
    ) -> None:
        data: Dict[str, Any] = {}
        data.update(RequestOptions.coerce(options).overrides())
        data.update(RequestOptions.coerce(kwargs).overrides())
        self._config = ClientConfig.model_validate(data)
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "OpenGraphClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def options(self) -> ClientConfig:
        return self._config

    def configure(self, **changes: Any) -> ClientConfig:
        """Replace the client defaults; later calls see the new values."""
        self._config = ClientConfig.model_validate(resolve(self._config, changes).overrides())
        return self._config

    def build_url(self, url: str, options: OptionsInput = None) -> str:
        return build_url(url, resolve(self._config, options))

    def build_query_params(self, options: OptionsInput = None) -> Dict[str, Any]:
        return build_query_params(resolve(self._config, options))

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": f"opengraphio-python/{__version__}",
        }

    async def fetch_once(self, target: str, config: EffectiveConfig) -> Any:
        url = build_url(target, config)
        params = build_query_params(config)
        logger.debug(
            "GET %s params=%s",
            url,
            {key: value for key, value in params.items() if key != "app_id"},
        )
        try:
            response = await self._client.get(url, params=params, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.debug("OpenGraph.io request failed status=%s body=%s", status, exc.response.text)
            raise TransportError(
                f"OpenGraph.io responded with HTTP {status}",
                cause=exc,
                url=url,
                status_code=status,
                payload=_decoded_body(exc.response),
            ) from exc
        except httpx.HTTPError as exc:
            logger.debug("OpenGraph.io request to %s failed: %r", url, exc)
            raise TransportError(str(exc) or exc.__class__.__name__, cause=exc, url=url) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                "OpenGraph.io response body is not valid JSON",
                cause=exc,
                url=url,
                status_code=response.status_code,
            ) from exc

    async def fetch_with_strategies(
        self,
        url: str,
        options: OptionsInput,
        strategies: Optional[Sequence[StrategyInput]],
    ) -> Any:
        base = RequestConfig.coerce(options)
        if not strategies:
            return await self.fetch_once(url, resolve(self._config, base))
        return await run_strategies(self.fetch_once, url, self._config, base, strategies)

    async def get_site_info(self, url: str, options: OptionsInput = None) -> Any:
        """Fetch metadata for ``url``.

        With ``retryStrategies`` in ``options`` the strategies are tried in
        order and the result carries ``allRequests``; otherwise the decoded
        API response is returned as-is and failures raise TransportError.
        """
        request = RequestConfig.coerce(options)
        return await self.fetch_with_strategies(url, request, request.retry_strategies)

    async def extract(
        self,
        url: str,
        html_elements: Optional[str] = None,
        options: OptionsInput = None,
    ) -> Any:
        request = RequestConfig.coerce(options)
        update: Dict[str, Any] = {"service": "extract"}
        if html_elements:
            update["html_elements"] = html_elements
        return await self.get_site_info(url, request.model_copy(update=update))

    async def scrape(self, url: str, options: OptionsInput = None) -> Any:
        request = RequestConfig.coerce(options)
        return await self.get_site_info(url, request.model_copy(update={"service": "scrape"}))

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["OpenGraphClient"]
