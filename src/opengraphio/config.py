"""Configuration objects for the OpenGraph.io SDK.

Options are layered: client defaults, then the per-call override, then the
retry strategy being attempted. Every layer accepts the API client's
camelCase option names (``appId``, ``cacheOk``...) as well as snake_case.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .errors import ConfigurationError

DEFAULT_VERSION = "1.1"
DEFAULT_SERVICE = "site"

MISSING_APP_ID = (
    "appId must be supplied when making requests to the API. "
    "Get a free appId by signing up here: https://www.opengraph.io/"
)


class RequestOptions(BaseModel):
    """Per-request API options; ``None`` means "not set on this layer"."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    app_id: Optional[str] = None
    cache_ok: Optional[bool] = None
    version: Optional[str] = None
    service: Optional[str] = None
    use_proxy: Optional[bool] = None
    full_render: Optional[bool] = None
    max_cache_age: Optional[Union[int, float]] = None
    accept_lang: Optional[str] = None
    html_elements: Optional[str] = None

    def overrides(self) -> Dict[str, Any]:
        """Option fields this layer actually sets, keyed by field name."""
        values = {}
        for name in OPTION_FIELDS:
            value = getattr(self, name)
            if value is not None:
                values[name] = value
        return values

    @classmethod
    def coerce(cls, value: Union["RequestOptions", Mapping[str, Any], None]) -> "RequestOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, RequestOptions):
            return cls.model_validate(value.overrides())
        return cls.model_validate(dict(value))


OPTION_FIELDS: Tuple[str, ...] = tuple(RequestOptions.model_fields)


class EffectiveConfig(RequestOptions):
    """Fully merged options used for one request."""

    cache_ok: bool = True
    version: str = DEFAULT_VERSION
    service: str = DEFAULT_SERVICE


class ClientConfig(EffectiveConfig):
    """Defaults held by a client for every request it makes."""

    @model_validator(mode="after")
    def _require_app_id(self) -> "ClientConfig":
        if not self.app_id:
            raise ConfigurationError(MISSING_APP_ID)
        return self

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        app_id = os.environ.get("OPENGRAPHIO_APP_ID") or os.environ.get("TEST_APP_ID")
        data: Dict[str, Any] = {"app_id": app_id}
        version = os.environ.get("OPENGRAPHIO_VERSION")
        if version:
            data["version"] = version
        service = os.environ.get("OPENGRAPHIO_SERVICE")
        if service:
            data["service"] = service
        data.update(overrides)
        return cls.model_validate(data)


class StrategyConfig(RequestOptions):
    """One fallback attempt: an option delta plus the fields it must produce."""

    requires: Tuple[str, ...]

    @field_validator("requires", mode="before")
    @classmethod
    def _normalize_requires(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set, frozenset)):
            seen: Dict[str, None] = {}
            for item in value:
                seen.setdefault(item, None)
            return tuple(seen)
        return value


class RequestConfig(RequestOptions):
    """Options for a single call, optionally with retry strategies."""

    retry_strategies: Optional[Tuple[StrategyConfig, ...]] = None


def resolve(base: RequestOptions, *layers: Union[RequestOptions, Mapping[str, Any], None]) -> EffectiveConfig:
    """Merge option layers over ``base``; later layers win field by field.

    Returns a new EffectiveConfig. Neither ``base`` nor any layer is
    modified, and ``requires``/``retry_strategies`` never reach the result.
    The appId check belongs to ClientConfig construction only, so a layer
    may clear ``app_id``.
    """
    merged = {name: getattr(base, name) for name in OPTION_FIELDS}
    for layer in layers:
        if layer is None:
            continue
        merged.update(RequestOptions.coerce(layer).overrides())
    return EffectiveConfig.model_validate({k: v for k, v in merged.items() if v is not None})


__all__ = [
    "DEFAULT_SERVICE",
    "DEFAULT_VERSION",
    "OPTION_FIELDS",
    "ClientConfig",
    "EffectiveConfig",
    "RequestConfig",
    "RequestOptions",
    "StrategyConfig",
    "resolve",
]
