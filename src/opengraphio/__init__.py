"""OpenGraph.io Python SDK."""

__version__ = "0.1.0"

from .callbacks import with_callback
from .client import OpenGraphClient
from .config import ClientConfig, EffectiveConfig, RequestConfig, StrategyConfig, resolve
from .errors import ConfigurationError, OpenGraphError, TransportError
from .strategies import AttemptRecord

__all__ = [
    "AttemptRecord",
    "ClientConfig",
    "ConfigurationError",
    "EffectiveConfig",
    "OpenGraphClient",
    "OpenGraphError",
    "RequestConfig",
    "StrategyConfig",
    "TransportError",
    "resolve",
    "with_callback",
]
