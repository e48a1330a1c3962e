"""httpi: URL-interpolating proxy for asynchronous HTTP requests."""

from __future__ import annotations

from .abort import AbortHook, Deferred, add_abort_hook, noop_abort
from .client import HttpClient
from .config import Settings, get_settings
from .dispatcher import Httpi
from .interpolation import interpolate_url, pop_first_key
from .request import JSON_CALLBACK, PendingRequest, RequestConfig
from .resource import HttpiResource

__all__ = [
    "AbortHook",
    "Deferred",
    "HttpClient",
    "Httpi",
    "HttpiResource",
    "JSON_CALLBACK",
    "PendingRequest",
    "RequestConfig",
    "Settings",
    "add_abort_hook",
    "get_settings",
    "interpolate_url",
    "noop_abort",
    "pop_first_key",
]
