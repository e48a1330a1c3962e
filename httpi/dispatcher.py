"""Request dispatcher that interpolates URLs and attaches abort hooks."""

from __future__ import annotations

import asyncio
from typing import Callable

import httpx

from httpi.abort import add_abort_hook
from httpi.interpolation import interpolate_url
from httpi.logging import get_logger
from httpi.request import PendingRequest, RequestConfig
from httpi.resource import HttpiResource

HttpCallable = Callable[[RequestConfig], "asyncio.Future[httpx.Response]"]


class Httpi:
    """Proxy for an HTTP client that merges params and data into the URL.

    Calling the dispatcher resolves ``config.url`` in place, installs an abort
    hook in ``config.timeout`` when that slot is free, and hands the config to
    the wrapped client. Must be called while an event loop is running.
    """

    def __init__(self, client: HttpCallable) -> None:
        self._client = client
        self._logger = get_logger(__name__, component="httpi")

    def __call__(self, config: RequestConfig) -> PendingRequest:
        config.url = interpolate_url(
            config.url,
            config.params,
            config.data,
            not config.keep_trailing_slash,
        )

        # The deferred must exist before the request is issued.
        abort = add_abort_hook(config)
        future = self._client(config)

        self._logger.debug("request_dispatched", method=config.method, url=config.url)
        return PendingRequest(future=future, abort=abort)

    def resource(self, url: str) -> HttpiResource:
        """Create a resource that sends every request to ``url``."""

        return HttpiResource(self, url)
