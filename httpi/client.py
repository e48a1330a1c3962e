"""httpx binding that executes resolved httpi request configurations."""

from __future__ import annotations

import asyncio
import inspect
import itertools
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping

import httpx

from httpi.config import Settings, get_settings
from httpi.logging import get_logger
from httpi.request import JSON_CALLBACK, RequestConfig

_LOGGER = get_logger(__name__, component="http_client")

_callback_ids = itertools.count()


class HttpClient:
    """Thin wrapper around httpx that understands :class:`RequestConfig`.

    Calling the client schedules the request and returns an asyncio future.
    When ``config.timeout`` is awaitable the future is cancelled as soon as
    that awaitable completes; any other timeout value is handed to httpx.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client
        self._default_headers = dict(default_headers or {})
        if "User-Agent" not in self._default_headers:
            self._default_headers["User-Agent"] = self.settings.user_agent
        self._logger = _LOGGER

    @asynccontextmanager
    async def lifecycle(self) -> AsyncIterator["HttpClient"]:
        """Ensure an AsyncClient is available for the duration of the context."""

        if self._client is not None:
            yield self
            return

        timeout = httpx.Timeout(self.settings.request_timeout_seconds)
        async with httpx.AsyncClient(base_url=self.settings.base_url, timeout=timeout) as client:
            self._client = client
            try:
                yield self
            finally:
                self._client = None

    def __call__(self, config: RequestConfig) -> asyncio.Future[httpx.Response]:
        if self._client is None:
            raise RuntimeError("HttpClient.lifecycle must be entered before requesting")

        cancel_signal = config.timeout if inspect.isawaitable(config.timeout) else None
        timeout = None if cancel_signal is not None else config.timeout

        task = asyncio.ensure_future(self._send(self._client, config, timeout))
        if cancel_signal is not None:
            signal = asyncio.ensure_future(cancel_signal)
            # Cancelling a task that already finished does nothing.
            signal.add_done_callback(lambda _: task.cancel())
            task.add_done_callback(lambda _: self._log_settled(config, task))
        return task

    async def _send(
        self,
        client: httpx.AsyncClient,
        config: RequestConfig,
        timeout: Any,
    ) -> httpx.Response:
        method = config.method.upper()
        url = config.url
        params = _query_params(config.params)

        if method == "JSONP":
            method = "GET"
            callback_name = f"{self.settings.jsonp_callback_prefix}_{next(_callback_ids)}"
            url = url.replace(JSON_CALLBACK, callback_name)
            params = {
                key: value.replace(JSON_CALLBACK, callback_name) if isinstance(value, str) else value
                for key, value in params.items()
            }

        headers = dict(self._default_headers)
        headers.update(config.headers)

        body: dict[str, Any] = {}
        if isinstance(config.data, (str, bytes)):
            if config.data:
                body["content"] = config.data
        elif config.data:
            body["json"] = config.data

        self._logger.debug(
            "http_request",
            method=method,
            url=url,
            params_present=bool(params),
            has_body=bool(body),
        )

        # httpx replaces an existing query string when given params; merge instead.
        target = httpx.URL(url)
        if params:
            target = target.copy_merge_params(params)

        kwargs: dict[str, Any] = {"headers": headers, **body}
        if timeout is not None:
            kwargs["timeout"] = timeout
        return await client.request(method, target, **kwargs)

    def _log_settled(self, config: RequestConfig, task: asyncio.Future[httpx.Response]) -> None:
        if task.cancelled():
            self._logger.info("http_request_aborted", method=config.method, url=config.url)


def _query_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}
