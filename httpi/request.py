"""Request configuration and in-flight request handles."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Generator, MutableMapping, Union

import httpx

from httpi.abort import AbortHandle

JSON_CALLBACK = "JSON_CALLBACK"

TimeoutValue = Union[float, int, httpx.Timeout, Awaitable[Any], None]


@dataclass(slots=True)
class RequestConfig:
    """Everything needed to send one request.

    ``url`` holds the template before dispatch and the resolved URL after it.
    ``params`` and ``data`` are drained of the keys interpolated into the URL.
    ``timeout`` is either a number of seconds, an ``httpx.Timeout``, or an
    awaitable that cancels the request when it completes.
    ``keep_trailing_slash`` left as ``None`` means "not specified".
    """

    url: str = ""
    method: str = "GET"
    params: MutableMapping[str, Any] | None = None
    data: Any | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: TimeoutValue = None
    keep_trailing_slash: bool | None = None


@dataclass(slots=True)
class PendingRequest:
    """An in-flight request paired with the callable that aborts it."""

    future: asyncio.Future[httpx.Response]
    abort: AbortHandle

    def __await__(self) -> Generator[Any, None, httpx.Response]:
        return self.future.__await__()

    def __iter__(self):
        # Allows ``future, abort = httpi(config)``.
        yield self.future
        yield self.abort

    def done(self) -> bool:
        return self.future.done()

    def cancelled(self) -> bool:
        return self.future.cancelled()
