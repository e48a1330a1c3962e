"""Abort hooks that cancel in-flight requests through their timeout slot."""

from __future__ import annotations

import asyncio
from typing import Any, Protocol

from httpi.logging import get_logger


class Deferred:
    """One-shot signal whose ``promise`` completes when ``resolve`` is called.

    Resolving a deferred that already completed is ignored, so callers may
    invoke it more than once.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        loop = loop or asyncio.get_running_loop()
        self.promise: asyncio.Future[Any] = loop.create_future()

    def resolve(self, value: Any = None) -> None:
        if not self.promise.done():
            self.promise.set_result(value)

    @property
    def resolved(self) -> bool:
        return self.promise.done()


class AbortHandle(Protocol):
    def __call__(self) -> None: ...


class AbortHook:
    """Abort callable that resolves the deferred placed in ``config.timeout``.

    It holds its own reference to the deferred, so it keeps working after it
    is detached from the request it was created for.
    """

    def __init__(self, deferred: Deferred) -> None:
        self.deferred = deferred

    def __call__(self) -> None:
        self.deferred.resolve()

    def __repr__(self) -> str:
        state = "resolved" if self.deferred.resolved else "pending"
        return f"<AbortHook {state}>"


def noop_abort() -> None:
    """Abort used when the request timeout was already set by the caller."""

    get_logger(__name__, component="abort").warning(
        "request_not_abortable",
        reason="This request cannot be aborted because the [timeout] property was already being used.",
    )


def add_abort_hook(config: Any) -> AbortHandle:
    """Install a cancellation deferred in ``config.timeout`` and return its abort.

    When the caller already filled ``config.timeout`` the request cannot be
    aborted from here and :func:`noop_abort` is returned instead.
    """

    if config.timeout:
        return noop_abort

    deferred = Deferred()
    config.timeout = deferred.promise
    return AbortHook(deferred)
