"""Resource facade binding one URL template to an httpi dispatcher."""

from __future__ import annotations

from typing import Callable

from httpi.request import JSON_CALLBACK, PendingRequest, RequestConfig

Dispatch = Callable[[RequestConfig], PendingRequest]


class HttpiResource:
    """Inject the same URL into every request sent through ``http``.

    Only the shape of :class:`RequestConfig` is assumed, so any callable with
    the dispatcher's signature can stand in for :class:`httpi.Httpi`.
    """

    def __init__(self, http: Dispatch, url: str) -> None:
        self._http = http
        self._url = url
        self._keep_trailing_slash = False

    @property
    def url(self) -> str:
        return self._url

    @property
    def keep_trailing_slash(self) -> bool:
        return self._keep_trailing_slash

    def set_keep_trailing_slash(self, keep_trailing_slash: bool) -> "HttpiResource":
        """Set whether URLs keep their trailing slash. Returns the resource for chaining."""

        self._keep_trailing_slash = keep_trailing_slash
        return self

    def delete(self, config: RequestConfig | None = None) -> PendingRequest:
        return self._make_http_request("DELETE", config)

    def get(self, config: RequestConfig | None = None) -> PendingRequest:
        return self._make_http_request("GET", config)

    def head(self, config: RequestConfig | None = None) -> PendingRequest:
        return self._make_http_request("HEAD", config)

    def jsonp(self, config: RequestConfig | None = None) -> PendingRequest:
        return self._make_http_request("JSONP", config)

    def post(self, config: RequestConfig | None = None) -> PendingRequest:
        return self._make_http_request("POST", config)

    def put(self, config: RequestConfig | None = None) -> PendingRequest:
        return self._make_http_request("PUT", config)

    def _make_http_request(self, method: str, config: RequestConfig | None) -> PendingRequest:
        config = config or RequestConfig()
        config.method = method
        config.url = self._url

        if config.keep_trailing_slash is None:
            config.keep_trailing_slash = self._keep_trailing_slash

        if method == "JSONP":
            self._param_jsonp_callback(config)

        return self._http(config)

    def _param_jsonp_callback(self, config: RequestConfig) -> None:
        # The callback marker may already live in the URL or in a param value.
        if JSON_CALLBACK in self._url:
            return

        if config.params is None:
            config.params = {}
        elif any(value == JSON_CALLBACK for value in config.params.values()):
            return

        config.params["callback"] = JSON_CALLBACK

    def __repr__(self) -> str:
        return f"HttpiResource(url={self._url!r}, keep_trailing_slash={self._keep_trailing_slash})"
