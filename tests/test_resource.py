from __future__ import annotations

from typing import List

import pytest

from httpi.request import JSON_CALLBACK, RequestConfig
from httpi.resource import HttpiResource


class RecordingHttp:
    def __init__(self) -> None:
        self.configs: List[RequestConfig] = []

    def __call__(self, config: RequestConfig):
        self.configs.append(config)
        return config


@pytest.mark.parametrize("verb", ["get", "post", "put", "delete", "head", "jsonp"])
def test_verbs_set_method_and_bound_url(verb: str) -> None:
    http = RecordingHttp()
    resource = HttpiResource(http, "/users/:id")

    getattr(resource, verb)(RequestConfig(url="/ignored", method="PATCH"))

    sent = http.configs[0]
    assert sent.method == verb.upper()
    assert sent.url == "/users/:id"


def test_missing_config_defaults_to_empty() -> None:
    http = RecordingHttp()

    HttpiResource(http, "/users").get()

    sent = http.configs[0]
    assert sent.params is None
    assert sent.data is None
    assert sent.keep_trailing_slash is False


def test_trailing_slash_preference_is_chainable_and_injected() -> None:
    http = RecordingHttp()
    resource = HttpiResource(http, "/users/")

    assert resource.set_keep_trailing_slash(True) is resource
    resource.post()

    assert http.configs[0].keep_trailing_slash is True


def test_explicit_trailing_slash_setting_wins() -> None:
    http = RecordingHttp()
    resource = HttpiResource(http, "/users/").set_keep_trailing_slash(True)

    resource.put(RequestConfig(keep_trailing_slash=False))

    assert http.configs[0].keep_trailing_slash is False


def test_jsonp_adds_callback_param_once() -> None:
    http = RecordingHttp()

    HttpiResource(http, "/feed").jsonp(RequestConfig(params={"limit": 5}))

    assert http.configs[0].params == {"limit": 5, "callback": JSON_CALLBACK}


def test_jsonp_creates_params_when_absent() -> None:
    http = RecordingHttp()

    HttpiResource(http, "/feed").jsonp()

    assert http.configs[0].params == {"callback": JSON_CALLBACK}


def test_jsonp_leaves_marker_in_url_alone() -> None:
    http = RecordingHttp()

    HttpiResource(http, "/feed?cb=JSON_CALLBACK").jsonp()

    assert http.configs[0].params is None


def test_jsonp_leaves_marker_in_params_alone() -> None:
    http = RecordingHttp()

    HttpiResource(http, "/feed").jsonp(RequestConfig(params={"fn": JSON_CALLBACK}))

    assert http.configs[0].params == {"fn": JSON_CALLBACK}


def test_non_jsonp_verbs_do_not_add_callback() -> None:
    http = RecordingHttp()

    HttpiResource(http, "/feed").get()

    assert http.configs[0].params is None
