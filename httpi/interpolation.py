"""URL template interpolation for httpi requests.

Labels such as ``:userID`` are replaced with values taken from the request
``data`` and ``params`` mappings. Every value that ends up in the URL is
removed from the mapping it came from, so whatever is left over can still be
sent as the query string or the request body.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, MutableMapping

# Parentheses and pipes only document optional path segments, e.g.
# "/users(/:userID|/me)"; they are never part of the resolved URL.
_MARKUP_PATTERN = re.compile(r"(\(\s*|\s*\)|\s*\|\s*)")
_LABEL_PATTERN = re.compile(r":([a-z]\w*)", re.IGNORECASE | re.ASCII)
# A run of slashes right after ":" is the scheme separator and is kept.
_REPEATED_SLASH_PATTERN = re.compile(r"(^|[^:])/{2,}")
_TRAILING_SLASH_PATTERN = re.compile(r"/+$")


def pop_first_key(*mappings: Mapping[str, Any] | None, key: str) -> tuple[bool, Any]:
    """Pop ``key`` from the first mapping that owns it.

    Returns ``(found, value)``. Mappings later in the list keep their copy of
    the key even when they own it too. Read-only mappings are looked up but
    left unchanged.
    """

    for mapping in mappings:
        if mapping is None or key not in mapping:
            continue
        if isinstance(mapping, MutableMapping):
            return True, mapping.pop(key)
        return True, mapping[key]
    return False, None


def _as_source(value: Any) -> Mapping[str, Any] | None:
    # Raw bodies (str, bytes, lists) are not substitution sources.
    if isinstance(value, Mapping):
        return value
    return None


def interpolate_url(
    url: str,
    params: MutableMapping[str, Any] | None = None,
    data: Any = None,
    remove_trailing_slash: bool = False,
) -> str:
    """Merge ``params`` and ``data`` values into the labels of ``url``.

    ``data`` takes precedence over ``params``. Labels without a matching key
    resolve to an empty string. Both mappings are mutated in place: every key
    that was substituted into the URL is removed.

    A label that appears twice only receives a value the first time, since the
    key is gone by the time the second occurrence is looked up.
    """

    params_source = _as_source(params)
    data_source = _as_source(data)

    url = _MARKUP_PATTERN.sub("", url)

    def _replace(match: re.Match[str]) -> str:
        found, value = pop_first_key(data_source, params_source, key=match.group(1))
        if not found or value is None:
            return ""
        return str(value)

    url = _LABEL_PATTERN.sub(_replace, url)
    url = _REPEATED_SLASH_PATTERN.sub(r"\1/", url)

    if remove_trailing_slash:
        url = _TRAILING_SLASH_PATTERN.sub("", url)

    return url
