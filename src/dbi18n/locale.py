# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Locale negotiation — protocol, built-in resolvers and request binding."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from dbi18n.context import RequestContext
from dbi18n.culture import Culture, normalize_tag


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the locale from an incoming request."""

    def resolve_locale(self, request: Any) -> str: ...


class AcceptHeaderLocaleResolver:
    """Parses the ``Accept-Language`` header and returns the best match.

    The resolver picks the language tag with the highest quality value;
    equal qualities keep header order. When *supported* is given, only
    tags supported exactly or through their parent culture qualify, and
    the supported spelling is returned. When no header is present or
    nothing qualifies it falls back to *default_locale*.
    """

    def __init__(self, default_locale: str = "en", supported: Iterable[str] | None = None) -> None:
        self._default = normalize_tag(default_locale)
        self._supported = {normalize_tag(tag).lower(): normalize_tag(tag) for tag in supported or ()}

    def resolve_locale(self, request: Any) -> str:
        header: str = getattr(request, "accept_language", "") or ""
        if not header:
            headers = getattr(request, "headers", None)
            if headers is not None:
                header = headers.get("accept-language", "")

        if not header:
            return self._default

        for tag in _parse_accept_language(header):
            match = self._match(tag)
            if match is not None:
                return match
        return self._default

    def _match(self, tag: str) -> str | None:
        if tag == "*":
            return None
        if not self._supported:
            return tag
        culture: Culture | None = Culture.from_tag(tag)
        while culture is not None and culture.name:
            found = self._supported.get(culture.name.lower())
            if found is not None:
                return found
            culture = culture.parent
        return None


class FixedLocaleResolver:
    """Always returns a pre-configured locale, ignoring the request."""

    def __init__(self, locale: str = "en") -> None:
        self._locale = normalize_tag(locale)

    def resolve_locale(self, request: Any) -> str:  # noqa: ARG002
        return self._locale


def bind_request_culture(request: Any, resolver: LocaleResolver) -> Culture:
    """Negotiate the culture for *request* and store it on the current RequestContext."""
    ctx = RequestContext.current()
    if ctx is None:
        ctx = RequestContext.init()
    culture = Culture.from_tag(resolver.resolve_locale(request))
    ctx.culture = culture
    return culture


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_accept_language(header: str) -> list[str]:
    """Return the tags of *header* ordered by descending *q* value.

    Handles the standard ``Accept-Language`` format, e.g.
    ``en-US,en;q=0.9,fr;q=0.8``. Entries with an unparseable or zero
    quality are dropped.
    """
    weighted: list[tuple[float, str]] = []

    for part in header.split(","):
        part = part.strip()
        if not part:
            continue

        tag, _, params = part.partition(";")
        quality = 1.0
        params = params.strip()
        if params[:2].lower() == "q=":
            try:
                quality = float(params[2:].strip())
            except ValueError:
                continue

        tag = tag.strip()
        if tag and quality > 0:
            weighted.append((quality, tag if tag == "*" else normalize_tag(tag)))

    weighted.sort(key=lambda item: item[0], reverse=True)
    return [tag for _, tag in weighted]
