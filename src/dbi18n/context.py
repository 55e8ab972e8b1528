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
"""Request-scoped context backed by contextvars.

The hosting server creates a RequestContext per request, stores the
negotiated culture on it and marks the view being rendered.
RequestCallerContext exposes both to the localization resolver.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from dbi18n.culture import Culture

_request_context_var: ContextVar[RequestContext | None] = ContextVar(
    "dbi18n_request_context", default=None
)

_CULTURE_ATTR = "culture"
_VIEW_ATTR = "executing_view"


class RequestContext:
    """Holds per-request state: request ID, culture, executing view and custom attributes.

    Use ``RequestContext.init()`` to create a new context for the current
    thread or async task, and ``RequestContext.current()`` to retrieve it.
    """

    def __init__(self, request_id: str | None = None) -> None:
        self._request_id = request_id or uuid.uuid4().hex
        self._attributes: dict[str, Any] = {}

    @property
    def request_id(self) -> str:
        return self._request_id

    @property
    def culture(self) -> Culture | None:
        return self._attributes.get(_CULTURE_ATTR)

    @culture.setter
    def culture(self, value: Culture | str | None) -> None:
        self._attributes[_CULTURE_ATTR] = None if value is None else Culture.from_tag(value)

    @property
    def executing_view(self) -> str | None:
        return self._attributes.get(_VIEW_ATTR)

    @executing_view.setter
    def executing_view(self, value: str | None) -> None:
        self._attributes[_VIEW_ATTR] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    @classmethod
    def init(cls, request_id: str | None = None) -> RequestContext:
        """Create and set a new RequestContext for the current task."""
        ctx = cls(request_id=request_id)
        _request_context_var.set(ctx)
        return ctx

    @classmethod
    def current(cls) -> RequestContext | None:
        return _request_context_var.get()

    @classmethod
    def clear(cls) -> None:
        _request_context_var.set(None)


@contextmanager
def rendering(view: str) -> Iterator[RequestContext]:
    """Mark *view* as the executing view of the current request.

    The previous view is restored on exit, so nested partial renders
    report their own identity while they run.
    """
    ctx = RequestContext.current()
    if ctx is None:
        ctx = RequestContext.init()
    previous = ctx.executing_view
    ctx.executing_view = view
    try:
        yield ctx
    finally:
        ctx.executing_view = previous


class RequestCallerContext:
    """CallerContext reading the current RequestContext.

    Falls back to *default_culture* when no request is active or no
    culture was negotiated for it.
    """

    def __init__(self, default_culture: Culture | str = "en") -> None:
        self._default_culture = Culture.from_tag(default_culture)

    @property
    def default_culture(self) -> Culture:
        return self._default_culture

    def current_culture(self) -> Culture:
        ctx = RequestContext.current()
        if ctx is None or ctx.culture is None:
            return self._default_culture
        return ctx.culture

    def current_resource_hint(self) -> str | None:
        ctx = RequestContext.current()
        return None if ctx is None else ctx.executing_view


class FixedCallerContext:
    """CallerContext with a constant culture, for jobs, scripts and tests."""

    def __init__(self, culture: Culture | str, resource_hint: str | None = None) -> None:
        self._culture = Culture.from_tag(culture)
        self._resource_hint = resource_hint

    def current_culture(self) -> Culture:
        return self._culture

    def current_resource_hint(self) -> str | None:
        return self._resource_hint
