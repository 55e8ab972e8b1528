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
"""LocalizationResolver — resource-scoped, culture-aware text lookup."""

from __future__ import annotations

import string
from collections.abc import Callable, Iterator
from typing import Any

import structlog

from dbi18n.culture import Culture
from dbi18n.exceptions import (
    InvalidKeyException,
    MessageFormatException,
    MissingCollaboratorException,
    ResourceScopeException,
)
from dbi18n.ports.outbound import CallerContext, RecordCollection, RecordStore
from dbi18n.record import LocalizationRecord

logger = structlog.get_logger("dbi18n.resolver")

_formatter = string.Formatter()


class RecordSequence:
    """Lazy, restartable sequence of the records matching one lookup.

    Every iteration queries the store again. When format arguments were
    given, each yielded record is a fresh copy carrying the formatted text.
    """

    def __init__(
        self,
        lookup: Callable[[], list[LocalizationRecord]],
        args: tuple[Any, ...] = (),
    ) -> None:
        self._lookup = lookup
        self._args = args

    def __iter__(self) -> Iterator[LocalizationRecord]:
        for record in self._lookup():
            if self._args:
                yield record.with_text(_format(record.text, self._args))
            else:
                yield record


class LocalizationResolver:
    """Turns a lookup key into display text for the caller's culture.

    Records are scoped by *resource*: either bound explicitly (see
    :meth:`for_resource`) or taken once from the caller context's resource
    hint and memoized for the lifetime of the resolver. Lookups try the
    active culture first, then its parent culture (one level only).

    A missing translation never raises: :meth:`get` echoes the key and
    :meth:`get_all` yields nothing. When the store exposes no record
    collection for *context*, every lookup behaves as missing.

    Usage::

        resolver = LocalizationResolver(session, SqlAlchemyRecordStore(), RequestCallerContext())
        resolver.get("greeting", user.name)
        resolver.for_resource(InvoicePage)["title"]
    """

    def __init__(
        self,
        context: Any,
        store: RecordStore,
        caller_context: CallerContext | None,
        *,
        resource: str | None = None,
    ) -> None:
        if caller_context is None:
            raise MissingCollaboratorException(
                "LocalizationResolver requires a caller context",
                code="I18N_MISSING_COLLABORATOR",
                context={"collaborator": "CallerContext"},
            )
        self._context = context
        self._store = store
        self._caller_context = caller_context
        self._resource = resource if resource and resource.strip() else None
        self._records: RecordCollection | None = store.records_of(context)
        if self._records is None:
            logger.warning(
                "localization_store_unavailable",
                store=type(store).__name__,
                context=type(context).__name__,
            )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def resource(self) -> str:
        """The resource scope of this resolver, resolved on first access."""
        if self._resource is None:
            hint = self._caller_context.current_resource_hint()
            if not hint or not hint.strip():
                raise ResourceScopeException(
                    "No resource bound and no view is currently being rendered; "
                    "use for_resource() to bind one explicitly",
                    code="I18N_NO_RESOURCE_SCOPE",
                )
            self._resource = hint
        return self._resource

    def get(self, key: str, *args: Any) -> str:
        """Return the text for *key*, or *key* itself when nothing matches.

        Positional *args* are substituted into ``{0}``, ``{1}``, ...
        placeholders of the resolved text.
        """
        _require_key(key)
        records = self._lookup(key)
        if records:
            text = records[0].text
        else:
            logger.debug("localization_key_missing", key=key, resource=self._resource)
            text = key
        return _format(text, args) if args else text

    def __getitem__(self, item: str | tuple[Any, ...]) -> str:
        if isinstance(item, tuple):
            if not item:
                raise InvalidKeyException(item)
            return self.get(item[0], *item[1:])
        return self.get(item)

    def get_all(self, key: str, *args: Any) -> RecordSequence:
        """Return every record matching *key* after culture fallback.

        With *args*, the records yielded are copies whose text has been
        formatted; records held by the store are never modified.
        """
        _require_key(key)
        return RecordSequence(lambda: self._lookup(key), args)

    def for_resource(self, resource: type | str) -> LocalizationResolver:
        """Return a new resolver bound to *resource*, leaving this one unchanged.

        Classes are bound by their fully-qualified name.
        """
        name = resource if isinstance(resource, str) else _qualified_name(resource)
        return LocalizationResolver(
            self._context,
            self._store,
            self._caller_context,
            resource=name,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lookup(self, key: str) -> list[LocalizationRecord]:
        if self._records is None:
            return []

        culture = self._caller_context.current_culture()
        candidates = list(self._records.find(key, self.resource))

        result = _in_culture(candidates, culture)
        if not result and culture.parent is not None:
            result = _in_culture(candidates, culture.parent)
            if result:
                logger.debug(
                    "localization_parent_culture_fallback",
                    key=key,
                    culture=culture.name,
                    parent=culture.parent.name,
                )
        return result


def _in_culture(records: list[LocalizationRecord], culture: Culture) -> list[LocalizationRecord]:
    return [r for r in records if r.culture == culture.name]


def _require_key(key: Any) -> None:
    if not isinstance(key, str) or not key.strip():
        raise InvalidKeyException(key)


def _format(template: str, args: tuple[Any, ...]) -> str:
    """Substitute positional *args* into ``{0}``, ``{1:>8}``, ... placeholders.

    Only numeric indices with an optional format spec are allowed; attribute
    access, item access, conversions and automatic numbering are rejected.
    """
    parts: list[str] = []
    try:
        for literal, field_name, format_spec, conversion in _formatter.parse(template):
            parts.append(literal)
            if field_name is None:
                continue
            if conversion or not (field_name.isascii() and field_name.isdigit()):
                raise _format_error(template, args, f"unsupported placeholder '{{{field_name}}}'")
            parts.append(format(args[int(field_name)], format_spec or ""))
    except MessageFormatException:
        raise
    except (IndexError, TypeError, ValueError) as exc:
        raise _format_error(template, args, str(exc)) from exc
    return "".join(parts)


def _format_error(template: str, args: tuple[Any, ...], reason: str) -> MessageFormatException:
    return MessageFormatException(
        f"Cannot format localized text: {reason}",
        code="I18N_MESSAGE_FORMAT",
        context={"template": template, "arg_count": len(args)},
    )


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"
