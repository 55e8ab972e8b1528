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
"""Outbound ports — record store and caller context contracts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from dbi18n.culture import Culture
from dbi18n.record import LocalizationRecord


@runtime_checkable
class RecordCollection(Protocol):
    """A queryable collection of localization records."""

    def find(self, key: str, resource: str) -> Iterable[LocalizationRecord]:
        """Return every record matching *key* and *resource*, in store order."""
        ...


@runtime_checkable
class RecordStore(Protocol):
    """Adapter exposing the record collection held by a storage context.

    Implemented once per store type by the integration layer.
    """

    def records_of(self, context: Any) -> RecordCollection | None:
        """Return the record collection of *context*, or ``None`` when it has none."""
        ...


@runtime_checkable
class CallerContext(Protocol):
    """Port for the per-request caller state the resolver reads."""

    def current_culture(self) -> Culture:
        """The culture negotiated upstream for the current operation."""
        ...

    def current_resource_hint(self) -> str | None:
        """Identity of the view or template being rendered, if any."""
        ...
