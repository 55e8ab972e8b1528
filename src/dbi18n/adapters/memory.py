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
"""In-memory record store — serves records from any iterable."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dbi18n.record import LocalizationRecord


class InMemoryRecordCollection:
    """Filters a fixed list of records in insertion order."""

    def __init__(self, records: Iterable[LocalizationRecord]) -> None:
        self._records = list(records)

    def find(self, key: str, resource: str) -> Iterator[LocalizationRecord]:
        return (r for r in self._records if r.key == key and r.resource == resource)

    def __len__(self) -> int:
        return len(self._records)


class InMemoryRecordStore:
    """RecordStore whose storage context is an iterable of records.

    Useful for fixtures, scripts and seeding. Passing ``None`` as the
    context means the store has no records collection.
    """

    def records_of(self, context: Any) -> InMemoryRecordCollection | None:
        if context is None:
            return None
        if isinstance(context, InMemoryRecordCollection):
            return context
        return InMemoryRecordCollection(context)
