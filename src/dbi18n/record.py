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
"""Localization record entity."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for dbi18n entities."""


class LocalizationRecord(Base):
    """A single localized text for a (key, resource, culture) triple.

    Records are read-only from the resolver's point of view. At most one
    record per triple is expected; when duplicates exist, the first one
    returned by the store wins.
    """

    __tablename__ = "localization_record"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(String(255), index=True)
    resource: Mapped[str] = mapped_column(String(512), default="")
    culture: Mapped[str] = mapped_column(String(35))
    text: Mapped[str] = mapped_column(Text, default="")
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    def with_text(self, text: str) -> LocalizationRecord:
        """Return a transient copy of this record carrying *text*.

        The copy has the same concrete class and column values, is not
        attached to any session, and leaves this instance untouched.
        """
        mapper = sa_inspect(type(self))
        values = {attr.key: getattr(self, attr.key) for attr in mapper.column_attrs}
        values["text"] = text
        return type(self)(**values)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, key={self.key!r}, "
            f"resource={self.resource!r}, culture={self.culture!r})"
        )
