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
"""Shared fixtures for dbi18n tests."""

import pytest
from sqlalchemy import ForeignKey, String, create_engine
from sqlalchemy.orm import Mapped, Session, mapped_column, sessionmaker

from dbi18n.context import RequestContext
from dbi18n.record import Base, LocalizationRecord


def make_record(key: str, text: str, culture: str = "en", resource: str = "R", **extra) -> LocalizationRecord:
    return LocalizationRecord(key=key, resource=resource, culture=culture, text=text, **extra)


class TenantRecord(LocalizationRecord):
    """Joined-table subclass adding a column of its own."""

    __tablename__ = "tenant_record"

    id: Mapped[int] = mapped_column(ForeignKey("localization_record.id"), primary_key=True)
    tenant: Mapped[str] = mapped_column(String(64), default="")


@pytest.fixture(autouse=True)
def clear_request_context():
    RequestContext.clear()
    yield
    RequestContext.clear()


@pytest.fixture
def engine():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    factory = sessionmaker(engine, expire_on_commit=False)
    with factory() as session:
        yield session


@pytest.fixture
def seeded_session(session: Session):
    session.add_all(
        [
            make_record("greeting", "Hello", culture="en"),
            make_record("greeting", "Howdy", culture="en-US"),
            make_record("greeting", "Bonjour", culture="fr"),
            make_record("welcome", "Hello {0}, you have {1} items", culture="en"),
            make_record("title", "Page A", resource="PageA"),
            make_record("title", "Page B", resource="PageB"),
        ]
    )
    session.commit()
    return session
