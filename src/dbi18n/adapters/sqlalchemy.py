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
"""SQLAlchemy record store — queries a mapped LocalizationRecord table."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import create_engine, select
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.orm import Session, scoped_session, sessionmaker

from dbi18n.config import Config
from dbi18n.exceptions import MisconfiguredStoreException
from dbi18n.record import Base, LocalizationRecord

_logger = logging.getLogger(__name__)


class SqlAlchemyRecordCollection:
    """Candidate-set queries against one session and one mapped model."""

    def __init__(self, session: Session | scoped_session[Session], model: type[LocalizationRecord]) -> None:
        self._session = session
        self._model = model

    def find(self, key: str, resource: str) -> list[LocalizationRecord]:
        stmt = (
            select(self._model)
            .where(self._model.key == key, self._model.resource == resource)
            .order_by(self._model.id)
        )
        return list(self._session.scalars(stmt).all())


class SqlAlchemyRecordStore:
    """RecordStore whose storage context is a synchronous ORM ``Session``
    (or a ``scoped_session``).

    *model* selects the mapped entity holding the records; it must be
    :class:`LocalizationRecord` or a mapped subclass of it.
    """

    def __init__(self, model: type[LocalizationRecord] = LocalizationRecord) -> None:
        if not (isinstance(model, type) and issubclass(model, LocalizationRecord)):
            raise MisconfiguredStoreException(
                f"{model!r} is not a LocalizationRecord subclass",
                code="I18N_MISCONFIGURED_STORE",
                context={"model": repr(model)},
            )
        try:
            sa_inspect(model)
        except NoInspectionAvailable as exc:
            raise MisconfiguredStoreException(
                f"{model.__name__} is not a mapped entity",
                code="I18N_MISCONFIGURED_STORE",
                context={"model": model.__name__},
            ) from exc
        self._model = model

    @property
    def model(self) -> type[LocalizationRecord]:
        return self._model

    def records_of(self, context: Any) -> SqlAlchemyRecordCollection | None:
        if not isinstance(context, (Session, scoped_session)):
            return None
        return SqlAlchemyRecordCollection(context, self._model)


_VALID_DDL_MODES = {"none", "create"}


def create_session_factory(config: Config) -> sessionmaker[Session]:
    """Build a session factory from the ``dbi18n.datasource`` section.

    With ``ddl-auto: create`` the record table is created when missing;
    ``none`` leaves the schema to external migrations.
    """
    url = str(config.get("dbi18n.datasource.url", "sqlite:///./dbi18n.db"))
    echo = str(config.get("dbi18n.datasource.echo", False)).lower() in ("true", "1", "yes")
    ddl_auto = str(config.get("dbi18n.datasource.ddl-auto", "none"))
    if ddl_auto not in _VALID_DDL_MODES:
        ddl_auto = "none"

    engine = create_engine(url, echo=echo)
    if ddl_auto == "create":
        _logger.info("Initializing localization schema (ddl-auto=%s)", ddl_auto)
        Base.metadata.create_all(engine)
    return sessionmaker(engine, expire_on_commit=False)
