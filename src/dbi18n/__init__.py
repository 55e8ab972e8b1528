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
"""dbi18n — database-backed localization with resource scoping and culture fallback.

Import concrete store adapters from the adapters package::

    from dbi18n.adapters.sqlalchemy import SqlAlchemyRecordStore
"""

from dbi18n.context import FixedCallerContext, RequestCallerContext, RequestContext, rendering
from dbi18n.culture import Culture
from dbi18n.exceptions import (
    I18nException,
    InvalidKeyException,
    MessageFormatException,
    MisconfiguredStoreException,
    MissingCollaboratorException,
    ResourceScopeException,
)
from dbi18n.factory import LocalizationResolverFactory
from dbi18n.locale import (
    AcceptHeaderLocaleResolver,
    FixedLocaleResolver,
    LocaleResolver,
    bind_request_culture,
)
from dbi18n.ports.outbound import CallerContext, RecordCollection, RecordStore
from dbi18n.record import Base, LocalizationRecord
from dbi18n.resolver import LocalizationResolver, RecordSequence

__all__ = [
    "AcceptHeaderLocaleResolver",
    "Base",
    "CallerContext",
    "Culture",
    "FixedCallerContext",
    "FixedLocaleResolver",
    "I18nException",
    "InvalidKeyException",
    "LocaleResolver",
    "LocalizationRecord",
    "LocalizationResolver",
    "LocalizationResolverFactory",
    "MessageFormatException",
    "MisconfiguredStoreException",
    "MissingCollaboratorException",
    "RecordCollection",
    "RecordSequence",
    "RecordStore",
    "RequestCallerContext",
    "RequestContext",
    "ResourceScopeException",
    "bind_request_culture",
    "rendering",
]
