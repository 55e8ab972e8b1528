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
"""Wiring for per-request LocalizationResolver instances."""

from __future__ import annotations

from typing import Any

from dbi18n.config import Config, I18nProperties
from dbi18n.context import RequestCallerContext
from dbi18n.locale import AcceptHeaderLocaleResolver
from dbi18n.logging.port import LoggingPort
from dbi18n.logging.structlog_adapter import StructlogAdapter
from dbi18n.ports.outbound import CallerContext, RecordStore
from dbi18n.resolver import LocalizationResolver


class LocalizationResolverFactory:
    """Creates one resolver per request or explicit resource binding.

    The store and caller context are shared; each resolver gets its own
    storage context (typically the request's ORM session).
    """

    def __init__(
        self,
        store: RecordStore,
        caller_context: CallerContext | None = None,
        properties: I18nProperties | None = None,
    ) -> None:
        self._properties = properties or I18nProperties()
        self._store = store
        self._caller_context = caller_context or RequestCallerContext(self._properties.default_culture)

    @classmethod
    def from_config(
        cls,
        config: Config,
        store: RecordStore,
        logging_port: LoggingPort | None = None,
    ) -> LocalizationResolverFactory:
        """Bootstrap from *config*: logging from ``dbi18n.logging.*``, settings from ``dbi18n.i18n.*``."""
        (logging_port or StructlogAdapter()).configure(config)
        return cls(store, properties=config.bind(I18nProperties))

    @property
    def properties(self) -> I18nProperties:
        return self._properties

    def locale_resolver(self) -> AcceptHeaderLocaleResolver:
        """Accept-Language negotiation honouring the configured cultures."""
        return AcceptHeaderLocaleResolver(
            default_locale=self._properties.default_culture,
            supported=self._properties.supported_cultures or None,
        )

    def create(self, context: Any, resource: type | str | None = None) -> LocalizationResolver:
        resolver = LocalizationResolver(context, self._store, self._caller_context)
        return resolver if resource is None else resolver.for_resource(resource)
