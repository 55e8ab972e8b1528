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
"""Tests for LocalizationRecord."""

from dbi18n.record import LocalizationRecord

from conftest import TenantRecord


def _record(**overrides) -> LocalizationRecord:
    values = {"id": 3, "key": "greeting", "resource": "R", "culture": "en", "text": "Hello {0}"}
    values.update(overrides)
    return LocalizationRecord(**values)


class TestLocalizationRecord:
    def test_str_returns_text(self):
        assert str(_record(text="Hello")) == "Hello"

    def test_repr_identifies_triple(self):
        text = repr(_record())
        assert "greeting" in text
        assert "'en'" in text

    def test_with_text_returns_copy(self):
        original = _record()
        copy = original.with_text("Hello Ana")

        assert copy is not original
        assert copy.text == "Hello Ana"
        assert original.text == "Hello {0}"
        assert (copy.id, copy.key, copy.resource, copy.culture) == (3, "greeting", "R", "en")

    def test_with_text_keeps_concrete_type(self):
        assert type(_record().with_text("x")) is LocalizationRecord

    def test_table_name(self):
        assert LocalizationRecord.__tablename__ == "localization_record"

    def test_with_text_on_subclass_keeps_own_columns(self):
        original = TenantRecord(id=5, key="greeting", resource="R", culture="en", text="Hi {0}", tenant="acme")
        copy = original.with_text("Hi Ana")

        assert type(copy) is TenantRecord
        assert copy.tenant == "acme"
        assert (copy.id, copy.text) == (5, "Hi Ana")
        assert original.text == "Hi {0}"

    def test_repr_names_concrete_class(self):
        assert repr(TenantRecord(id=1, key="k", resource="R", culture="en")).startswith("TenantRecord(")
