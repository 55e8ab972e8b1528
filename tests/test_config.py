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
"""Tests for Config and I18nProperties binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from dbi18n.config import Config, I18nProperties, config_properties


class TestConfig:
    def test_get_nested_value(self):
        config = Config({"dbi18n": {"i18n": {"default-culture": "fr"}}})
        assert config.get("dbi18n.i18n.default-culture") == "fr"

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("DBI18N_I18N_DEFAULT_CULTURE", "de")
        config = Config({"dbi18n": {"i18n": {"default-culture": "fr"}}})
        assert config.get("dbi18n.i18n.default-culture") == "de"

    def test_placeholder_with_default(self, monkeypatch):
        monkeypatch.delenv("DB_URL", raising=False)
        config = Config({"dbi18n": {"datasource": {"url": "${DB_URL:sqlite://}"}}})
        assert config.get("dbi18n.datasource.url") == "sqlite://"

    def test_placeholder_from_config(self):
        config = Config({"base": "es", "dbi18n": {"i18n": {"default-culture": "${base}-MX"}}})
        assert config.get("dbi18n.i18n.default-culture") == "es-MX"

    def test_unresolvable_placeholder_raises(self, monkeypatch):
        monkeypatch.delenv("NOPE_NOT_SET", raising=False)
        config = Config({"x": "${NOPE_NOT_SET}"})
        with pytest.raises(ValueError):
            config.get("x")

    def test_get_section(self):
        config = Config({"dbi18n": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("dbi18n.logging.level") == {"root": "DEBUG"}
        assert config.get_section("dbi18n.nothing") == {}


class TestConfigFiles:
    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "dbi18n.yaml"
        path.write_text("dbi18n:\n  i18n:\n    default-culture: it\n")
        config = Config.from_file(path)
        assert config.get("dbi18n.i18n.default-culture") == "it"
        assert config.loaded_sources == [str(path)]

    def test_load_toml(self, tmp_path: Path):
        path = tmp_path / "dbi18n.toml"
        path.write_text('[dbi18n.i18n]\ndefault-culture = "pl"\n')
        assert Config.from_file(path).get("dbi18n.i18n.default-culture") == "pl"

    def test_profile_overlay_wins(self, tmp_path: Path):
        (tmp_path / "dbi18n.yaml").write_text("dbi18n:\n  i18n:\n    default-culture: en\n")
        (tmp_path / "dbi18n-dev.yaml").write_text("dbi18n:\n  i18n:\n    default-culture: en-GB\n")
        config = Config.from_file(tmp_path / "dbi18n.yaml", active_profiles=["dev", "missing"])
        assert config.get("dbi18n.i18n.default-culture") == "en-GB"
        assert len(config.loaded_sources) == 2

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}


class TestBind:
    def test_i18n_properties_defaults(self):
        props = Config({}).bind(I18nProperties)
        assert props.default_culture == "en"
        assert props.supported_cultures == []

    def test_i18n_properties_kebab_case_keys(self):
        config = Config(
            {"dbi18n": {"i18n": {"default-culture": "fr", "supported-cultures": ["fr", "en"]}}}
        )
        props = config.bind(I18nProperties)
        assert props.default_culture == "fr"
        assert props.supported_cultures == ["fr", "en"]

    def test_list_from_env(self, monkeypatch):
        monkeypatch.setenv("DBI18N_I18N_SUPPORTED_CULTURES", "en, de ,fr")
        assert Config({}).bind(I18nProperties).supported_cultures == ["en", "de", "fr"]

    def test_coerces_scalar_types(self):
        @config_properties(prefix="app")
        @dataclass
        class AppProperties:
            port: int = 0
            ratio: float = 0.0
            debug: bool = False

        props = Config({"app": {"port": "8080", "ratio": "0.5", "debug": "yes"}}).bind(AppProperties)
        assert (props.port, props.ratio, props.debug) == (8080, 0.5, True)

    def test_bind_pydantic_model(self):
        @config_properties(prefix="app")
        class AppModel(BaseModel):
            port: int = Field(default=80, ge=1)

        assert Config({"app": {"port": 9000}}).bind(AppModel).port == 9000
        with pytest.raises(ValueError):
            Config({"app": {"port": 0}}).bind(AppModel)

    def test_undecorated_class_rejected(self):
        @dataclass
        class Plain:
            x: int = 1

        with pytest.raises(ValueError):
            Config({}).bind(Plain)
