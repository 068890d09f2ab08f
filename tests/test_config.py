"""Unit tests for Config (create_gsp.config).

Tests cover:
- Defaults
- Path normalisation
- from_env parsing and override precedence
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from create_gsp.config import Config
from create_gsp.scaffolder.catalog import TEMPLATES_DIR


class TestConfigDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.templates_dir == TEMPLATES_DIR
        assert config.cwd == Path.cwd()
        assert config.assume_yes is False
        assert config.interactive is True

    @pytest.mark.unit
    def test_paths_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = Config(templates_dir=Path("tpl"), cwd=Path("."))
        assert config.templates_dir == tmp_path / "tpl"
        assert config.cwd == tmp_path

    @pytest.mark.unit
    def test_string_paths_accepted(self, tmp_path):
        config = Config(templates_dir=str(tmp_path))
        assert config.templates_dir == tmp_path


class TestConfigFromEnv:
    @pytest.mark.unit
    def test_no_environment(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config.templates_dir == TEMPLATES_DIR
        assert config.assume_yes is False
        assert config.interactive is True

    @pytest.mark.unit
    def test_reads_variables(self, tmp_path):
        env = {
            "GSP_TEMPLATES_DIR": str(tmp_path),
            "GSP_ASSUME_YES": "true",
            "GSP_NO_INPUT": "1",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.templates_dir == tmp_path
        assert config.assume_yes is True
        assert config.interactive is False

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["0", "false", "no", "off"])
    def test_falsy_flags(self, raw):
        with patch.dict(os.environ, {"GSP_ASSUME_YES": raw, "GSP_NO_INPUT": raw}, clear=True):
            config = Config.from_env()
        assert config.assume_yes is False
        assert config.interactive is True

    @pytest.mark.unit
    def test_blank_flag_ignored(self):
        with patch.dict(os.environ, {"GSP_ASSUME_YES": "  "}, clear=True):
            assert Config.from_env().assume_yes is False

    @pytest.mark.unit
    def test_overrides_win(self, tmp_path):
        with patch.dict(os.environ, {"GSP_ASSUME_YES": "1"}, clear=True):
            config = Config.from_env(assume_yes=False, cwd=tmp_path)
        assert config.assume_yes is False
        assert config.cwd == tmp_path

    @pytest.mark.unit
    def test_none_overrides_ignored(self):
        with patch.dict(os.environ, {"GSP_NO_INPUT": "yes"}, clear=True):
            config = Config.from_env(interactive=None, templates_dir=None)
        assert config.interactive is False
        assert config.templates_dir == TEMPLATES_DIR
