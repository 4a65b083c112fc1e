"""Config YAMLロードのテスト"""

import logging

import pytest
from pydantic import ValidationError

from companiongen.core.engine.config_model import GeneratorConfig, load_config


def test_default_config():
    """パス未指定はデフォルト設定"""
    config = load_config()
    assert config.split_mode == "plain"
    assert config.log_level == "WARNING"
    assert config.log_level_value == logging.WARNING


def test_load_config(tmp_path):
    """YAMLから読み込み"""
    path = tmp_path / "companiongen.yaml"
    path.write_text("split_mode: bracket_aware\nlog_level: debug\n")
    config = load_config(path)
    assert config.split_mode == "bracket_aware"
    assert config.log_level == "DEBUG"
    assert config.log_level_value == logging.DEBUG


def test_empty_config_file_uses_defaults(tmp_path):
    """空ファイルはデフォルト"""
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == GeneratorConfig()


def test_missing_config_file(tmp_path):
    """存在しないファイル"""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "split_mode: smart\n",
        "log_level: LOUD\n",
        "template: custom\n",
    ],
)
def test_invalid_config(tmp_path, content):
    """不正な値・未知のキーは検証エラー"""
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ValidationError):
        load_config(path)


def test_split_mode_values_follow_parser():
    """設定可能なsplit_modeはパーサーのSPLIT_MODESと一致"""
    from companiongen.core.engine.parser import SPLIT_MODES

    for mode in SPLIT_MODES:
        assert GeneratorConfig(split_mode=mode).split_mode == mode
