"""Config YAMLのモデル定義とロード機能

コンパニオンオブジェクト生成の動作設定を定義する。
出力テンプレート自体は設定対象外。
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from companiongen.core.engine.parser import SplitMode

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class GeneratorConfig(BaseModel):
    """生成設定

    Attributes:
        split_mode: 型パラメータ/フィールドのカンマ分割方式
        log_level: ログレベル名
    """

    model_config = ConfigDict(extra="forbid")

    split_mode: SplitMode = "plain"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def log_level_value(self) -> int:
        """loggingモジュールのレベル値"""
        return logging.getLevelName(self.log_level)


def load_config(config_path: str | Path | None = None) -> GeneratorConfig:
    """Config YAMLをロードして検証

    Args:
        config_path: Config YAMLのパス（Noneの場合はデフォルト設定）

    Returns:
        GeneratorConfig: 検証済みConfig

    Raises:
        FileNotFoundError: ファイルが存在しない
        yaml.YAMLError: YAML形式エラー
        pydantic.ValidationError: Pydantic検証エラー
    """
    if config_path is None:
        return GeneratorConfig()

    config_path_obj = Path(config_path)

    if not config_path_obj.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path_obj) as f:
        data = yaml.safe_load(f)

    # 空ファイルはデフォルト設定
    return GeneratorConfig.model_validate(data or {})
