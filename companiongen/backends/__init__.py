"""バックエンド層 - IR→成果物生成

IRからコード生成を行う純関数群。
"""

from . import circe_companion, naming

__all__ = ["circe_companion", "naming"]
