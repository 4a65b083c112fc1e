"""中間表現（IR）データ構造定義

宣言テキスト→IR→コンパニオンオブジェクト生成の間で受け渡す中間表現。
パース後は変更しない（frozen）。
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CaseClassDecl:
    """case class 宣言

    Attributes:
        name: クラス名
        fields: フィールド名（宣言順、型は破棄済み。重複はそのまま保持。空は不可）
        type_params: 型パラメータ名（宣言順、variance/境界は除去済み）

    Raises:
        ValueError: nameまたはfieldsが空
    """

    name: str
    fields: tuple[str, ...]
    type_params: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("case class name must not be empty")
        if not self.fields:
            raise ValueError(f"case class {self.name} must have at least one field")

    @property
    def is_generic(self) -> bool:
        """型パラメータを持つか"""
        return bool(self.type_params)
