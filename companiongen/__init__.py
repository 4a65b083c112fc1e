"""companiongen - case class 宣言から circe の companion object を生成する"""

from __future__ import annotations

from companiongen.backends.circe_companion import render
from companiongen.core.base.errors import MalformedDeclaration, MalformedField, MalformedTypeParameter, ParseError
from companiongen.core.base.ir import CaseClassDecl
from companiongen.core.engine.parser import SplitMode, parse

__version__ = "1.0.0"


def generate(text: str, split_mode: SplitMode = "plain") -> str:
    """宣言テキストからcompanion objectを生成（parse→render）"""
    return render(parse(text, split_mode=split_mode))


__all__ = [
    "CaseClassDecl",
    "MalformedDeclaration",
    "MalformedField",
    "MalformedTypeParameter",
    "ParseError",
    "__version__",
    "generate",
    "parse",
    "render",
]
