"""companiongen.core.base: IRとエラー定義

純粋なデータ定義（最下層）
"""

from .errors import MalformedDeclaration, MalformedField, MalformedTypeParameter, ParseError
from .ir import CaseClassDecl

__all__ = [
    # IR data classes
    "CaseClassDecl",
    # Errors
    "MalformedDeclaration",
    "MalformedField",
    "MalformedTypeParameter",
    "ParseError",
]
