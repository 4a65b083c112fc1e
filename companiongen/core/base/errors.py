"""パースエラー定義

パーサーの各段階に対応する例外。最初の失敗でパース全体を中断する。
"""

from __future__ import annotations


class ParseError(ValueError):
    """宣言テキストのパース失敗

    Attributes:
        stage: 失敗した段階（"declaration", "type_parameter", "field"）
        fragment: 失敗の原因となった部分文字列
    """

    stage = "declaration"

    def __init__(self, message: str, fragment: str = "") -> None:
        super().__init__(message)
        self.fragment = fragment


class MalformedDeclaration(ParseError):
    """「case class Name(...)」の形が見つからない"""

    stage = "declaration"


class MalformedTypeParameter(ParseError):
    """型パラメータから識別子を抽出できない"""

    stage = "type_parameter"


class MalformedField(ParseError):
    """フィールドに「identifier:」の形がない"""

    stage = "field"
