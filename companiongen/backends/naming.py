"""名前変換ヘルパー"""

from __future__ import annotations


def to_snake_case(name: str) -> str:
    """camelCase→snake_case

    小文字または数字の直後の大文字の前に "_" を挿入し、全体を小文字化する。
    大文字/小文字の判定はUnicode対応（"straßeÄnderung" → "straße_änderung"）。
    略語の特別扱いはしない（"HTTPServer" → "httpserver"）。

    Args:
        name: フィールド名

    Returns:
        snake_caseの名前
    """
    chars = []
    prev = ""
    for ch in name:
        if ch.isupper() and (prev.islower() or prev.isdigit()):
            chars.append("_")
        chars.append(ch)
        prev = ch
    return "".join(chars).lower()
