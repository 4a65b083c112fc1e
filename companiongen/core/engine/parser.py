"""Parser: 宣言テキスト→IR変換

case class 宣言をパターンマッチで解析し、CaseClassDeclに変換する。
フィールドの型やデフォルト値は解析しない（名前の切り出しのみ）。
"""

from __future__ import annotations

import logging
import re
from typing import Literal, get_args

from companiongen.core.base.errors import MalformedDeclaration, MalformedField, MalformedTypeParameter
from companiongen.core.base.ir import CaseClassDecl

logger = logging.getLogger(__name__)

SplitMode = Literal["plain", "bracket_aware"]

SPLIT_MODES: tuple[str, ...] = get_args(SplitMode)

_DECLARATION_RE = re.compile(
    r"""
    case\s+class\s+
    (?P<name>\w+)               # クラス名
    \s*(?:\[(?P<types>.+)\])?   # 型パラメータ（任意）
    \s*\(
    (?P<fields>.+)              # 最後の閉じ括弧までをフィールドとする
    \)
    """,
    re.VERBOSE,
)

# variance記号を1つだけ許可し、識別子以降（<: B, : Ctx など）は捨てる
_TYPE_PARAM_RE = re.compile(r"^[+-]?(?P<name>\w+)")

_FIELD_RE = re.compile(r"^(?P<name>\w+):")

_OPENERS = "[({"
_CLOSERS = "])}"


def parse(text: str, split_mode: SplitMode = "plain") -> CaseClassDecl:
    """case class 宣言を解析

    Args:
        text: 宣言テキスト（複数行可）
        split_mode: カンマ分割方式
            "plain": 全てのカンマで分割（`Map[String, Int]` のような型は誤分割される）
            "bracket_aware": 括弧の外側のカンマでのみ分割

    Returns:
        CaseClassDecl: 解析結果

    Raises:
        MalformedDeclaration: "case class Name(...)" の形が見つからない
        MalformedTypeParameter: 型パラメータから識別子を抽出できない
        MalformedField: フィールドに "identifier:" の形がない
        ValueError: 未対応のsplit_mode
    """
    if split_mode not in SPLIT_MODES:
        raise ValueError(f"未対応のsplit_mode: {split_mode}")

    flattened = text.replace("\r", "").replace("\n", "")

    match = _DECLARATION_RE.search(flattened)
    if match is None:
        logger.debug("Declaration pattern not found: %r", flattened)
        raise MalformedDeclaration(
            f"Could not find a 'case class Name(...)' declaration in: {flattened!r}",
            fragment=flattened,
        )

    name = match.group("name")
    types = match.group("types")
    type_params = _parse_type_params(types, split_mode) if types is not None else ()
    fields = _parse_fields(match.group("fields"), split_mode)

    logger.debug("Parsed case class %s: type_params=%s fields=%s", name, type_params, fields)
    return CaseClassDecl(name=name, type_params=type_params, fields=fields)


def split_top_level(body: str, split_mode: SplitMode = "plain") -> list[str]:
    """カンマ区切りの本体を分割

    Args:
        body: 括弧の内側のテキスト
        split_mode: カンマ分割方式

    Returns:
        分割された断片（前後の空白は保持）
    """
    if split_mode == "plain":
        return body.split(",")

    pieces = []
    depth = 0
    start = 0
    for i, ch in enumerate(body):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            # 閉じ括弧過多でも負にはしない
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            pieces.append(body[start:i])
            start = i + 1
    pieces.append(body[start:])
    return pieces


def _parse_type_params(types: str, split_mode: SplitMode) -> tuple[str, ...]:
    """型パラメータ名を抽出"""
    names = []
    for piece in split_top_level(types, split_mode):
        match = _TYPE_PARAM_RE.match(piece.lstrip())
        if match is None:
            logger.debug("Type parameter without identifier: %r", piece)
            raise MalformedTypeParameter(
                f"Could not extract a type parameter name from: {piece!r}",
                fragment=piece,
            )
        names.append(match.group("name"))
    return tuple(names)


def _parse_fields(fields: str, split_mode: SplitMode) -> tuple[str, ...]:
    """フィールド名を抽出"""
    names = []
    for piece in split_top_level(fields, split_mode):
        match = _FIELD_RE.match(piece.lstrip())
        if match is None:
            logger.debug("Field without 'name:' prefix: %r", piece)
            raise MalformedField(
                f"Could not extract a field name from: {piece!r}",
                fragment=piece,
            )
        names.append(match.group("name"))
    return tuple(names)
