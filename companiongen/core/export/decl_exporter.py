"""Declaration Exporter - CaseClassDeclを表示用の辞書に変換

設計原則:
- IRの構造を直接反映（asdict()による変換）
- 生成に使う派生値（is_generic, labels）を併記
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

import yaml

from companiongen.backends.naming import to_snake_case
from companiongen.core.base.ir import CaseClassDecl

EXPORT_FORMATS = ("yaml", "json")


def export_declaration(decl: CaseClassDecl) -> dict[str, Any]:
    """宣言を辞書に変換

    Returns:
        name, type_params, fields, is_generic, labels を持つ辞書
    """
    data = asdict(decl)
    data["type_params"] = list(decl.type_params)
    data["fields"] = list(decl.fields)
    data["is_generic"] = decl.is_generic
    data["labels"] = [to_snake_case(f) for f in decl.fields]
    return data


def dump_declaration(decl: CaseClassDecl, fmt: str = "yaml") -> str:
    """宣言をYAML/JSON文字列に変換

    Raises:
        ValueError: 未対応のフォーマット
    """
    data = export_declaration(decl)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip("\n")
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    raise ValueError(f"未対応のフォーマット: {fmt}")
