"""circe コンパニオンオブジェクト生成

IRからEncoder/Decoderを定義するcompanion objectのソースを生成する純関数群。
"""

from __future__ import annotations

from companiongen.backends.naming import to_snake_case
from companiongen.core.base.ir import CaseClassDecl

_TEMPLATE = """\
object {name} {{
  implicit {binding} encoder{encoder_params}: Encoder[{full_name}] = Encoder.forProduct{arity}({labels})({projection})

  implicit {binding} decoder{decoder_params}: Decoder[{full_name}] = Decoder.forProduct{arity}({labels})({name}.apply{type_args})
}}"""


def build_labels(decl: CaseClassDecl) -> str:
    """シリアライズ用ラベル（snake_case、ダブルクォート付き）を生成

    Returns:
        '"age", "favorite_food"' 形式の文字列
    """
    return ", ".join(f'"{to_snake_case(f)}"' for f in decl.fields)


def build_projection(decl: CaseClassDecl) -> str:
    """Encoder用のタプル射影を生成（元のフィールド名を使用）

    Returns:
        "a => (a.age, a.favoriteFood)" 形式の文字列
    """
    return "a => ({})".format(", ".join(f"a.{f}" for f in decl.fields))


def build_type_args(decl: CaseClassDecl) -> str:
    """型引数リスト（"[A, B]"）、非ジェネリックなら空文字列"""
    if not decl.is_generic:
        return ""
    return "[{}]".format(", ".join(decl.type_params))


def build_bounded_params(decl: CaseClassDecl, bound: str) -> str:
    """context bound付き型パラメータ（"[A: Encoder, B: Encoder]"）、非ジェネリックなら空文字列"""
    if not decl.is_generic:
        return ""
    return "[{}]".format(", ".join(f"{t}: {bound}" for t in decl.type_params))


def render(decl: CaseClassDecl) -> str:
    """companion objectのソースを生成

    非ジェネリックは `implicit lazy val`、ジェネリックは型パラメータに
    Encoder/Decoder の context bound を付けた `implicit def` で定義する。

    Args:
        decl: case class 宣言

    Returns:
        生成されたソース（前後に空行なし、末尾改行なし）
    """
    type_args = build_type_args(decl)
    return _TEMPLATE.format(
        name=decl.name,
        full_name=f"{decl.name}{type_args}",
        binding="def" if decl.is_generic else "lazy val",
        encoder_params=build_bounded_params(decl, "Encoder"),
        decoder_params=build_bounded_params(decl, "Decoder"),
        arity=len(decl.fields),
        labels=build_labels(decl),
        projection=build_projection(decl),
        type_args=type_args,
    )
