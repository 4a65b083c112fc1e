"""pytest設定とフィクスチャ定義"""

from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent


@pytest.fixture
def repo_root() -> Path:
    """リポジトリルート"""
    return REPO_ROOT


@pytest.fixture
def multiline_declaration() -> str:
    """インデント付き複数行の宣言"""
    return """case class Person(
        age: Int,
        favoriteFood: Food
    )"""


@pytest.fixture
def declaration_file(tmp_path, multiline_declaration):
    """複数行の宣言を書いたファイル"""
    path = tmp_path / "person.scala"
    path.write_text(multiline_declaration + "\n")
    return path
