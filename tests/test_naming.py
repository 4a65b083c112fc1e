"""snake_case変換の単体テスト"""

import pytest
from companiongen.backends.naming import to_snake_case


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("age", "age"),
        ("favoriteFood", "favorite_food"),
        ("favoriteFoods", "favorite_foods"),
        ("item2Name", "item2_name"),
        ("userID", "user_id"),
        ("already_snake", "already_snake"),
        ("Capitalized", "capitalized"),
        ("XMLHttpRequest", "xmlhttp_request"),
        ("HTTPServer", "httpserver"),
        ("", ""),
        ("straßeÄnderung", "straße_änderung"),
        ("überÜbung", "über_übung"),
        ("größe2Wert", "größe2_wert"),
        ("ÄnderungsDatum", "änderungs_datum"),
    ],
)
def test_to_snake_case(name, expected):
    """小文字/数字の直後の大文字の前に "_" を入れて小文字化"""
    assert to_snake_case(name) == expected


def test_unicode_field_labels_in_companion():
    """Unicode識別子のフィールドもラベルはsnake_case"""
    from companiongen import generate

    output = generate("case class Kunde(straßeÄnderung: String, überÜbung: Int)")
    assert 'forProduct2("straße_änderung", "über_übung")' in output
    assert "a => (a.straßeÄnderung, a.überÜbung)" in output
