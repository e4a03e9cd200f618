import json

import pytest

from autoblog.exceptions import ConfigError
from autoblog.titles import TitleItem, load_titles


def write(tmp_path, data) -> str:
    path = tmp_path / "titles.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data))
    return str(path)


def test_load_titles(tmp_path) -> None:
    path = write(tmp_path, [{"title": " Cold Brew ", "categoryId": "cat-1"}])
    assert load_titles(path) == [TitleItem(title="Cold Brew", category_id="cat-1")]


def test_invalid_items_are_skipped(tmp_path, capsys) -> None:
    path = write(
        tmp_path,
        [
            {"title": "Good", "categoryId": "cat-1"},
            {"title": "No category"},
            {"title": 3, "categoryId": "cat-1"},
            "just a string",
        ],
    )
    assert [i.title for i in load_titles(path)] == ["Good"]
    assert "3 invalid items" in capsys.readouterr().out


@pytest.mark.parametrize(
    "data",
    ["[]", "{}", "not json", [{"title": "x"}]],
)
def test_unusable_files_raise(tmp_path, data) -> None:
    with pytest.raises(ConfigError):
        load_titles(write(tmp_path, data))


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_titles(tmp_path / "missing.json")
