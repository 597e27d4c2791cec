"""Tests for the command-line front end."""

import json
import logging
from pathlib import Path

import pytest

from tourist_spots.adapters.config import AppConfig
from tourist_spots.cli import build_context, build_parser, main


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no subcommand, when running, then help is printed and exit code is 1."""
    assert main([]) == 1
    assert "usage: tourist-spots" in capsys.readouterr().out


def test_list_prints_all_spots(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no filters, when listing, then every sample spot is printed."""
    assert main(["list"]) == 0

    out = capsys.readouterr().out
    assert "台灣旅遊景點 - 全部" in out
    assert "台北 101" in out
    assert "台灣原住民文化園區" in out


def test_list_json_with_filters(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a category filter, when listing as JSON, then only matching spots are output."""
    assert main(["list", "--category", "nature", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [item["name"] for item in data] == ["日月潭", "阿里山"]
    assert data[0]["category"] == "nature"
    assert data[0]["category_label"] == "自然"
    assert data[0]["is_favorite"] is False


def test_list_query(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a query, when listing as JSON, then only names containing it are output."""
    assert main(["list", "--query", "101", "--json"]) == 0

    assert [item["name"] for item in json.loads(capsys.readouterr().out)] == ["台北 101"]


def test_list_no_match(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a query nothing matches, when listing, then the no-results message is shown."""
    assert main(["list", "--query", "zzz-no-match"]) == 0

    assert "找不到景點" in capsys.readouterr().out


def test_list_unknown_category_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an unknown category, when listing, then an error is printed and exit code is 1."""
    assert main(["list", "--category", "food"]) == 1

    assert "Error: Unknown category 'food'" in capsys.readouterr().err


def test_show_spot(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an exact spot name, when showing, then its details are printed."""
    assert main(["show", "安平古堡"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("安平古堡")
    assert "23.0013, 120.1597" in out
    assert "加入收藏" in out


def test_show_unknown_spot(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an unknown name, when showing, then exit code is 1."""
    assert main(["show", "Atlantis"]) == 1
    assert "Atlantis" in capsys.readouterr().err


def test_categories(capsys: pytest.CaptureFixture[str]) -> None:
    """Given the categories command, when running, then all categories are listed."""
    assert main(["categories"]) == 0

    out = capsys.readouterr().out
    assert "nature: 自然" in out
    assert "religion: 宗教" in out


def test_favorites_toggle_order(capsys: pytest.CaptureFixture[str]) -> None:
    """Given spots toggled in order, when listing favorites, then insertion order is kept."""
    assert main(["favorites", "阿里山", "台北 101", "日月潭", "台北 101"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["我的收藏", "  阿里山", "  日月潭"]


def test_favorites_empty(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no names, when listing favorites, then the empty message is shown."""
    assert main(["favorites"]) == 0

    assert "尚無收藏" in capsys.readouterr().out


def test_language_set_persists(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a language code, when setting it, then later commands use that language."""
    assert main(["language", "en"]) == 0
    assert "* en: English" in capsys.readouterr().out
    assert json.loads((tmp_path / "settings.json").read_text(encoding="utf-8")) == {
        "app_language": "en"
    }

    assert main(["categories"]) == 0
    assert "landmark_building: Landmarks & Buildings" in capsys.readouterr().out


def test_language_unsupported(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an unsupported code, when setting the language, then exit code is 1."""
    assert main(["language", "xx"]) == 1
    assert "Unsupported language" in capsys.readouterr().err


def test_invalid_config_fails(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given an invalid environment, when running, then an error is printed."""
    monkeypatch.setenv("DEFAULT_LANGUAGE", "fr")

    assert main(["categories"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_catalog_file_replaces_samples(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a catalog file in the environment, when listing, then its spots are used."""
    path = tmp_path / "spots.toml"
    path.write_text(
        '[[spots]]\nname = "Kenting"\nlatitude = 21.9\nlongitude = 120.8\ncategory = "nature"\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("CATALOG_FILE", str(path))

    assert main(["list", "--json"]) == 0
    assert [item["name"] for item in json.loads(capsys.readouterr().out)] == ["Kenting"]


def test_build_context_shares_catalog() -> None:
    """Given a config, when building the context, then services share one catalog."""
    ctx = build_context(AppConfig())

    assert ctx.browsing.visible_spots() == ctx.catalog.all()
    assert ctx.favorites.list() == []


def test_parser_defaults() -> None:
    """Given list without options, when parsing, then query is empty and category unset."""
    args = build_parser().parse_args(["list"])

    assert args.query == ""
    assert args.category is None
    assert args.json is False


def test_list_filters_once(
    caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a query and a category, when listing, then the catalog is filtered in one pass."""
    with caplog.at_level(logging.DEBUG, logger="tourist_spots.application.services"):
        assert main(["list", "--query", "101", "--category", "landmark", "--json"]) == 0

    filter_records = [r for r in caplog.records if r.getMessage().startswith("Filter query=")]
    assert len(filter_records) == 1
    assert "query='101'" in filter_records[0].getMessage()
    assert [item["name"] for item in json.loads(capsys.readouterr().out)] == ["台北 101"]
