import json
import logging

from calendar_logic import DateValue
from settings import load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "missing.json"))
    assert settings == {"min_date": None, "max_date": None, "initial_date": None}


def test_bad_json_gives_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(str(path))["min_date"] is None


def test_save_then_load(tmp_path):
    path = str(tmp_path / "settings.json")
    save_settings({"min_date": DateValue(2024, 0, 1), "max_date": None,
                   "initial_date": DateValue(2024, 5, 15)}, path)

    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {"min_date": "01-01-2024", "max_date": None,
                                "initial_date": "15-06-2024"}

    settings = load_settings(path)
    assert settings["min_date"] == DateValue(2024, 0, 1)
    assert settings["max_date"] is None
    assert settings["initial_date"] == DateValue(2024, 5, 15)


def test_invalid_values_are_ignored(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"min_date": "31-02-2024", "max_date": 20240101,
                                "initial_date": "01-03-2024", "theme": "dark"}),
                    encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="settings"):
        settings = load_settings(str(path))

    assert settings == {"min_date": None, "max_date": None,
                        "initial_date": DateValue(2024, 2, 1)}
    assert "min_date" in caplog.text
    assert "max_date" in caplog.text


def test_non_object_file_is_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(str(path))["initial_date"] is None
