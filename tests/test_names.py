import pytest

from pingbot.errors import InputError
from pingbot.names import build_reminder_text, load_names


def test_build_reminder_text_tags_each_name():
    assert build_reminder_text(["alice", "bob"]) == "ping for lunch @alice @bob"


def test_build_reminder_text_without_names():
    assert build_reminder_text([]) == "ping for lunch"


def test_load_names_reads_yaml_list(tmp_path):
    path = tmp_path / "names.yml"
    path.write_text("names:\n  - alice\n  - bob\n", encoding="utf-8")

    assert load_names(path) == ["alice", "bob"]


def test_load_names_missing_key_returns_empty(tmp_path):
    path = tmp_path / "names.yml"
    path.write_text("people: []\n", encoding="utf-8")

    assert load_names(path) == []


def test_load_names_empty_file_returns_empty(tmp_path):
    path = tmp_path / "names.yml"
    path.write_text("", encoding="utf-8")

    assert load_names(path) == []


def test_load_names_missing_file_raises(tmp_path):
    with pytest.raises(InputError, match="reading names file"):
        load_names(tmp_path / "nope.yml")


def test_load_names_invalid_yaml_raises(tmp_path):
    path = tmp_path / "names.yml"
    path.write_text("names: [alice, bob\n", encoding="utf-8")

    with pytest.raises(InputError):
        load_names(path)


def test_load_names_rejects_non_string_entries(tmp_path):
    path = tmp_path / "names.yml"
    path.write_text("names:\n  - alice\n  - {nested: true}\n", encoding="utf-8")

    with pytest.raises(InputError, match="list of strings"):
        load_names(path)


def test_load_names_rejects_top_level_list(tmp_path):
    path = tmp_path / "names.yml"
    path.write_text("- alice\n- bob\n", encoding="utf-8")

    with pytest.raises(InputError):
        load_names(path)
