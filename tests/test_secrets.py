import json

import pytest

from ecsdeploy import secrets
from ecsdeploy.secrets import Secret, create_secret_files, main

JSON_DOCUMENT = """
{
   "foo": "bar",
   "zot": "qix"
}"""


def test_raw_secret(tmp_path, monkeypatch):
    monkeypatch.setenv("raw", "secret")
    create_secret_files(Secret(name="raw", keys=[]), tmp_path)
    assert (tmp_path / "raw").read_text() == "secret"


def test_raw_secret_is_read_only(tmp_path, monkeypatch):
    monkeypatch.setenv("raw", "secret")
    create_secret_files(Secret(name="raw"), tmp_path)
    assert (tmp_path / "raw").stat().st_mode & 0o222 == 0


def test_raw_secret_reports_injection(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("raw", "secret")
    create_secret_files(Secret(name="raw"), tmp_path)
    assert 'inject Secret "raw" info' in capsys.readouterr().out


def test_selected_keys_secret(tmp_path, monkeypatch):
    monkeypatch.setenv("json", JSON_DOCUMENT)
    create_secret_files(Secret(name="json", keys=["foo"]), tmp_path)
    assert (tmp_path / "json" / "foo").read_text() == "bar"
    assert not (tmp_path / "json" / "zot").exists()


def test_all_keys_secret(tmp_path, monkeypatch):
    monkeypatch.setenv("json", JSON_DOCUMENT)
    create_secret_files(Secret(name="json", keys=["*"]), tmp_path)
    assert (tmp_path / "json" / "foo").read_text() == "bar"
    assert (tmp_path / "json" / "zot").read_text() == "qix"


def test_unknown_secret(tmp_path, monkeypatch):
    monkeypatch.delenv("not_set", raising=False)
    with pytest.raises(LookupError, match='"not_set" variable not set'):
        create_secret_files(Secret(name="not_set"), tmp_path)


def test_invalid_json_secret(tmp_path, monkeypatch):
    monkeypatch.setenv("broken", "{not json")
    with pytest.raises(ValueError, match="not a valid JSON document"):
        create_secret_files(Secret(name="broken", keys=["foo"]), tmp_path)


def test_non_dictionary_secret(tmp_path, monkeypatch):
    monkeypatch.setenv("listy", "[1, 2]")
    with pytest.raises(ValueError, match="not a JSON dictionary"):
        create_secret_files(Secret(name="listy", keys=["foo"]), tmp_path)


def test_missing_key(tmp_path, monkeypatch):
    monkeypatch.setenv("json", JSON_DOCUMENT)
    with pytest.raises(KeyError, match="has no"):
        create_secret_files(Secret(name="json", keys=["missing"]), tmp_path)


def test_non_string_value_is_json_encoded(tmp_path, monkeypatch):
    monkeypatch.setenv("nested", json.dumps({"conf": {"a": 1, "b": [True, None]}, "n": 3}))
    create_secret_files(Secret(name="nested", keys=["conf", "n"]), tmp_path)
    assert (tmp_path / "nested" / "conf").read_text() == '{"a":1,"b":[true,null]}'
    assert (tmp_path / "nested" / "n").read_text() == "3"


@pytest.mark.parametrize("argv", [[], ["a", "b"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err == "usage: secrets <json encoded []Secret>"


def test_main_invalid_json(capsys):
    assert main(["not json"]) == 1
    assert capsys.readouterr().err != ""


def test_main_creates_files(tmp_path, monkeypatch):
    monkeypatch.setattr(secrets, "SECRETS_FOLDER", str(tmp_path))
    monkeypatch.setenv("raw", "secret")
    monkeypatch.setenv("json", JSON_DOCUMENT)
    payload = json.dumps([{"Name": "raw", "Keys": None}, {"Name": "json", "Keys": ["zot"]}])
    assert main([payload]) == 0
    assert (tmp_path / "raw").read_text() == "secret"
    assert (tmp_path / "json" / "zot").read_text() == "qix"


def test_main_reports_missing_variable(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(secrets, "SECRETS_FOLDER", str(tmp_path))
    monkeypatch.delenv("not_set", raising=False)
    assert main([json.dumps([{"Name": "not_set"}])]) == 1
    assert capsys.readouterr().err == '"not_set" variable not set'