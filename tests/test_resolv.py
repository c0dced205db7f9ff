import pytest

from ecsdeploy import resolv
from ecsdeploy.resolv import main, set_search_domains


def test_set_domain_on_empty_file(tmp_path):
    conf = tmp_path / "resolv.conf"
    conf.touch()
    set_search_domains(conf, "foo", "bar", "zot")
    assert conf.read_text() == "\nsearch foo bar zot"


def test_set_domain_creates_missing_file(tmp_path):
    conf = tmp_path / "resolv.conf"
    set_search_domains(conf, "example.local")
    assert conf.read_text() == "\nsearch example.local"


def test_set_domain_appends_to_existing_content(tmp_path):
    conf = tmp_path / "resolv.conf"
    conf.write_text("nameserver 10.0.0.2")
    set_search_domains(conf, "a", "b")
    assert conf.read_text() == "nameserver 10.0.0.2\nsearch a b"


def test_set_domain_twice_appends_twice(tmp_path):
    conf = tmp_path / "resolv.conf"
    set_search_domains(conf, "one")
    set_search_domains(conf, "two")
    assert conf.read_text() == "\nsearch one\nsearch two"


def test_main_without_domains_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "usage: resolv DOMAIN [DOMAIN]"


def test_main_writes_domains(tmp_path, monkeypatch):
    conf = tmp_path / "resolv.conf"
    monkeypatch.setattr(resolv, "RESOLV_CONF", str(conf))
    assert main(["foo", "bar"]) == 0
    assert conf.read_text() == "\nsearch foo bar"


def test_main_reports_unwritable_path(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(resolv, "RESOLV_CONF", str(tmp_path / "missing" / "resolv.conf"))
    assert main(["foo"]) == 1
    assert capsys.readouterr().err != ""


@pytest.mark.parametrize("domains", [["x"], ["x", "y", "z"]])
def test_search_line_lists_domains_in_order(tmp_path, domains):
    conf = tmp_path / "resolv.conf"
    set_search_domains(conf, *domains)
    assert conf.read_text().split("\n")[-1].split()[1:] == domains