import pytest

from zen.server import get_env_with_default, main


def test_env_value_is_returned(monkeypatch):
    monkeypatch.setenv("ZEN_TEST_SETTING", "custom.db")
    assert get_env_with_default("ZEN_TEST_SETTING", "zen.db") == "custom.db"


def test_unset_env_uses_default(monkeypatch):
    monkeypatch.delenv("ZEN_TEST_SETTING", raising=False)
    assert get_env_with_default("ZEN_TEST_SETTING", "zen.db") == "zen.db"


def test_empty_env_uses_default(monkeypatch):
    monkeypatch.setenv("ZEN_TEST_SETTING", "")
    assert get_env_with_default("ZEN_TEST_SETTING", "8080") == "8080"


@pytest.mark.parametrize("port", ["notaport", "70000", "-1"])
def test_invalid_port_fails(monkeypatch, tmp_path, port):
    monkeypatch.setenv("ZEN_DB_PATH", str(tmp_path / "zen.db"))
    monkeypatch.setenv("ZEN_PORT", port)
    assert main([]) == 1


def test_bad_database_path_fails(monkeypatch, tmp_path):
    monkeypatch.setenv("ZEN_DB_PATH", str(tmp_path / "missing" / "zen.db"))
    monkeypatch.setenv("ZEN_PORT", "8080")
    assert main([]) == 1


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_unknown_argument_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2