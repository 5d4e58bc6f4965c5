import json

import pytest

from regkeys.cli import cli, get_value, show, validate_config


KEY_SET = """
keys:
  - name: server.port
    type: int
    fallback: 8080
    description: Port the server listens on
  - name: db.password
    sensitive: true
  - name: build.id
    user_immutable: true
    fallback: dev
values:
  server.port: "9090"
  db.password: hunter2
"""


@pytest.fixture
def key_set(tmp_path):
    path = tmp_path / "keys.yaml"
    path.write_text(KEY_SET)
    return str(path)


def test_show_redacts_sensitive_values(key_set):
    rows = {row["name"]: row for row in show(key_set)}

    assert rows["server.port"]["value"] == "9090"
    assert rows["build.id"]["value"] == "dev"
    assert rows["build.id"]["user_immutable"] is True
    assert rows["db.password"]["value"] == "<sensitive>"


def test_show_allow_sensitive_reveals_values(key_set):
    rows = {row["name"]: row for row in show(key_set, allow_sensitive=True)}

    assert rows["db.password"]["value"] == "hunter2"


def test_get_value_is_case_insensitive(key_set):
    assert get_value(key_set, "SERVER.PORT")["value"] == "9090"

    with pytest.raises(KeyError):
        get_value(key_set, "missing")


def test_validate_config_rejects_bad_values(tmp_path, key_set):
    assert validate_config(key_set) is True

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"keys": [{"name": "n", "type": "int"}], "values": {"n": "x"}}))
    with pytest.raises(Exception):
        validate_config(str(bad))


def test_cli_show_json(key_set, capsys):
    with pytest.raises(SystemExit) as exc:
        cli(["show", key_set, "--json"])

    assert exc.value.code == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["name"] for r in rows] == ["build.id", "db.password", "server.port"]


def test_cli_get_text(key_set, capsys):
    with pytest.raises(SystemExit) as exc:
        cli(["get", key_set, "db.password", "--allow-sensitive"])

    assert exc.value.code == 0
    assert "db.password [str] S  = hunter2" in capsys.readouterr().out


def test_cli_validate_missing_file_exits_nonzero(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli(["validate", str(tmp_path / "missing.yaml")])

    assert exc.value.code == 1
