"""
End-to-end tests for the usermgr CLI.

These run main() against a real store file, feeding the menu through either
a scripted reader or a replaced stdin.
"""

import io
import json
from pathlib import Path

import pytest
from usermgr.cli._io import ScriptedLineReader
from usermgr.cli.main import main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch):
    """Keep ./usermgr.yaml lookups inside the test directory."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def store(tmp_path: Path) -> Path:
    return tmp_path / "users.json"


def test_full_session_via_stdin(store: Path, monkeypatch, capsys):
    script = "\n".join(["2", "Ann", "ann@x.co", "1", "2", "Ann", "ann@x.co", "3", "ann@x.co", "1", "0"]) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))

    rc = main(["--store", str(store)])

    out = capsys.readouterr().out
    assert rc == 0
    assert "User management console started!" in out
    assert "User Ann added successfully" in out
    assert "1. Name: Ann, Email: ann@x.co" in out
    assert "User with email ann@x.co already exists" in out
    assert "User with email ann@x.co removed" in out
    assert out.rstrip().endswith("Goodbye!")
    assert json.loads(store.read_text(encoding="utf-8")) == []


def test_users_survive_between_runs(store: Path, capsys):
    main(["--store", str(store)], reader=ScriptedLineReader(["2", "Ann", "ann@x.co", "2", "Bob", "bob@x.co", "0"]))
    capsys.readouterr()

    main(["--store", str(store)], reader=ScriptedLineReader(["1", "0"]))

    out = capsys.readouterr().out
    assert "1. Name: Ann, Email: ann@x.co" in out
    assert "2. Name: Bob, Email: bob@x.co" in out


def test_corrupted_store_starts_empty(store: Path, capsys):
    store.write_text("[{broken", encoding="utf-8")

    rc = main(["--store", str(store)], reader=ScriptedLineReader(["1", "0"]))

    captured = capsys.readouterr()
    assert rc == 0
    assert "User list is empty" in captured.out


def test_memory_store_writes_nothing(tmp_path: Path, capsys):
    rc = main(["--store", ":memory:"], reader=ScriptedLineReader(["2", "Ann", "ann@x.co", "1", "0"]))

    assert rc == 0
    assert "1. Name: Ann, Email: ann@x.co" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_config_file_sets_store(tmp_path: Path, capsys):
    (tmp_path / "usermgr.yaml").write_text("store: data/users.json\n", encoding="utf-8")

    main([], reader=ScriptedLineReader(["2", "Ann", "ann@x.co", "0"]))

    saved = json.loads((tmp_path / "data" / "users.json").read_text(encoding="utf-8"))
    assert saved == [{"name": "Ann", "email": "ann@x.co"}]


def test_bad_config_exits_with_2(tmp_path: Path, capsys):
    cfg = tmp_path / "broken.yaml"
    cfg.write_text("log_level: LOUD\n", encoding="utf-8")

    rc = main(["--config", str(cfg)], reader=ScriptedLineReader(["0"]))

    captured = capsys.readouterr()
    assert rc == 2
    assert "usermgr: error: invalid_log_level" in captured.err
    assert "User management console started!" not in captured.out


def test_log_file_in_missing_directory_exits_with_2(tmp_path: Path, capsys):
    cfg = tmp_path / "usermgr.yaml"
    cfg.write_text("log_file: missing_dir/x.log\n", encoding="utf-8")

    rc = main(["--config", str(cfg), "--store", ":memory:"], reader=ScriptedLineReader(["0"]))

    captured = capsys.readouterr()
    assert rc == 2
    assert "usermgr: error: log_file_unwritable" in captured.err
    assert "User management console started!" not in captured.out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("usermgr ")
