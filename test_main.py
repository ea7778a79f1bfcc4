import io
import json

import pytest

import main
from _version import __version__


@pytest.mark.parametrize("flag", ["-v", "-V"])
def test_version_flag(flag, capsys):
    assert main.main([flag]) == 0
    assert capsys.readouterr().out.strip() == __version__


def test_help_flag(capsys):
    assert main.main(["-h"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_serves_from_working_directory(monkeypatch, tmp_path):
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "schedule.csv").write_text(",Mon\n9am,Math\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TIMETABLE_THEME_PATH", raising=False)
    monkeypatch.delenv("TIMETABLE_DATA_PATH", raising=False)

    stdin = io.StringIO(
        json.dumps({"id": 1, "cmd": "get_schedule"})
        + "\n"
        + json.dumps({"id": 2, "cmd": "get_theme"})
        + "\n"
    )
    stdout = io.StringIO()
    assert main.main([], stdin=stdin, stdout=stdout) == 0

    replies = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert replies[0]["result"]["grid"] == [["Math"]]
    assert replies[1]["result"]["background"] == "#191724"
