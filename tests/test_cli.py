import os
import subprocess
import sys
from pathlib import Path

import pytest

from ttt_engine.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "ttt_engine.cli"]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC), env.get("PYTHONPATH")) if p)
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, env=env)


def test_cli_move_solve_tactics(tmp_path: Path):
    r = _run_cli(["move", "--board", "XX__O__O_", "--difficulty", "balanced"], cwd=tmp_path)
    assert r.returncode == 0
    assert r.stdout.strip() == "2"

    r = _run_cli(["solve", "--board", "X___O____"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "scores=" in s and "best=" in s

    r = _run_cli(["tactics", "--board", "XX__O__O_", "--as", "O"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "wins=[] blocks=[2] forks=[6]" in s

    r = _run_cli(["tactics", "--board", "XX__O_O__", "--as", "O"], cwd=tmp_path)
    assert r.returncode == 0
    assert "wins=[2]" in r.stdout + r.stderr


@pytest.mark.parametrize("bad", ["abc", "XXOOXX", "XO_XO_XO_X", "XO_Z_____"])
def test_cli_error_invalid_boards(tmp_path: Path, bad: str):
    for cmd in ("move", "solve", "tactics"):
        r = _run_cli([cmd, "--board", bad], cwd=tmp_path)
        assert r.returncode != 0


def test_move_on_finished_game_is_an_error(capsys):
    assert main(["move", "--board", "XXXOO____"]) == 2
    assert main(["solve", "--board", "XXOOOXXOX"]) == 2


def test_move_prints_optimal_opening(capsys):
    assert main(["move", "--board", "_________"]) == 0
    assert capsys.readouterr().out.strip() == "0"


def test_seeded_weak_move_is_reproducible(capsys):
    main(["--seed", "7", "move", "--board", "X___O____", "--difficulty", "easy"])
    first = capsys.readouterr().out
    main(["--seed", "7", "move", "--board", "X___O____", "--difficulty", "easy"])
    assert capsys.readouterr().out == first


def test_arena_runs(caplog):
    caplog.set_level("INFO")
    assert main(["--seed", "1", "arena", "--x", "balanced", "--o", "weak", "--games", "5"]) == 0
    assert "games=5" in caplog.text
    assert main(["arena", "--games", "0"]) == 2


def test_arena_tracking_soft_fails_without_mlflow(tmp_path: Path, caplog, monkeypatch):
    monkeypatch.setitem(sys.modules, "mlflow", None)
    caplog.set_level("INFO")
    rc = main(["arena", "--x", "weak", "--o", "weak", "--games", "2", "--tracking", "mlflow",
               "--log-dir", str(tmp_path)])
    assert rc == 0
    assert "games=2" in caplog.text
