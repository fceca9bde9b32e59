import orjson
import pytest

from morris_ai import settings
from morris_ai.tools import cli, match_cli, perft_cli


@pytest.fixture
def sandbox(tmp_path, monkeypatch, isolated_root_logging):
    """Run CLIs from tmp_path with no user config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "CONFIG_PATH", tmp_path / "missing.toml")
    return tmp_path


def test_perft_cli(capsys):
    perft_cli.main(["--depth", "2"])
    assert "perft(d=2)=552" in capsys.readouterr().out


def test_perft_cli_rejects_bad_state():
    with pytest.raises(SystemExit):
        perft_cli.main(["--depth", "1", "--state", "zzz"])


def test_play_cli_random_game_to_max_plies(sandbox, capsys):
    rc = cli.main(["--white", "random", "--black", "random", "--seed", "3", "--max-plies", "6"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "White to play: Placement Phase" in out
    assert "Draw after 6 plies" in out
    assert (sandbox / "morris-ai.log").exists()


def test_play_cli_rejects_bad_depth(sandbox, capsys):
    assert cli.main(["--depth", "0"]) == 2
    assert "engine.depth" in capsys.readouterr().err


def test_match_cli_writes_json(sandbox):
    out = sandbox / "results.json"
    rc = match_cli.main(
        ["--white", "greedy", "--black", "random", "--games", "2", "--max-plies", "20", "--seed", "1", "--output", str(out)]
    )
    assert rc == 0
    data = orjson.loads(out.read_bytes())
    assert data["config"]["games"] == 2
    assert sum(data["totals"].values()) == 2
    assert len(data["games"]) == 2
    assert data["games"][0]["moves"].startswith("White: ")
