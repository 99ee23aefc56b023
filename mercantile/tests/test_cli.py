"""
Tests for the command-line interface.
"""

import json

import pytest

from ..cli import main
from ..games.britain import BRITAIN_BOARD


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MERCANTILE_LOG_LEVEL", "MERCANTILE_SEED", "MERCANTILE_BOARD_FILE"):
        monkeypatch.delenv(name, raising=False)


def event_lines(output):
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def test_demo_prints_events(capsys):
    main(["demo", "--seed", "3", "--actions", "10"])

    out = capsys.readouterr().out
    events = event_lines(out)
    assert events
    assert events[0]["type"] in ("DICE_ROLLED", "TURN_ENDED")
    assert "P1 Alice" in out
    assert "P2 Bob" in out


def test_demo_is_reproducible(capsys):
    main(["demo", "--seed", "4", "--actions", "15", "--bot", "factory"])
    first = capsys.readouterr().out
    main(["demo", "--seed", "4", "--actions", "15", "--bot", "factory"])
    assert capsys.readouterr().out == first


def test_demo_uses_board_file(tmp_path, monkeypatch, capsys):
    board = {"areas": {"A": {"id": "A", "grid": [["ST", "MINT"]], "edges": [
        {"from": [0, 0], "to": [0, 1]}, {"from": [0, 1], "to": [0, 0]},
    ]}}}
    path = tmp_path / "ring.json"
    path.write_text(json.dumps(board), encoding="utf-8")
    monkeypatch.setenv("MERCANTILE_BOARD_FILE", str(path))

    main(["demo", "--players", "Cara", "--actions", "5"])

    out = capsys.readouterr().out
    assert "P1 Cara" in out
    assert all(e["payload"].get("tile_id") in (None, "ST", "MINT") for e in event_lines(out))


def test_validate_clean_board(tmp_path, capsys):
    path = tmp_path / "britain.json"
    path.write_text(json.dumps(BRITAIN_BOARD), encoding="utf-8")

    main(["validate", str(path)])

    assert "Board is valid (1 area(s))" in capsys.readouterr().out


def test_validate_broken_board(tmp_path, capsys):
    board = {"areas": {"A": {"id": "A", "grid": [["ST", None]], "edges": [{"from": [0, 0], "to": [0, 1]}]}}}
    path = tmp_path / "broken.json"
    path.write_text(json.dumps(board), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["validate", str(path)])

    assert exc_info.value.code == 1
    assert "error: Area 'A': edge target [0,1]" in capsys.readouterr().out


def test_validate_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["validate", str(tmp_path / "nope.json")])
    assert "File not found" in capsys.readouterr().out


def test_replay(tmp_path, capsys):
    path = tmp_path / "actions.json"
    path.write_text(json.dumps([
        {"type": "end_turn", "player_id": "P1"},
        {"type": "end_turn", "player_id": "P2"},
    ]), encoding="utf-8")

    main(["replay", str(path)])

    out = capsys.readouterr().out
    assert [e["type"] for e in event_lines(out)] == ["TURN_ENDED", "TURN_ENDED"]
    assert "Turn 2, active player P1" in out


def test_no_command(capsys):
    with pytest.raises(SystemExit):
        main([])


def test_replay_illegal_action(tmp_path, capsys):
    path = tmp_path / "actions.json"
    path.write_text(json.dumps([{"type": "end_turn", "player_id": "P2"}]), encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["replay", str(path)])

    assert exc_info.value.code == 1
    assert "Error: Not P2's turn" in capsys.readouterr().out


def test_replay_malformed_json(tmp_path, capsys):
    path = tmp_path / "actions.json"
    path.write_text("[{\"type\": ", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["replay", str(path)])

    assert exc_info.value.code == 1
    assert "Error: Invalid JSON" in capsys.readouterr().out


def test_demo_board_with_empty_start_cell(tmp_path, monkeypatch, capsys):
    board = {"areas": {"A": {"id": "A", "grid": [[None, "ST"]], "edges": []}}}
    path = tmp_path / "holey.json"
    path.write_text(json.dumps(board), encoding="utf-8")
    monkeypatch.setenv("MERCANTILE_BOARD_FILE", str(path))

    with pytest.raises(SystemExit) as exc_info:
        main(["demo"])

    assert exc_info.value.code == 1
    assert "Error: No tile at [0,0] in area A" in capsys.readouterr().out
