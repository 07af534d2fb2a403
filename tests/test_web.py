import chess
import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from tests.positions import BACK_RANK, STALEMATE
from web.app import app

client = TestClient(app)


def test_api_move_from_start() -> None:
    response = client.post("/api/move", json={"fen": chess.STARTING_FEN})
    assert response.status_code == 200
    body = response.json()
    assert body["move"] == "e2e4"
    assert body["score"] == 1000
    assert body["decisive"] is False
    assert body["fen"].startswith("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b")


def test_api_move_plays_mate() -> None:
    response = client.post("/api/move", json={"fen": BACK_RANK, "time_limit": 0.5})
    assert response.status_code == 200
    body = response.json()
    assert body["move"] == "d1d8"
    assert body["decisive"] is True


def test_api_move_history_arms_repetition_guard() -> None:
    response = client.post(
        "/api/move",
        json={"fen": chess.STARTING_FEN, "history": ["d2d4", "e2e4"]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["overridden"] is True
    assert chess.Move.from_uci(body["move"]) in chess.Board().legal_moves


def test_api_move_rejects_bad_fen() -> None:
    response = client.post("/api/move", json={"fen": "not a fen"})
    assert response.status_code == 400


def test_api_move_rejects_finished_game() -> None:
    response = client.post("/api/move", json={"fen": STALEMATE})
    assert response.status_code == 400


def test_api_move_rejects_bad_history() -> None:
    response = client.post("/api/move", json={"fen": chess.STARTING_FEN, "history": ["zz"]})
    assert response.status_code == 400
