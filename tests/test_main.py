import sys

import pytest

import flappy_core.client
from flappy_core import __main__ as cli
from flappy_core.score_store import Database


class TrackedDatabase(Database):
    closed = []

    def close(self):
        TrackedDatabase.closed.append(self)
        super().close()


class CrashingClient:
    def __init__(self, session):
        self.session = session

    def run(self):
        raise RuntimeError("window lost")


@pytest.fixture
def tracked(monkeypatch, tmp_path):
    TrackedDatabase.closed = []
    monkeypatch.setattr(cli, "Database", TrackedDatabase)
    monkeypatch.setattr(sys, "argv", ["flappy", "--db", str(tmp_path / "scores.db")])
    return TrackedDatabase


def test_store_closed_when_client_crashes(monkeypatch, tracked):
    monkeypatch.setattr(flappy_core.client, "FlappyClient", CrashingClient)
    with pytest.raises(RuntimeError):
        cli.main()
    assert len(tracked.closed) == 1


def test_store_closed_on_bad_configuration(monkeypatch, tracked, tmp_path):
    monkeypatch.setattr(sys, "argv", ["flappy", "--db", str(tmp_path / "scores.db"), "--gap", "0"])
    assert cli.main() == 2
    assert len(tracked.closed) == 1
