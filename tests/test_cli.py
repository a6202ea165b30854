import json

import pytest

from sinesong import cli, player


@pytest.fixture
def songs_dir(tmp_path):
    directory = tmp_path / "songs"
    directory.mkdir()
    (directory / "tune.json").write_text(
        json.dumps([{"note": "A4", "duration": 0.1}, {"note": "E5", "duration": 0.1}]),
        encoding="utf-8",
    )
    (directory / "broken.json").write_text(
        json.dumps([{"note": "A4", "duration": 0.1}, {"note": "Ax4", "duration": 0.1}]),
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def played(monkeypatch):
    calls = []
    monkeypatch.setattr(player, "play_sequence", lambda streams: calls.append(list(streams)))
    return calls


def test_no_song_lists_available(songs_dir, capsys):
    assert cli.main(["--songs-dir", str(songs_dir)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Available songs:\n")
    assert "  broken.json\n  tune.json\n" in out
    assert "Usage: sinesong <song_name>" in out


def test_songs_dir_from_environment(songs_dir, monkeypatch, capsys):
    monkeypatch.setenv("SINESONG_SONGS_DIR", str(songs_dir))
    assert cli.main([]) == 1
    assert "  tune.json" in capsys.readouterr().out


def test_unknown_song(songs_dir, capsys):
    assert cli.main(["missing", "--songs-dir", str(songs_dir)]) == 1
    assert "Song 'missing' not found" in capsys.readouterr().out


def test_plays_song(songs_dir, played, capsys):
    assert cli.main(["tune", "--songs-dir", str(songs_dir)]) == 0
    assert "Playing: tune" in capsys.readouterr().out
    assert len(played) == 1
    assert [s.frequency for s in played[0]] == pytest.approx([440.0, 0.0, 659.255, 0.0], abs=1e-3)


def test_bad_note_aborts_without_playing(songs_dir, played, capsys):
    assert cli.main(["broken", "--songs-dir", str(songs_dir)]) == 1
    assert "accidental" in capsys.readouterr().out
    assert played == []


def test_skip_invalid_plays_remaining_notes(songs_dir, played):
    assert cli.main(["broken.json", "--skip-invalid", "--songs-dir", str(songs_dir)]) == 0
    assert [s.frequency for s in played[0]] == [440.0, 0.0]


def test_output_writes_wav(songs_dir, tmp_path, played):
    out = tmp_path / "tune.wav"
    assert cli.main(["tune", "-o", str(out), "--songs-dir", str(songs_dir)]) == 0
    assert out.exists()
    assert played == []


def test_playback_failure_is_reported(songs_dir, monkeypatch, capsys):
    def explode(streams):
        raise RuntimeError("no audio device")

    monkeypatch.setattr(player, "play_sequence", explode)
    assert cli.main(["tune", "--songs-dir", str(songs_dir)]) == 1
    assert "no audio device" in capsys.readouterr().out
