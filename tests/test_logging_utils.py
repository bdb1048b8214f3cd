import json

from labyrinth.logging_utils import current_level, get_logger


def test_key_value_format(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "debug")
    get_logger("labyrinth.test").info(event="hello", seed=7, note="two words", skipped=None)
    out = capsys.readouterr().out.strip()
    assert out.startswith("level=info ts=")
    assert "event=hello" in out
    assert "seed=7" in out
    assert "note=two_words" in out
    assert "logger=labyrinth.test" in out
    assert "skipped" not in out


def test_level_filtering(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "warn")
    log = get_logger("labyrinth.test")
    log.debug(event="a")
    log.info(event="b")
    log.warn(event="c")
    out = capsys.readouterr().out
    assert "event=a" not in out and "event=b" not in out
    assert "event=c" in out


def test_errors_go_to_stderr(capsys):
    get_logger("labyrinth.test").error(event="boom")
    captured = capsys.readouterr()
    assert "event=boom" in captured.err
    assert captured.out == ""


def test_json_mode(monkeypatch, capsys):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "info")
    monkeypatch.setenv("LABYRINTH_LOG_JSON", "1")
    get_logger("labyrinth.test").info(event="json_event", count=3)
    rec = json.loads(capsys.readouterr().out)
    assert rec["event"] == "json_event"
    assert rec["count"] == 3
    assert rec["level"] == "info"
    assert rec["logger"] == "labyrinth.test"


def test_unknown_level_defaults_to_info(monkeypatch):
    monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "chatty")
    assert current_level() == 20


def test_get_logger_is_cached():
    assert get_logger("labyrinth.x") is get_logger("labyrinth.x")
