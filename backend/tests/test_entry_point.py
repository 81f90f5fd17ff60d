import logging

import notes_api.__main__ as entry
import notes_api.main


def test_importing_main_does_not_build_an_app():
    assert not hasattr(notes_api.main, "app")


def test_create_app_leaves_logging_alone(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    notes_api.main.create_app()
    assert calls == []


def test_main_configures_logging_and_runs_uvicorn(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PORT", "8123")

    levels = []
    runs = []
    monkeypatch.setattr(entry, "setup_logging", levels.append)
    monkeypatch.setattr(entry.uvicorn, "run", lambda app, **kw: runs.append((app, kw)))

    entry.main()

    assert levels == ["DEBUG"]
    app, kw = runs[0]
    assert app.state.settings.data_dir == tmp_path
    assert kw["port"] == 8123
    assert kw["log_level"] == "debug"
