import logging

import pytest
from fastapi.testclient import TestClient

from rumbl.app.core.config import PACKAGE_DIR, Settings
from rumbl.app.core.logging_config import setup_logging
from rumbl.app.main import create_app


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("TEMPLATES_DIR", raising=False)

    app_settings = Settings()

    assert app_settings.templates_dir == str(PACKAGE_DIR / "templates")
    assert isinstance(app_settings.port, int)


def test_templates_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TEMPLATES_DIR", str(tmp_path))

    assert Settings().templates_dir == str(tmp_path)


def test_create_app_uses_given_settings(app, app_settings):
    assert app.title == "Rumbl Test"
    assert app.state.settings is app_settings
    assert "first_name" in app.state.templates.env.globals


@pytest.fixture
def bare_root_logger(monkeypatch):
    """Return a callable that strips the root logger of its handlers.

    pytest attaches its capture handlers when the test body starts, so the
    strip has to happen inside the test itself.
    """
    root = logging.getLogger()

    def strip():
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        return root

    yield strip
    for handler in root.handlers:
        handler.close()


def test_setup_logging_adds_console_and_file_handlers(bare_root_logger, tmp_path):
    root = bare_root_logger()
    logfile = tmp_path / "rumbl.log"

    setup_logging("debug", str(logfile))

    assert root.level == logging.DEBUG
    kinds = [type(handler) for handler in root.handlers]
    assert kinds == [logging.StreamHandler, logging.FileHandler]

    logging.getLogger("rumbl.test").info("hello")
    root.handlers[1].flush()
    assert "[INFO] rumbl.test: hello" in logfile.read_text(encoding="utf-8")


def test_setup_logging_unknown_level_falls_back_to_info(bare_root_logger):
    root = bare_root_logger()
    setup_logging("chatty")

    assert root.level == logging.INFO
    assert len(root.handlers) == 1


def test_setup_logging_runs_once(bare_root_logger):
    root = bare_root_logger()
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_create_app_with_custom_templates_dir(tmp_path):
    (tmp_path / "page").mkdir()
    (tmp_path / "page" / "index.html").write_text("<p>custom home</p>", encoding="utf-8")
    app = create_app(Settings(templates_dir=str(tmp_path)))

    with TestClient(app) as client:
        assert client.get("/").text == "<p>custom home</p>"
