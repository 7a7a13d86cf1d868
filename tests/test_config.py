import pytest

from taskboard.config import DEFAULT_API_URL, Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TASKBOARD_API_URL",
        "TASKBOARD_REQUEST_TIMEOUT",
        "TASKBOARD_LOG_LEVEL",
        "TASKBOARD_VERBOSE",
        "TASKBOARD_WINDOW_TITLE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()
    assert settings.api_url == DEFAULT_API_URL
    assert settings.request_timeout is None
    assert settings.log_level == "INFO"
    assert settings.verbose is False
    assert settings.window_title == "To-Do List"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TASKBOARD_API_URL", "https://todo.example.com/api/")
    monkeypatch.setenv("TASKBOARD_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("TASKBOARD_VERBOSE", "1")

    settings = Settings()

    assert settings.api_url == "https://todo.example.com/api"
    assert settings.request_timeout == 2.5
    assert settings.verbose is True


@pytest.mark.parametrize("raw", ["0", "-1", "  "])
def test_non_positive_timeout_means_none(monkeypatch, raw):
    monkeypatch.setenv("TASKBOARD_REQUEST_TIMEOUT", raw)
    assert Settings().request_timeout is None


def test_bad_timeout_is_rejected(monkeypatch):
    monkeypatch.setenv("TASKBOARD_REQUEST_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        Settings()
