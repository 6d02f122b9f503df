from app.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "HTTP_TIMEOUT", "LOG_LEVEL", "RELOAD"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.PORT == 3000
    assert settings.HOST == "0.0.0.0"
    assert settings.http_timeout == 10.0
    assert settings.LOG_LEVEL == "INFO"
    assert settings.RELOAD is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("TWITCH_CLIENT_ID", "abc")
    monkeypatch.setenv("TWITCH_CLIENT_SECRET", "shh")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HTTP_TIMEOUT", "0")
    monkeypatch.setenv("RELOAD", "true")

    settings = Settings()

    assert settings.TWITCH_CLIENT_ID == "abc"
    assert settings.TWITCH_CLIENT_SECRET == "shh"
    assert settings.PORT == 8080
    assert settings.http_timeout is None
    assert settings.RELOAD is True
