from evlab.config import Settings


def test_from_env_reads_recognized_options(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-live")
    monkeypatch.setenv("CHAT_PASSWORD", "pw")
    monkeypatch.setenv("FRONTEND_ORIGIN", "https://a.example, https://b.example")
    monkeypatch.setenv("OPENROUTER_SITE", "https://evlab.example")
    monkeypatch.setenv("OPENROUTER_TITLE", "EV Lab")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("PASSWORD_GATE", "false")

    s = Settings.from_env()

    assert s.OPENROUTER_API_KEY == "sk-live"
    assert s.CHAT_PASSWORD == "pw"
    assert s.cors_origins == ["https://a.example", "https://b.example"]
    assert s.OPENROUTER_SITE == "https://evlab.example"
    assert s.OPENROUTER_TITLE == "EV Lab"
    assert s.PORT == 8080
    assert s.PASSWORD_GATE is False


def test_defaults(monkeypatch):
    for name in ("OPENROUTER_API_KEY", "CHAT_PASSWORD", "FRONTEND_ORIGIN", "PORT",
                 "PASSWORD_GATE", "OPENROUTER_SITE", "OPENROUTER_TITLE"):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.OPENROUTER_API_KEY == ""
    assert s.cors_origins == "*"
    assert s.PORT == 3000
    assert s.PASSWORD_GATE is True
    assert s.OPENROUTER_SITE == "https://example.com"
    assert s.OPENROUTER_TITLE == "EV Range Lab"
    assert s.MAX_BODY_BYTES == 2 * 1024 * 1024
