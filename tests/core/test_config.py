"""Settings loading."""

from authstate.core.config import Settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.GRAPHQL_PATH == "/graphql"
    assert config.VERIFY_EMAIL_PATH == "/auth/verify-email"
    assert config.REQUEST_TIMEOUT_SECONDS is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://api.example.com/")
    monkeypatch.setenv("AUTH_TOKEN_NAME", "Custom.token")
    monkeypatch.setenv("STREAMLIT_ROUTES", '{"/": "app.py"}')
    config = Settings(_env_file=None)
    assert config.API_BASE_URL == "https://api.example.com/"
    assert config.AUTH_TOKEN_NAME == "Custom.token"
    assert config.STREAMLIT_ROUTES == {"/": "app.py"}
