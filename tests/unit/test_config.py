"""GlobalConfig 단위 테스트."""
import pytest

from app.config import GlobalConfig


@pytest.mark.unit
class TestGlobalConfig:
    def test_defaults(self):
        settings = GlobalConfig(app_secret="x")
        assert settings.cookie_max_age == 2_592_000

    def test_secret_configured(self):
        assert GlobalConfig(app_secret="x").secret_configured is True
        assert GlobalConfig(app_secret="").secret_configured is False

    def test_secret_from_environment(self, monkeypatch):
        monkeypatch.setenv("APP_SECRET", "from-env")
        assert GlobalConfig().app_secret == "from-env"
