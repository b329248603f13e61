import os
from unittest.mock import patch

from fastapi.testclient import TestClient

from docmanager.core.config import Settings
from docmanager.main import create_app


class TestConfig:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.app_title == "DocManager"
        assert settings.log_level == "INFO"
        assert settings.id_start == 1

    @patch.dict(os.environ, {"DOCMANAGER_ID_START": "10", "DOCMANAGER_LOG_LEVEL": "debug"}, clear=False)
    def test_env_overrides(self):
        settings = Settings(_env_file=None)
        assert settings.id_start == 10
        assert settings.log_level == "debug"

    def test_id_start_reaches_store(self):
        app = create_app(Settings(_env_file=None, id_start=42))
        with TestClient(app) as client:
            response = client.post("/documents/", json={"title": "t"})
        assert response.json()["id"] == "42"
