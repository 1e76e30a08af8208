"""Config Tests - 환경변수 매핑 테스트."""

import os
from unittest.mock import patch

from recycle_score.setup.config import Settings

UPSTREAM_ENV = {
    "MONGODB_URL": "mongodb://db.internal:27017",
    "MONGODB_NAME": "recycle",
    "GCP_PROJECT_NAME": "recycle-project",
    "GCP_REGION": "us-central1",
    "AUTO_ML_MODEL": "IOD123",
}


class TestSettingsUpstream:
    """MongoDB / AutoML 설정 테스트."""

    def test_reads_bare_env_names(self):
        with patch.dict(os.environ, UPSTREAM_ENV, clear=False):
            settings = Settings(_env_file=None)

        assert settings.mongodb_url == "mongodb://db.internal:27017"
        assert settings.mongodb_name == "recycle"
        assert settings.gcp_project_name == "recycle-project"
        assert settings.gcp_region == "us-central1"
        assert settings.auto_ml_model == "IOD123"

    def test_missing_values_default_to_empty(self):
        """미설정 값은 빈 문자열 (사전 검증 없음)."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.mongodb_url == ""
        assert settings.mongodb_name == ""
        assert settings.auto_ml_model == ""


class TestSettingsDefaults:
    """Settings 기본값 테스트."""

    def test_service_identity(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.service_name == "recycle-score-api"
        assert settings.otel_enabled is False

    def test_cors_origins_parsing(self):
        with patch.dict(
            os.environ,
            {"RECYCLE_SCORE_CORS_ORIGINS_STR": "https://a.example, https://b.example,"},
            clear=True,
        ):
            settings = Settings(_env_file=None)

        assert settings.cors_origins == ["https://a.example", "https://b.example"]
