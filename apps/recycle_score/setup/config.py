"""Recycle Score Service Configuration.

외부화 원칙:
- MongoDB / AutoML 접속 정보 → env (기존 배포 변수명 그대로 사용)
- 서비스 식별, CORS, 트레이싱 → RECYCLE_SCORE_ 접두사 env
- 미설정 값은 빈 문자열 (사전 검증 없음, 다운스트림 호출에서 실패)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from recycle_score.setup.constants import SERVICE_NAME, SERVICE_VERSION

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseSettings):
    """Recycle Score Service 설정."""

    # === Service Identity ===
    service_name: str = Field(SERVICE_NAME, description="Service name")
    service_version: str = Field(SERVICE_VERSION, description="Service version")
    environment: str = Field("dev", description="Environment (dev, staging, prod)")

    # === MongoDB ===
    mongodb_url: str = Field(
        "",
        validation_alias=AliasChoices("MONGODB_URL", "RECYCLE_SCORE_MONGODB_URL"),
        description="MongoDB connection URL",
    )
    mongodb_name: str = Field(
        "",
        validation_alias=AliasChoices("MONGODB_NAME", "RECYCLE_SCORE_MONGODB_NAME"),
        description="MongoDB database name",
    )

    # === AutoML Vision ===
    gcp_project_name: str = Field(
        "",
        validation_alias=AliasChoices("GCP_PROJECT_NAME", "RECYCLE_SCORE_GCP_PROJECT_NAME"),
        description="GCP project that owns the AutoML model",
    )
    gcp_region: str = Field(
        "",
        validation_alias=AliasChoices("GCP_REGION", "RECYCLE_SCORE_GCP_REGION"),
        description="AutoML model region (e.g. us-central1)",
    )
    auto_ml_model: str = Field(
        "",
        validation_alias=AliasChoices("AUTO_ML_MODEL", "RECYCLE_SCORE_AUTO_ML_MODEL"),
        description="AutoML object detection model ID",
    )

    # === CORS (env 외부화) ===
    cors_origins_str: str = Field(
        DEFAULT_CORS_ORIGINS,
        description="Allowed CORS origins (콤마 구분)",
    )

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    # === OpenTelemetry ===
    otel_enabled: bool = Field(False, description="Enable OpenTelemetry tracing")
    otel_exporter_otlp_endpoint: str = Field(
        "http://localhost:4318",
        description="OTLP/HTTP exporter endpoint",
    )
    otel_sampling_rate: float = Field(1.0, ge=0.0, le=1.0, description="Trace sampling ratio")

    model_config = SettingsConfigDict(
        env_prefix="RECYCLE_SCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
