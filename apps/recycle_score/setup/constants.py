"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# Service Identity
# ─────────────────────────────────────────────────────────────────────────────
SERVICE_NAME = "recycle-score-api"
SERVICE_VERSION = "1.0.0"

# ─────────────────────────────────────────────────────────────────────────────
# Logging Constants (12-Factor App Compliance)
# ─────────────────────────────────────────────────────────────────────────────
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# Noisy loggers to suppress
NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "pymongo",
    "google.auth",
    "urllib3",
    "asyncio",
)

# ─────────────────────────────────────────────────────────────────────────────
# PII Masking Configuration (OWASP compliant)
# ─────────────────────────────────────────────────────────────────────────────
# MongoDB URL에는 계정 정보가 포함될 수 있음
SENSITIVE_FIELD_PATTERNS = frozenset(
    {"password", "secret", "token", "api_key", "authorization", "mongodb_url"}
)
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10
