"""
Structured Logging Configuration (ECS-based)

Log Collection Protocol:
- stdout JSON → Fluent Bit → Elasticsearch
- OpenTelemetry trace/span id는 활성 span이 있을 때만 포함
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace

from recycle_score.setup.constants import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    ECS_VERSION,
    ENV_KEY_ENVIRONMENT,
    ENV_KEY_LOG_FORMAT,
    ENV_KEY_LOG_LEVEL,
    EXCLUDED_LOG_RECORD_ATTRS,
    MASK_MIN_LENGTH,
    MASK_PLACEHOLDER,
    MASK_PRESERVE_PREFIX,
    MASK_PRESERVE_SUFFIX,
    NOISY_LOGGERS,
    SENSITIVE_FIELD_PATTERNS,
    SERVICE_NAME,
    SERVICE_VERSION,
)


def _mask(value: Any) -> str:
    """앞/뒤 일부만 남기고 마스킹 (짧은 값은 전체 치환)."""
    text = "" if value is None else str(value)
    if len(text) <= MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{text[:MASK_PRESERVE_PREFIX]}...{text[-MASK_PRESERVE_SUFFIX:]}"


def mask_sensitive_data(data: dict[str, Any]) -> dict[str, Any]:
    """민감 키(password, token, mongodb_url 등)의 값을 마스킹.

    log extra는 평탄한 dict이며 중첩 dict만 재귀 처리합니다.
    """
    masked: dict[str, Any] = {}
    for key, value in data.items():
        lowered = key.lower()
        if any(pattern in lowered for pattern in SENSITIVE_FIELD_PATTERNS):
            masked[key] = _mask(value)
        elif isinstance(value, dict):
            masked[key] = mask_sensitive_data(value)
        else:
            masked[key] = value
    return masked


class ECSJsonFormatter(logging.Formatter):
    """Elastic Common Schema (ECS) 기반 JSON 포매터"""

    def __init__(
        self,
        service_name: str = SERVICE_NAME,
        service_version: str = SERVICE_VERSION,
        environment: str = DEFAULT_ENVIRONMENT,
    ):
        super().__init__()
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "message": record.getMessage(),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "ecs.version": ECS_VERSION,
            "service.name": self.service_name,
            "service.version": self.service_version,
            "service.environment": self.environment,
        }
        log_obj.update(self._trace_fields())

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_obj["error.type"] = exc_type.__name__ if exc_type else None
            log_obj["error.message"] = str(exc_value) if exc_value else None
            log_obj["error.stack_trace"] = self.formatException(record.exc_info)

        labels = {k: v for k, v in record.__dict__.items() if k not in EXCLUDED_LOG_RECORD_ATTRS}
        if labels:
            log_obj["labels"] = mask_sensitive_data(labels)

        return json.dumps(log_obj, ensure_ascii=False, default=str)

    @staticmethod
    def _trace_fields() -> dict[str, str]:
        ctx = trace.get_current_span().get_span_context()
        if not ctx.is_valid:
            return {}
        return {
            "trace.id": format(ctx.trace_id, "032x"),
            "span.id": format(ctx.span_id, "016x"),
        }


def _build_formatter(
    use_json: bool, service_name: str, service_version: str, environment: str
) -> logging.Formatter:
    if use_json:
        return ECSJsonFormatter(service_name, service_version, environment)
    return logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_logging(
    service_name: str = SERVICE_NAME,
    service_version: str = SERVICE_VERSION,
    log_level: str | None = None,
    json_format: bool | None = None,
) -> None:
    """root 로거를 stdout 단일 핸들러로 재설정.

    인자를 생략하면 LOG_LEVEL / LOG_FORMAT / ENVIRONMENT 환경변수를 사용합니다.
    """
    environment = os.getenv(ENV_KEY_ENVIRONMENT, DEFAULT_ENVIRONMENT)
    level_name = log_level or os.getenv(ENV_KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    if json_format is None:
        json_format = os.getenv(ENV_KEY_LOG_FORMAT, DEFAULT_LOG_FORMAT) == "json"
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(json_format, service_name, service_version, environment))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
