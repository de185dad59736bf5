"""OpenTelemetry Distributed Tracing Configuration for Popup Auth.

분산 트레이싱 설정:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (OAuth provider 토큰 교환)

Architecture:
  Popup Auth (OTel SDK) -> OTLP/HTTP (4318) -> Collector

settings.otel_enabled가 false이면 아무것도 하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

    from apps.popup_auth.setup.config import Settings

logger = logging.getLogger(__name__)

_tracer_provider = None


def configure_tracing(settings: "Settings") -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 성공 여부
    """
    global _tracer_provider

    if not settings.otel_enabled:
        logger.debug("OpenTelemetry tracing disabled")
        return False

    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.environment,
        }
    )
    _tracer_provider = TracerProvider(resource=resource)

    endpoint = settings.otel_exporter_endpoint
    exporter = OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces") if endpoint else OTLPSpanExporter()
    _tracer_provider.add_span_processor(BatchSpanProcessor(exporter))

    trace.set_tracer_provider(_tracer_provider)

    logger.info(
        "OpenTelemetry tracing configured",
        extra={"service": settings.otel_service_name, "endpoint": endpoint},
    )
    return True


def instrument_fastapi(app: "FastAPI", settings: "Settings") -> None:
    """FastAPI 자동 계측."""
    if not settings.otel_enabled:
        return

    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health")
    logger.info("FastAPI instrumentation enabled")


def instrument_httpx(settings: "Settings") -> None:
    """HTTPX 자동 계측 (토큰 교환 호출 추적)."""
    if not settings.otel_enabled:
        return

    from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

    HTTPXClientInstrumentor().instrument()
    logger.info("HTTPX instrumentation enabled")


def shutdown_tracing() -> None:
    """TracerProvider 종료 (남은 span flush)."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
        logger.info("OpenTelemetry tracing shutdown")
