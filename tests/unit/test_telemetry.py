"""Tests for OpenTelemetry setup: exporter choice, lifespan wiring, teardown."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from app.core import lifespan as lifespan_module
from app.core.config import get_settings
from app.core.lifespan import create_lifespan
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    build_span_exporter,
    get_telemetry,
)


def test_exporter_none() -> None:
    assert build_span_exporter("none") is None


def test_exporter_console() -> None:
    assert isinstance(build_span_exporter("console"), ConsoleSpanExporter)


def test_exporter_otlp_with_endpoint() -> None:
    exporter = build_span_exporter("otlp", "http://localhost:4317")
    assert isinstance(exporter, OTLPSpanExporter)
    exporter.shutdown()


@pytest.mark.parametrize(
    ("exporter_type", "endpoint"), [("zipkin", None), ("otlp", None)]
)
def test_unusable_exporter_falls_back_to_console(
    exporter_type: str, endpoint: str | None, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        exporter = build_span_exporter(exporter_type, endpoint)
    assert isinstance(exporter, ConsoleSpanExporter)
    assert "using console" in caplog.text


def test_disabled_config_sets_nothing_up() -> None:
    telemetry = TelemetryConfig("svc", "1.0", enabled=False)
    assert telemetry.setup_telemetry() is None
    telemetry.instrument_pymongo()
    assert telemetry.tracer_provider is None
    assert not PymongoInstrumentor().is_instrumented_by_opentelemetry
    telemetry.shutdown()


@pytest.mark.parametrize("exporter", ["none", "console"])
async def test_lifespan_sets_up_and_tears_down_telemetry(
    monkeypatch: pytest.MonkeyPatch, exporter: str
) -> None:
    """With TELEMETRY_ENABLED the provider and instrumentation live for the app run."""
    monkeypatch.setenv("TELEMETRY_ENABLED", "true")
    monkeypatch.setenv("TELEMETRY_EXPORTER", exporter)
    get_settings.cache_clear()
    store = MagicMock()
    store.connect = AsyncMock()
    monkeypatch.setattr(
        lifespan_module.MongoStore, "from_settings", MagicMock(return_value=store)
    )
    monkeypatch.setattr(lifespan_module, "ensure_indexes", AsyncMock(return_value=[]))
    app = FastAPI()

    async with create_lifespan(app):
        telemetry = get_telemetry()
        assert telemetry is not None
        assert telemetry.tracer_provider is not None
        assert PymongoInstrumentor().is_instrumented_by_opentelemetry

    assert get_telemetry() is None
    assert telemetry.tracer_provider is None
    assert not PymongoInstrumentor().is_instrumented_by_opentelemetry
