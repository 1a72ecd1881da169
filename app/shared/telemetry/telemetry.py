"""OpenTelemetry tracing for the API (off unless TELEMETRY_ENABLED is set).

Spans cover HTTP requests (FastAPI) and MongoDB commands (PyMongo, which
motor runs on). Exporters: OTLP over gRPC for a collector, console for
development, or none.
"""

import logging
import threading
from typing import Callable

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

EXPORTER_CONSOLE = "console"
EXPORTER_OTLP = "otlp"
EXPORTER_NONE = "none"


def build_span_exporter(
    exporter_type: str, otlp_endpoint: str | None = None
) -> SpanExporter | None:
    """Return the span exporter for TELEMETRY_EXPORTER, or None for "none".

    "otlp" without an endpoint and unknown names fall back to the console.
    """
    if exporter_type == EXPORTER_NONE:
        return None
    if exporter_type == EXPORTER_OTLP and otlp_endpoint:
        logger.info("Using OTLP span exporter: %s", otlp_endpoint)
        return OTLPSpanExporter(
            endpoint=otlp_endpoint,
            insecure=otlp_endpoint.startswith("http://"),
        )
    if exporter_type != EXPORTER_CONSOLE:
        logger.warning(
            "Exporter '%s' unusable (endpoint=%s), using console",
            exporter_type,
            otlp_endpoint,
        )
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider plus the instrumentations applied for one app run.

    Every instrument_* call registers its undo step; shutdown() runs them
    and flushes pending spans.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None
        self._undo: list[Callable[[], None]] = []

    @property
    def active(self) -> bool:
        return self.enabled and self.tracer_provider is not None

    def setup_telemetry(
        self,
        exporter_type: str = EXPORTER_CONSOLE,
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and make it the global one.

        Args:
            exporter_type: "console", "otlp", or "none".
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Fraction of traces kept, 0.0 to 1.0.

        Returns:
            The provider, or None when disabled or setup failed.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = build_span_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, version=%s, exporter=%s",
            self.service_name,
            self.service_version,
            exporter_type,
        )
        return provider

    def _apply(
        self, name: str, instrument: Callable[[], None], undo: Callable[[], None]
    ) -> None:
        if not self.active:
            return
        try:
            instrument()
        except Exception as e:
            logger.exception("Failed to instrument %s: %s", name, e)
            return
        self._undo.append(undo)
        logger.info("%s instrumentation enabled", name)

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace HTTP requests (health checks excluded)."""
        self._apply(
            "FastAPI",
            lambda: FastAPIInstrumentor.instrument_app(
                app, tracer_provider=self.tracer_provider, excluded_urls="/health"
            ),
            lambda: FastAPIInstrumentor.uninstrument_app(app),
        )

    def instrument_pymongo(self) -> None:
        """Trace MongoDB commands."""
        instrumentor = PymongoInstrumentor()
        self._apply(
            "PyMongo",
            lambda: instrumentor.instrument(tracer_provider=self.tracer_provider),
            instrumentor.uninstrument,
        )

    def instrument_logging(self) -> None:
        """Add trace_id and span_id to log records."""
        instrumentor = LoggingInstrumentor()
        self._apply(
            "Logging",
            lambda: instrumentor.instrument(tracer_provider=self.tracer_provider),
            instrumentor.uninstrument,
        )

    def shutdown(self) -> None:
        """Remove instrumentation (newest first) and flush remaining spans."""
        while self._undo:
            undo = self._undo.pop()
            try:
                undo()
            except Exception as e:
                logger.warning("Failed to remove instrumentation: %s", e)
        if self.tracer_provider is not None:
            self.tracer_provider.shutdown()
            self.tracer_provider = None
            logger.info("Telemetry shutdown complete")


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the telemetry instance of the running app, if any."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear, with None) the telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
