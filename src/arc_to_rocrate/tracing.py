"""
OpenTelemetry tracing configuration for the converter.

Spans can be logged to the console and/or exported to an OTLP collector
(e.g. Signoz).
"""

import logging
from collections.abc import Sequence

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import ReadableSpan, TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SimpleSpanProcessor, SpanExporter, SpanExportResult

from arc_to_rocrate import __version__

logger = logging.getLogger(__name__)


class SimpleConsoleSpanExporter(SpanExporter):
    """Simple span exporter that logs to console."""

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        """Export spans to console."""
        for span in spans:
            if span.end_time is not None and span.start_time is not None:
                duration_ms = (span.end_time - span.start_time) / 1e6
            else:
                duration_ms = 0.0
            logger.info(
                "SPAN: %s (duration=%0.3fms)",
                span.name,
                duration_ms,
            )
            if span.attributes:
                logger.info("  Attributes: %s", dict(span.attributes))
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        """Shutdown the exporter."""

    def force_flush(self, timeout_millis: int = 30000) -> bool:  # noqa: ARG002
        """Flush any pending spans."""
        return True


def initialize_tracing(
    service_name: str = "arc-to-rocrate",
    otlp_endpoint: str | None = None,
    log_console_spans: bool = False,
) -> tuple[TracerProvider, trace.Tracer]:
    """
    Initialize OpenTelemetry tracing with console and optional OTLP exporter.

    Args:
        service_name: The service name for traces (default: "arc-to-rocrate")
        otlp_endpoint: Optional OTLP endpoint URL (e.g. http://signoz:4318)
        log_console_spans: Whether to log spans to console (default: False)

    Returns:
        Tuple of (TracerProvider, Tracer) for use in the application
    """
    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": __version__,
        }
    )
    tracer_provider = TracerProvider(resource=resource)

    if log_console_spans:
        tracer_provider.add_span_processor(SimpleSpanProcessor(SimpleConsoleSpanExporter()))

    if otlp_endpoint:
        try:
            otlp_exporter = OTLPSpanExporter(endpoint=f"{otlp_endpoint.rstrip('/')}/v1/traces")
            tracer_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
            logger.info("OpenTelemetry OTLP exporter configured: %s", otlp_endpoint)
        except (ValueError, OSError) as e:
            logger.warning("Failed to configure OTLP exporter: %s", e)

    trace.set_tracer_provider(tracer_provider)
    tracer = tracer_provider.get_tracer(__name__)

    logger.debug(
        "OpenTelemetry tracing initialized (console=%s, otlp=%s)",
        log_console_spans,
        bool(otlp_endpoint),
    )

    return tracer_provider, tracer
