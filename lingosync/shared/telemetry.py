# lingosync\shared\telemetry.py
from typing import Optional

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

from lingosync import __version__
from lingosync.shared.config import settings

logger = structlog.get_logger()

def setup_telemetry(app_name: Optional[str] = None) -> bool:
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Should be called once at process startup (CLI or embedding application).

    Returns True if a tracer provider was installed.
    """
    app_name = app_name or settings.OTEL_SERVICE_NAME

    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.debug("telemetry_disabled", reason="no OTLP endpoint configured")
        return False

    logger.info("telemetry_initializing", service=app_name)

    # 1. Define Resource (Service Identity)
    resource = Resource.create(attributes={
        "service.name": app_name,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })

    # 2. Configure Tracer Provider
    trace_provider = TracerProvider(resource=resource)

    # 3. Configure Exporter (Send data to Jaeger/Tempo)
    otlp_exporter = OTLPSpanExporter(endpoint=f"{settings.OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces")
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    # 4. Optional: Console Exporter for local Debugging
    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    # 5. Set Global Provider
    trace.set_tracer_provider(trace_provider)
    return True

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in specific modules.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
