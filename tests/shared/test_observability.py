# tests\shared\test_observability.py
from opentelemetry.sdk.trace import TracerProvider

from lingosync.shared import telemetry
from lingosync.shared.logging_config import add_open_telemetry_spans

def test_log_entries_outside_a_span_have_empty_ids():
    event = add_open_telemetry_spans(None, "info", {"event": "words_fetched"})

    assert event["trace_id"] is None
    assert event["span_id"] is None

def test_log_entries_inside_a_span_carry_ids():
    tracer = TracerProvider().get_tracer(__name__)

    with tracer.start_as_current_span("session.fetch_words") as span:
        event = add_open_telemetry_spans(None, "info", {"event": "words_fetched"})

    ctx = span.get_span_context()
    assert event["trace_id"] == format(ctx.trace_id, "032x")
    assert event["span_id"] == format(ctx.span_id, "016x")

def test_telemetry_disabled_without_endpoint(monkeypatch):
    monkeypatch.setattr(telemetry.settings, "OTEL_EXPORTER_OTLP_ENDPOINT", None)

    assert telemetry.setup_telemetry() is False
