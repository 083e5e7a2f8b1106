"""Unit tests for observability module."""

import io
import json
import logging
from pathlib import Path
import sys

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
from prometheus_client import REGISTRY
import pytest

from catalog_search.observability import (
    SEARCH_LATENCY,
    JsonFormatter,
    configure_logging,
    create_span,
    get_metrics,
    get_metrics_content_type,
    get_trace_context,
    set_trace_context,
    tracing as tracing_module,
    track_latency,
)
from catalog_search.observability.context import trace_context, update_span_id


def _record(msg: str = "test message", name: str = "catalog_search.search.engine", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def fresh_context():
    token = trace_context.set(None)
    yield
    trace_context.reset(token)


@pytest.fixture
def span_exporter(monkeypatch: pytest.MonkeyPatch) -> InMemorySpanExporter:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setitem(tracing_module._tracer_holder, "tracer", provider.get_tracer("test"))
    return exporter


@pytest.mark.unit
class TestTraceContext:
    """Tests for context propagation helpers."""

    def test_generates_ids_on_first_access(self, fresh_context):
        ctx = get_trace_context()
        assert len(ctx["trace_id"]) == 32
        assert len(ctx["span_id"]) == 16
        assert get_trace_context() == ctx

    def test_update_span_id_keeps_trace_and_extras(self, fresh_context):
        set_trace_context("a" * 32, "b" * 16, catalog="Books")
        update_span_id("c" * 16)
        assert get_trace_context() == {"trace_id": "a" * 32, "span_id": "c" * 16, "catalog": "Books"}


@pytest.mark.unit
class TestJsonFormatter:
    """Tests for structured JSON logging."""

    def test_format_includes_trace_context(self, fresh_context):
        set_trace_context("abc123", "def456", catalog="Books")

        data = json.loads(JsonFormatter().format(_record()))

        assert data["message"] == "test message"
        assert data["level"] == "INFO"
        assert data["trace_id"] == "abc123"
        assert data["span_id"] == "def456"
        assert data["catalog"] == "Books"
        assert data["component"] == "engine"

    def test_extra_fields_are_included(self, fresh_context):
        data = json.loads(JsonFormatter().format(_record(variant_count=4, script="latin")))
        assert data["variant_count"] == 4
        assert data["script"] == "latin"

    def test_sensitive_fields_are_redacted(self, fresh_context):
        data = json.loads(JsonFormatter().format(_record(api_key="s3cret")))
        assert data["api_key"] == "[REDACTED]"

    def test_long_message_is_truncated(self, fresh_context):
        data = json.loads(JsonFormatter().format(_record(msg="x" * 3000)))
        assert data["message"] == "x" * JsonFormatter.MAX_MESSAGE_LEN + "..."

    def test_non_json_values_are_serialized(self, fresh_context):
        record = _record(fields=("title", "author"), tags={"b", "a"}, path=Path("/tmp/catalog.json"))
        data = json.loads(JsonFormatter().format(record))
        assert data["fields"] == ["title", "author"]
        assert data["tags"] == ["a", "b"]
        assert data["path"] == "/tmp/catalog.json"

    def test_exception_is_formatted(self, fresh_context):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("test", logging.ERROR, "test.py", 1, "failed", (), exc_info=None)
            record.exc_info = sys.exc_info()
        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_json_to_stream(self, restore_root_logging, fresh_context):
        stream = io.StringIO()
        configure_logging("debug", stream=stream)

        logging.getLogger("catalog_search.tests").debug("hello", extra={"result_count": 2})

        data = json.loads(stream.getvalue().strip())
        assert data["message"] == "hello"
        assert data["result_count"] == 2
        assert restore_root_logging.level == logging.DEBUG

    def test_plain_text_output(self, restore_root_logging):
        stream = io.StringIO()
        configure_logging("info", json_output=False, stream=stream)

        logging.getLogger("catalog_search.tests").info("plain line")

        assert "INFO [catalog_search.tests] plain line" in stream.getvalue()

    def test_replaces_existing_handlers(self, restore_root_logging):
        configure_logging("info", stream=io.StringIO())
        configure_logging("info", stream=io.StringIO())
        assert len(restore_root_logging.handlers) == 1

    def test_per_logger_levels(self, restore_root_logging):
        noisy = logging.getLogger("catalog_search.noisy")
        original = noisy.level
        try:
            configure_logging("info", stream=io.StringIO(), logger_levels={"catalog_search.noisy": "error"})
            assert noisy.level == logging.ERROR
        finally:
            noisy.setLevel(original)


@pytest.mark.unit
class TestTracing:
    """Tests for create_span."""

    def test_span_records_attributes_and_updates_context(self, span_exporter, fresh_context):
        with create_span("catalog.test", attributes={"search.query_length": 6}) as span:
            span_id = format(span.get_span_context().span_id, "016x")
            assert get_trace_context()["span_id"] == span_id

        (finished,) = span_exporter.get_finished_spans()
        assert finished.name == "catalog.test"
        assert finished.attributes["search.query_length"] == 6

    def test_span_records_errors(self, span_exporter):
        with pytest.raises(RuntimeError), create_span("catalog.fail"):
            raise RuntimeError("boom")

        (finished,) = span_exporter.get_finished_spans()
        assert finished.status.status_code == StatusCode.ERROR
        assert finished.events[0].name == "exception"


@pytest.mark.unit
class TestMetrics:
    """Tests for Prometheus metrics helpers."""

    def test_track_latency_observes_once(self):
        labels = {"operation": "unit-test"}
        before = REGISTRY.get_sample_value("catalog_search_latency_seconds_count", labels) or 0.0

        with track_latency(SEARCH_LATENCY, **labels):
            pass

        assert REGISTRY.get_sample_value("catalog_search_latency_seconds_count", labels) == before + 1

    def test_track_latency_observes_on_error(self):
        labels = {"operation": "unit-test-error"}
        before = REGISTRY.get_sample_value("catalog_search_latency_seconds_count", labels) or 0.0

        with pytest.raises(KeyError), track_latency(SEARCH_LATENCY, **labels):
            raise KeyError("missing")

        assert REGISTRY.get_sample_value("catalog_search_latency_seconds_count", labels) == before + 1

    def test_metrics_exposition(self):
        with track_latency(SEARCH_LATENCY, operation="exposition"):
            pass
        assert b"catalog_search_latency_seconds" in get_metrics()
        assert get_metrics_content_type().startswith("text/plain")
