# ftskit/utils/telemetry.py
from __future__ import annotations
import contextlib, time
from dataclasses import dataclass
from typing import Optional, Iterator, Any

from fastapi import FastAPI
from opentelemetry import trace, metrics
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from ftskit.core.config import settings
import logging

logger = logging.getLogger("ftskit.obs")


@dataclass
class ObsConfig:
    env: str = settings.ENV
    service_name: Optional[str] = settings.OTEL_SERVICE_NAME or settings.SERVICE_NAME
    service_version: Optional[str] = settings.OTEL_SERVICE_VERSION
    sample_ratio: Optional[str] = settings.OTEL_SAMPLE_RATIO
    enable_metrics: Optional[str] = settings.OTEL_ENABLE_METRICS
    endpoint: Optional[str] = settings.OTEL_EXPORTER_OTLP_ENDPOINT

    betterstack_host: Optional[str] = settings.BETTERSTACK_HOST
    betterstack_api_key: Optional[str] = settings.BETTERSTACK_API_KEY


_cfg = ObsConfig()
_tracer = trace.get_tracer(__name__)
_step_hist = None


def _to_float(x, default=1.0) -> float:
    try:
        v = float(x)
        return max(0.0, min(1.0, v))
    except (TypeError, ValueError):
        return default


def _to_bool(x) -> bool:
    if isinstance(x, bool):
        return x
    return str(x).strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _join(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path if path.startswith("/") else "/" + path
    return base + path


def _build_resource() -> Resource:
    return Resource.create(
        {
            "service.name": _cfg.service_name or "ftskit",
            "service.version": _cfg.service_version or "unknown",
            "deployment.environment": _cfg.env,
        }
    )


def _build_exporters(enable_metrics: bool):
    # Prod → Better Stack using BETTERSTACK_HOST
    if _cfg.env.lower() == "production" and _cfg.betterstack_host:
        base = _cfg.betterstack_host
        headers = {"Authorization": f"Bearer {_cfg.betterstack_api_key}"}
    else:
        base = _cfg.endpoint or "http://localhost:4318"
        headers = {}

    traces_ep = _join(base, "/v1/traces")
    metrics_ep = _join(base, "/v1/metrics")
    span_exp = OTLPSpanExporter(endpoint=traces_ep, headers=headers)
    metric_exp = (
        OTLPMetricExporter(endpoint=metrics_ep, headers=headers)
        if enable_metrics
        else None
    )
    logger.info("OTEL traces_ep=%s metrics_ep=%s", traces_ep, metrics_ep)
    return span_exp, metric_exp


def setup_observability(app: FastAPI, *, sqlalchemy_engine=None) -> None:
    sample_ratio = _to_float(_cfg.sample_ratio, 1.0)
    enable_metrics = _to_bool(_cfg.enable_metrics)

    resource = _build_resource()
    tp = TracerProvider(
        resource=resource, sampler=ParentBased(TraceIdRatioBased(sample_ratio))
    )
    span_exporter, metric_exporter = _build_exporters(enable_metrics)
    tp.add_span_processor(BatchSpanProcessor(span_exporter))
    trace.set_tracer_provider(tp)

    global _step_hist
    if enable_metrics and metric_exporter:
        mp = MeterProvider(
            resource=resource,
            metric_readers=[PeriodicExportingMetricReader(metric_exporter)],
        )
        metrics.set_meter_provider(mp)
        _step_hist = metrics.get_meter("ftskit.obs").create_histogram(
            "ftskit.step.duration", unit="ms", description="Tokenize step duration"
        )

    FastAPIInstrumentor.instrument_app(
        app,
        excluded_urls="^/health$|^/liveness$|^/readiness$|^/docs$",
    )
    if sqlalchemy_engine is not None:
        SQLAlchemyInstrumentor().instrument(engine=sqlalchemy_engine)
    LoggingInstrumentor().instrument(set_logging_format=True)


@contextlib.contextmanager
def step(name: str, **attrs: Any) -> Iterator[Any]:
    start = time.perf_counter()
    with _tracer.start_as_current_span(name) as span:
        for k, v in attrs.items():
            if v is not None:
                span.set_attribute(f"ftskit.{k}", v)
        try:
            yield span
            span.set_attribute("ftskit.success", True)
        except Exception as e:
            span.record_exception(e)
            span.set_attribute("ftskit.success", False)
            span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
            raise
        finally:
            if _step_hist:
                _step_hist.record((time.perf_counter() - start) * 1000, {"step": name})
