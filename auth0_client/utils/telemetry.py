import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
)


def setup_telemetry(service_name: str = "auth0-client", exporter: Optional[SpanExporter] = None):
    """Install a tracer provider for the ``auth0.request`` spans.

    Spans are batched to stdout unless ``exporter`` is given, in which case each
    span is handed to it as soon as it ends.
    """
    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    if exporter is None:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    else:
        provider.add_span_processor(SimpleSpanProcessor(exporter))

    trace.set_tracer_provider(provider)

    return trace.get_tracer("auth0_client")


def setup_logging(log_level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    # httpx logs every request at INFO, including the full URL with its query
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger("auth0_client")
