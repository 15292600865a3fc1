import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import Response

from order_lifecycle.config import settings
from order_lifecycle.metrics import get_metrics_bytes, get_metrics_content_type
from order_lifecycle.routes import lifecycle

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s started (metrics_enabled=%s)", settings.service_name, settings.metrics_enabled)
    yield
    logger.info("%s stopped.", settings.service_name)


app = FastAPI(title="Order Lifecycle", lifespan=lifespan)
app.include_router(lifecycle.router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/metrics")
async def metrics() -> Response:
    """Prometheus scrape endpoint: prepared events, rejected transitions, unmapped routing lookups."""
    if not settings.metrics_enabled:
        return Response(status_code=404)
    return Response(
        content=get_metrics_bytes(),
        media_type=get_metrics_content_type(),
    )
