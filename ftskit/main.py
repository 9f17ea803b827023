from contextlib import asynccontextmanager
import logging
import time
import sqlalchemy
from sqlalchemy.exc import OperationalError
from fastapi import FastAPI, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi.errors import RateLimitExceeded

from ftskit.core.config import settings
from ftskit.core.database import database
from ftskit.api import tokenize
from ftskit.middlewares.access_logger import AccessLoggingMiddleware
from ftskit.middlewares.logging import setup_logging
from ftskit.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from ftskit.services.tokenization_service import TokenizationService
from ftskit.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
)
from ftskit.utils.telemetry import setup_observability

logger = logging.getLogger(__name__)

is_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    global is_ready

    for attempt in range(settings.DB_CONNECT_RETRIES):
        try:
            with database.engine.connect() as conn:
                conn.execute(sqlalchemy.text("SELECT 1"))
            logger.info("✅ Successfully connected to the database!")
            break
        except OperationalError as e:
            logger.warning(
                f"❌ Database not ready (attempt {attempt + 1}/{settings.DB_CONNECT_RETRIES}) - {e}"
            )
            time.sleep(settings.DB_CONNECT_DELAY_SECONDS)
    else:
        raise RuntimeError("🚨 Could not connect to the database after retries!")

    is_ready = TokenizationService(database.engine).probe()
    if not is_ready:
        logger.error("🚨 fts3tokenize is not available in this SQLite build")

    yield


# ✅ SETUP LOGGING FIRST
setup_logging()


app = FastAPI(
    title="FTS Tokenizer API",
    description="Preview how SQLite full-text tokenizers split text",
    version="1.0.0",
    lifespan=lifespan,
    debug=(not settings.ENV == "production"),
)

if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
    setup_observability(app, sqlalchemy_engine=database.engine)


# ===============
# Middlewares
# ===============
add_cors_middleware(app)
add_rate_limit(app)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(tokenize.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/liveness", status_code=204)
def liveness():
    return Response(status_code=204)


@app.api_route("/readiness", methods=["GET", "HEAD"], status_code=200)
def readiness():
    return {"status": "ready"} if is_ready else Response(status_code=503)


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
