from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from survey_analytics.api import analytics, sentiment
from survey_analytics.core.sentiment.analyzer import analyzer_for
from survey_analytics.middlewares.access_logger import AccessLoggingMiddleware
from survey_analytics.middlewares.logging import setup_logging
from survey_analytics.middlewares.security import (
    SecurityHeadersMiddleware,
    add_cors_middleware,
    add_rate_limit,
)
from survey_analytics.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
)
from survey_analytics.core.config import settings


is_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    global is_ready

    # warm the shared analyzer so the first request does not pay for it
    analyzer_for()
    logging.getLogger(__name__).info("✅ Sentiment analyzer ready")
    is_ready = True

    yield

    is_ready = False


# ✅ SETUP LOGGING FIRST
setup_logging()


app = FastAPI(
    title="Survey Analytics API",
    description="Lexicon sentiment, thematic attribution, statistics and clustering for survey responses",
    version="1.0.0",
    lifespan=lifespan,
    debug=(not settings.ENV == "production"),
)


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
app.include_router(sentiment.router)
app.include_router(analytics.router)


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
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
