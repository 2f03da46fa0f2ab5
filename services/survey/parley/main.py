from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from parley.analytics.router import router as analytics_router
from parley.config import Settings, get_settings
from parley.database import init_db
from parley.identifiers.router import router as identifiers_router
from parley.rate_limit import limiter
from parley.responses.router import router as responses_router
from parley.store import MemoryRecordStore
from parley.surveys.router import router as surveys_router
from shared.logging_setup import configure_logging
from shared.middleware.error_handler import error_envelope_middleware
from shared.middleware.request_id import request_id_middleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if settings.store_backend == "postgres":
        init_db(settings.survey_database_url)
    yield


SWAGGER_DESCRIPTION = """\
## Parley Survey Service

Owns surveys, their public short codes, and the responses collected
against them.

### Domain Tags

| Tag | Description |
|-----|-------------|
| **Surveys** | Survey CRUD, lookup by UUID or short code, linkage audit |
| **Responses** | Respondent sessions: start, answer, go back, complete, partial |
| **Analytics** | Response counts, completion rate, per-question aggregates |
| **Identifiers** | Issue unused short codes and creator aliases |

### Survey Identifiers

Any `{identifier}` in a path, and `survey_id` when creating a response,
accepts either the survey UUID or its short code (case-insensitive).
Responses are always stored against the UUID.

### Status Transitions

```
Survey:   DRAFT → ACTIVE → CLOSED
Response: IN_PROGRESS → COMPLETED | PARTIAL
```
"""


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Parley Survey Service",
        version="0.1.0",
        description=SWAGGER_DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if settings.store_backend == "memory":
        app.state.store = MemoryRecordStore()

    limiter.enabled = settings.env_name != "development"
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Middleware is applied in reverse-registration order (last added = outermost).
    # CORS must be outermost so ALL responses (including 429s) carry CORS headers.
    app.add_middleware(SlowAPIMiddleware)
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(error_envelope_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    app.include_router(surveys_router, prefix="/api/v1")
    app.include_router(responses_router, prefix="/api/v1")
    app.include_router(analytics_router, prefix="/api/v1")
    app.include_router(identifiers_router, prefix="/api/v1")

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "ok", "service": "survey"}

    return app


app = create_app()
