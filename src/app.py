"""Storefront FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api import register_exception_handlers, routers
from storefront.domain import settings, storefront
from storefront.utils.logging import add_context, clear_context, get_logger

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Done at module level so uvicorn workers share it.
# PROTEAN_ENV selects the configuration overlay from domain.toml.
storefront.init()

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="E-commerce storefront: users, catalogue, cart, wishlist and orders",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the domain context and bind request details into the log context."""
    clear_context()
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    add_context(request_id=request_id, method=request.method, path=request.url.path)

    started = time.perf_counter()
    with storefront.domain_context():
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    logger.info(
        "Request completed",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
register_exception_handlers(app)
for router in routers:
    app.include_router(router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "name": storefront.name,
            "env": settings.env,
        }
    )
