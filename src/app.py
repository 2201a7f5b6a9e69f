"""Loyalty FastAPI application.

Web server that processes customer and order commands synchronously via HTTP.
Every request under a domain prefix is wrapped in the loyalty domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loyalty.api.routes import customer_router, maintenance_router, order_router
from loyalty.domain import loyalty
from protean.integrations.fastapi import register_exception_handlers

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay applied from pyproject.toml.
loyalty.init()

_DOMAIN_PREFIXES = ("/customers", "/orders", "/maintenance")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Loyalty API",
    description="Customers, tier-priced orders and loyalty notifications",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the loyalty domain context for every domain request."""
    if request.url.path.startswith(_DOMAIN_PREFIXES):
        with loyalty.domain_context():
            response = await call_next(request)
        return response
    # Health check, docs, etc.
    return await call_next(request)


register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(customer_router)
app.include_router(order_router)
app.include_router(maintenance_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"loyalty": {"name": loyalty.name}},
        }
    )
