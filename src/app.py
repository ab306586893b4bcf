"""Storefront FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - unset / "test" → event_processing = "sync"  (handlers fire on commit)
#   - "production"   → event_processing = "async" (handlers fire via Engine)
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.domain import storefront
from storefront.utils.logging import add_context, clear_context

storefront.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Baby clothing storefront — catalog, cart, checkout and back office",
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
    """Push the storefront domain context and bind request details to log lines."""
    add_context(path=request.url.path, method=request.method, user_id=request.headers.get("x-user-id"))
    try:
        with storefront.domain_context():
            return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.admin.api import router as admin_router  # noqa: E402
from storefront.catalogue.api import router as product_router  # noqa: E402
from storefront.identity.api import router as identity_router  # noqa: E402
from storefront.ordering.api import cart_router, order_router  # noqa: E402
from storefront.reviews.api import router as review_router  # noqa: E402
from storefront.shared.http import register_storefront_exception_handlers  # noqa: E402
from storefront.wishlist.api import router as wishlist_router  # noqa: E402

app.include_router(identity_router)
app.include_router(product_router)
app.include_router(review_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(wishlist_router)
app.include_router(admin_router)

register_storefront_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": storefront.name}})
