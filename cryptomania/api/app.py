"""FastAPI application setup."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from cryptomania.api.deps import get_store
from cryptomania.api.routes import entries
from cryptomania.config import (
    PRODUCT_DESCRIPTION,
    PRODUCT_NAME,
    PRODUCT_TAGLINE,
    PRODUCT_VERSION,
    get_settings,
)
from cryptomania.core.portfolio.errors import ValidationError

settings = get_settings()

# Rate limiter - key by IP address, applied to every route
limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])

app = FastAPI(
    title=f"{PRODUCT_NAME} API",
    description=PRODUCT_DESCRIPTION,
    version=PRODUCT_VERSION,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.exception_handler(ValidationError)
def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Reject entries that fail field validation."""
    return JSONResponse(
        status_code=422,
        content={"detail": [{"field": e.field, "message": e.message} for e in exc.errors]},
    )


@app.on_event("startup")
def startup():
    """Create (and seed) the portfolio store on startup."""
    get_store()


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {
        "name": PRODUCT_NAME,
        "version": PRODUCT_VERSION,
        "status": "ok",
        "tagline": PRODUCT_TAGLINE,
    }


# Mount API routers
app.include_router(entries.router, tags=["portfolio"])
