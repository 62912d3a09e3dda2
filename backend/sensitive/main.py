import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from sensitive.api.admin import router as admin_router
from sensitive.api.filter import router as filter_router
from sensitive.config import settings
from sensitive.engine.errors import CacheError, SensitiveError, WordSourceError
from sensitive.middleware.auth_guard import AuthGuardMiddleware
from sensitive.middleware.body_limit import BodyLimitMiddleware

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


limiter = Limiter(key_func=get_remote_address)

app = FastAPI(
    title="Sensitive",
    description="Sensitive word detection and redaction",
    version="0.1.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(BodyLimitMiddleware)
app.add_middleware(AuthGuardMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",")],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(filter_router)
app.include_router(admin_router)


@app.exception_handler(SensitiveError)
async def sensitive_error_handler(request: Request, exc: SensitiveError):
    status_code = 503 if isinstance(exc, (CacheError, WordSourceError)) else 500
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "error": type(exc).__name__})


@app.get("/health")
async def health():
    return {"status": "ok"}
