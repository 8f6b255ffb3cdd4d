import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from procura.config import settings
from procura.database import init_db
from procura.logging_config import setup_logging
from procura.rate_limit import limiter
from procura.routers import (
    clients, products_api, services_api, quotations_api, invoices_api, dashboard_api, pdf_api,
)

# Loglama sistemini baslat (uygulama ayaga kalkmadan once)
setup_logging()

logger = logging.getLogger(__name__)

# FastAPI uygulamasini olustur
app = FastAPI(
    title=settings.APP_NAME,
    description="Musteri, urun/hizmet, teklif ve fatura yonetimi",
    version="0.1.0",
)

logger.info("%s uygulamasi baslatiliyor...", settings.APP_NAME)

# Bellek ici veritabani: tablolar her acilista bos olusturulur
init_db()

# slowapi'yi FastAPI state'e bagla
app.state.limiter = limiter

# ---------------------------------------------------------------------------
# CORS Ayarlari
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


# ---------------------------------------------------------------------------
# Guvenlik Header'lari Middleware
# ---------------------------------------------------------------------------
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Her yanita guvenlik header'lari ekler."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app.add_middleware(SecurityHeadersMiddleware)


# ---------------------------------------------------------------------------
# Hata yanitlari
# Tum hatalar {"error": "<mesaj>"} seklinde JSON doner.
# ---------------------------------------------------------------------------
def _format_validation_errors(exc: RequestValidationError) -> str:
    """Pydantic hatalarini 'alan: mesaj' seklinde tek satira cevir."""
    messages = []
    for err in exc.errors():
        field = ".".join(
            str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")
        )
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(messages)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Eksik/gecersiz alanlar 400 ile doner."""
    message = _format_validation_errors(exc)
    logger.warning("Gecersiz istek: %s %s -> %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Rate limit asildiginda kullaniciya uygun hata mesaji dondur."""
    logger.warning("Rate limit asildi: %s %s", request.method, request.url)
    return JSONResponse(
        status_code=429,
        content={
            "error": "Too many requests, please try again later",
            "retry_after": exc.detail,
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Servislerin firlattigi HTTPException'lar (400, 404, ...)."""
    logger.warning("HTTP %d hatasi: %s %s", exc.status_code, request.method, request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Yakalanmamis hatalar 500 doner, surec ayakta kalir."""
    logger.error("Yakalanmamis hata: %s %s", request.method, request.url, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# API Router'lari
app.include_router(clients.router, prefix="/api/clients", tags=["Clients"])
app.include_router(products_api.router, prefix="/api/products", tags=["Products"])
app.include_router(services_api.router, prefix="/api/services", tags=["Services"])
app.include_router(quotations_api.router, prefix="/api/quotations", tags=["Quotations"])
app.include_router(invoices_api.router, prefix="/api/invoices", tags=["Invoices"])
app.include_router(dashboard_api.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(pdf_api.router, prefix="/api/pdf", tags=["PDF"])
