"""
Solebysole Shop - Main FastAPI Application

Single entry point for all API routes.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.errors import ERROR_INVALID_REQUEST, ShopError
from core.logging import get_logger
from core.middleware import SecurityHeadersMiddleware
from core.routers.cart import router as cart_router
from core.routers.products import router as products_router
from core.routers.session import router as session_router
from core.routers.users import router as users_router
from core.services.database import close_database, init_database

logger = get_logger(__name__)

CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    await init_database()
    yield
    # Shutdown
    await close_database()


app = FastAPI(
    title="Solebysole Shop",
    description="Product catalog, user accounts and carts",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"],
)


# ==================== ERROR MAPPING ====================

@app.exception_handler(ShopError)
async def shop_error_handler(request: Request, exc: ShopError):
    if exc.status_code >= 500:
        logger.error("Unhandled shop error on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "detail": exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Field constraint violations are plain 400s"""
    return JSONResponse(
        status_code=400,
        content={"message": ERROR_INVALID_REQUEST, "errors": jsonable_encoder(exc.errors())},
    )


# ==================== ROUTES ====================

app.include_router(products_router)
app.include_router(users_router)
app.include_router(session_router)
app.include_router(cart_router)


@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "solebysole"}
