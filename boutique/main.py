# boutique/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI, Request

from boutique.core.config import get_settings
from boutique.core.error_handlers import register_error_handlers
from boutique.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from boutique.models import user as _user_models  # noqa: F401
from boutique.models import product as _product_models  # noqa: F401
from boutique.models import cart as _cart_models  # noqa: F401
from boutique.models import wishlist as _wishlist_models  # noqa: F401
from boutique.models import order as _order_models  # noqa: F401


# Routers
from boutique.routers.users import router as users_router
from boutique.routers.auth import router as auth_router
from boutique.routers.products import router as products_router
from boutique.routers.cart import router as cart_router
from boutique.routers.wishlist import router as wishlist_router
from boutique.routers.orders import router as orders_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create missing tables before serving.

    An unreachable database aborts startup.
    """
    logger.info("Preparing boutique tables")
    try:
        create_db_and_tables()
    except Exception as e:
        logger.error(f"Database unavailable at startup: {e}")
        raise
    logger.info("Boutique tables ready")
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.middleware("http")
async def trace_requests(request: Request, call_next):
    """Log every incoming request before routing."""
    logger.info(f"[REQUEST] {request.method} {request.url.path}")
    return await call_next(request)


app.include_router(users_router, prefix=settings.API_PREFIX)
app.include_router(auth_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(cart_router, prefix=settings.API_PREFIX)
app.include_router(wishlist_router, prefix=settings.API_PREFIX)
app.include_router(orders_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "boutique-backend"}
