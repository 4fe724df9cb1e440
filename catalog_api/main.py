# catalog_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .categories import build_categories_router
from .categories.store import CategoryStore, ProductCatalog, load_categories, load_products
from .config import Settings, get_settings
from .error_handlers import register_error_handlers
from .observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"{settings.app_name} started with {len(app.state.category_store)} categories "
        f"and {len(app.state.product_catalog)} products"
    )
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    settings: Optional[Settings] = None,
    category_store: Optional[CategoryStore] = None,
    product_catalog: Optional[ProductCatalog] = None,
) -> FastAPI:
    """Build the application with its own in-memory stores.

    Stores not passed in are seeded from the files named in ``settings``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="REST endpoint for storefront categories and their products.",
        version="1.0.0",
        lifespan=lifespan,
    )
    # explicit None checks: an injected empty store is falsy
    if category_store is None:
        category_store = CategoryStore(load_categories(settings.categories_seed_file))
    if product_catalog is None:
        product_catalog = ProductCatalog(load_products(settings.products_seed_file))
    app.state.settings = settings
    app.state.category_store = category_store
    app.state.product_catalog = product_catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def health_check(request: Request):
        return {
            "status": "ok",
            "service": settings.app_name,
            "categories": len(request.app.state.category_store),
        }

    app.include_router(build_categories_router(settings.categories_prefix))
    register_error_handlers(app, expose_error_details=settings.expose_error_details)
    return app


app = create_app()
