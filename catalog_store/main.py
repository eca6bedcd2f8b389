"""
Catalog Store Application

GraphQL API over shopping carts and products, each record kept as one JSON
file in a per-type directory.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from strawberry.fastapi import GraphQLRouter

from .core.config import Settings, get_settings
from .database import create_databases, seed_sample_products
from .schema import schema

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI app with the GraphQL router mounted"""
    settings = settings or get_settings()
    product_db, cart_db = create_databases(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info("Catalog Store starting up...")
        product_db.store.ensure_directory()
        cart_db.store.ensure_directory()
        logger.info(f"Products directory: {product_db.store.directory}")
        logger.info(f"Carts directory: {cart_db.store.directory}")
        if settings.seed_sample_products:
            seed_sample_products(product_db)
        yield
        logger.info("Catalog Store shutting down...")

    async def get_context() -> dict:
        return {"product_db": product_db, "cart_db": cart_db}

    app = FastAPI(
        title=settings.app_name,
        description="GraphQL API for shopping carts and products",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=settings.graphql_ide,
    )
    app.include_router(graphql_router, prefix=settings.graphql_path)

    @app.get("/")
    async def home():
        """Service descriptor"""
        return {
            "message": f"{settings.app_name} API",
            "endpoints": {
                "graphql": settings.graphql_path,
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "catalog-store"}

    return app


configure_logging(get_settings())
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "catalog_store.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
