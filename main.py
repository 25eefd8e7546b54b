import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from shorturl_app.config import settings
from shorturl_app.dependencies import get_address_store
from shorturl_app.logging_config import setup_logging
from shorturl_app.services.short_code_factory import ShortCodeFactory
from shorturl_app.api.v1 import urls, web

setup_logging(settings.log_level)
logger = logging.getLogger("shorturl_app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Invalid token or store settings raise ValueError here, before serving
    ShortCodeFactory.create_strategy()
    get_address_store()
    logger.info("Starting server: %s", settings.base_url)
    yield
    logger.info("Server stopped")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="An in-memory URL shortener built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan
)


######## Include routers
# The JSON API goes first; web.router ends with the catch-all /{token} route
app.include_router(urls.router, prefix="/api/v1")
app.include_router(web.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
