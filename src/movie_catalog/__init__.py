from typing import Optional
from fastapi import FastAPI

from movie_catalog.api.router import api_router
from movie_catalog.common.utils.exception_handlers import register_exception_handlers
from movie_catalog.common.utils.middlewares import setup_middlewares
from movie_catalog.config.settings import Settings, settings as default_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Movie Catalog API",
        description="API for managing a movie catalog with genre and language lookups",
        version="1.0.0",
        debug=settings.DEBUG,
    )

    register_exception_handlers(app)
    setup_middlewares(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        return {"message": "Welcome to Movie Catalog API. Go to /docs for documentation."}

    return app
